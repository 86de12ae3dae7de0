from django.db import models
from django.core.exceptions import ValidationError


class Campaign(models.Model):
    class Meta:
        app_label = 'campaigns'
        indexes = [
            models.Index(fields=['status'], name='campaign_status_idx'),
        ]

    DRAFT = 'draft'
    DRAFTED = 'drafted'
    SENDING = 'sending'
    SENT = 'sent'
    FAILED = 'failed'

    STATUS_CHOICES = [
        (DRAFT, 'Draft'),
        (DRAFTED, 'Drafted'),
        (SENDING, 'Sending'),
        (SENT, 'Sent'),
        (FAILED, 'Failed'),
    ]

    name = models.CharField(max_length=100)
    description = models.TextField(null=True, blank=True)
    segment = models.ForeignKey('segments.Segment', on_delete=models.PROTECT, related_name='campaigns')
    # Copy of segment.definition taken at creation; never rewritten
    segment_snapshot = models.JSONField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=DRAFT)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    def can_transition_to(self, new_status):
        """Validate status transitions"""
        valid_transitions = {
            self.DRAFT: [self.DRAFTED],
            self.DRAFTED: [self.SENDING],
            self.SENDING: [self.SENT, self.FAILED],
            self.SENT: [],  # Terminal state
            self.FAILED: [self.SENT],  # A retried send that goes through
        }
        return new_status in valid_transitions.get(self.status, [])

    def save(self, *args, **kwargs):
        if self.pk:  # Updating existing
            old_instance = Campaign.objects.filter(pk=self.pk).first()
            if old_instance is not None:
                if old_instance.status != self.status and not old_instance.can_transition_to(self.status):
                    raise ValidationError(
                        f"Cannot transition from {old_instance.status} to {self.status}"
                    )
                if old_instance.segment_snapshot != self.segment_snapshot:
                    raise ValidationError("segment_snapshot cannot be changed after creation")
        super().save(*args, **kwargs)


class EmailDraft(models.Model):
    class Meta:
        app_label = 'campaigns'
        constraints = [
            models.UniqueConstraint(
                fields=['campaign', 'customer'],
                name='unique_draft_per_campaign_customer'
            )
        ]

    GENERATED = 'generated'
    APPROVED = 'approved'
    REJECTED = 'rejected'

    STATUS_CHOICES = [
        (GENERATED, 'Generated'),
        (APPROVED, 'Approved'),
        (REJECTED, 'Rejected'),
    ]
    REVIEW_STATUSES = [APPROVED, REJECTED]

    campaign = models.ForeignKey(Campaign, on_delete=models.CASCADE, related_name='drafts')
    customer = models.ForeignKey('customers.Customer', on_delete=models.CASCADE, related_name='email_drafts')
    subject = models.CharField(max_length=255)
    body = models.TextField()
    recommended_sku = models.CharField(max_length=255, null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=GENERATED)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)


class Send(models.Model):
    class Meta:
        app_label = 'campaigns'
        constraints = [
            models.UniqueConstraint(
                fields=['campaign', 'customer'],
                name='unique_send_per_campaign_customer'
            )
        ]

    QUEUED = 'queued'
    SENT = 'sent'
    FAILED = 'failed'

    STATUS_CHOICES = [
        (QUEUED, 'Queued'),
        (SENT, 'Sent'),
        (FAILED, 'Failed'),
    ]

    campaign = models.ForeignKey(Campaign, on_delete=models.CASCADE, related_name='sends')
    customer = models.ForeignKey('customers.Customer', on_delete=models.CASCADE, related_name='sends')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=QUEUED)
    sent_at = models.DateTimeField(null=True, blank=True)
    error = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
