from django.db import models
from django.utils import timezone


class Event(models.Model):
    class Meta:
        constraints = [
            # NULL keys never collide, so events without a key are unaffected
            models.UniqueConstraint(
                fields=['customer', 'idempotency_key'],
                name='unique_event_idempotency_key'
            )
        ]
        indexes = [
            models.Index(fields=['type', 'occurred_at'], name='event_type_occurred_idx'),
            models.Index(fields=['customer', 'occurred_at'], name='event_customer_occurred_idx'),
        ]

    customer = models.ForeignKey('customers.Customer', on_delete=models.CASCADE, related_name='events')
    type = models.CharField(max_length=100)
    properties = models.JSONField(default=dict, blank=True)
    occurred_at = models.DateTimeField(default=timezone.now)
    idempotency_key = models.CharField(max_length=255, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.type} @ {self.occurred_at:%Y-%m-%d %H:%M}"
