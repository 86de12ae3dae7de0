# apps/campaigns/services.py
"""
Campaign workflow: snapshot on creation, draft generation, draft review and
simulated sending.

Every step can be re-run safely. Drafts and sends are upserted on their
(campaign, customer) unique constraints, so a repeated request updates rows
in place instead of duplicating them.
"""
from collections import defaultdict
from copy import deepcopy
from dataclasses import dataclass
from datetime import timedelta
from django.conf import settings
from django.db import transaction
from django.utils import timezone
from apps.events.models import Event
from apps.segments.definitions import parse_definition
from apps.segments.evaluation import matching_customers
from apps.smart_assist.client import generate_email_draft, get_draft_provider
from .delivery import get_delivery_backend
from .exceptions import CampaignStateError, DeliveryError, DraftTransitionError, NoApprovedDrafts
from .models import Campaign, EmailDraft, Send
from .utils import extract_recent_event_type, extract_recommended_sku
import logging

logger = logging.getLogger(__name__)


@dataclass
class SendResult:
    sent_count: int
    failed_count: int


def create_campaign(segment, name, description=None):
    """Create a draft campaign holding a frozen copy of the segment definition"""
    campaign = Campaign.objects.create(
        name=name,
        description=description,
        segment=segment,
        segment_snapshot=deepcopy(segment.definition),
        status=Campaign.DRAFT,
    )
    logger.info(f"Campaign created: {campaign.name} ({campaign.id}) for segment {segment.id}")
    return campaign


def generate_drafts(campaign, provider=None, now=None):
    """
    Draft one email per customer currently matched by the campaign snapshot.

    The snapshot is validated before anything is written. Segment membership
    is evaluated live on every run even though the definition is frozen.
    Returns the number of drafts created or refreshed.
    """
    if campaign.status not in (Campaign.DRAFT, Campaign.DRAFTED):
        raise CampaignStateError(
            f'Cannot generate drafts for a campaign with status "{campaign.status}"'
        )

    definition = parse_definition(campaign.segment_snapshot)
    customers = list(matching_customers(definition, now))
    if not customers:
        logger.info(f"Campaign {campaign.id}: no customers match the segment snapshot")
        return 0

    # One query for every matched customer's recent events, newest first
    cutoff = (now or timezone.now()) - timedelta(days=settings.DRAFT_EVENT_WINDOW_DAYS)
    recent_events = Event.objects.filter(
        customer_id__in=[customer.id for customer in customers],
        occurred_at__gte=cutoff,
    ).order_by('-occurred_at', '-id')

    events_by_customer = defaultdict(list)
    for event in recent_events:
        events_by_customer[event.customer_id].append(event)

    provider = provider or get_draft_provider()
    drafted_count = 0
    # All drafts land together with the status change, or none do
    with transaction.atomic():
        for customer in customers:
            events = events_by_customer.get(customer.id, [])
            recommended_sku = extract_recommended_sku(events)
            recent_event_type = extract_recent_event_type(events)

            draft = generate_email_draft(
                customer.email,
                recent_event_type=recent_event_type,
                recommended_sku=recommended_sku,
                provider=provider,
            )

            EmailDraft.objects.update_or_create(
                campaign=campaign,
                customer=customer,
                defaults={
                    'subject': draft.subject,
                    'body': draft.body,
                    'recommended_sku': recommended_sku,
                },
            )
            drafted_count += 1

        if drafted_count > 0 and campaign.status == Campaign.DRAFT:
            campaign.status = Campaign.DRAFTED
            campaign.save(update_fields=['status', 'updated_at'])

    logger.info(f"Campaign {campaign.id}: {drafted_count} drafts generated")
    return drafted_count


def review_draft(campaign, draft_id, new_status):
    """
    Approve or reject a generated draft.

    Raises ``EmailDraft.DoesNotExist`` when the draft is not part of the
    campaign and ``DraftTransitionError`` when it was already reviewed.
    """
    if new_status not in EmailDraft.REVIEW_STATUSES:
        raise ValueError(f"status must be one of: {', '.join(EmailDraft.REVIEW_STATUSES)}")

    draft = EmailDraft.objects.get(pk=draft_id, campaign=campaign)

    # Conditional update so two concurrent reviews cannot both succeed
    updated = EmailDraft.objects.filter(pk=draft.pk, status=EmailDraft.GENERATED).update(
        status=new_status,
        updated_at=timezone.now(),
    )
    if not updated:
        draft.refresh_from_db(fields=['status'])
        raise DraftTransitionError(f'Cannot transition draft from status "{draft.status}"')

    draft.refresh_from_db()
    logger.info(f"Draft {draft.id} in campaign {campaign.id} marked {new_status}")
    return draft


def send_campaign(campaign, backend=None):
    """Deliver every approved draft and record one Send per customer"""
    if campaign.status not in (Campaign.DRAFTED, Campaign.SENDING, Campaign.FAILED, Campaign.SENT):
        raise CampaignStateError(
            f'Cannot send a campaign with status "{campaign.status}"'
        )

    approved = list(
        campaign.drafts.filter(status=EmailDraft.APPROVED).select_related('customer')
    )
    if not approved:
        raise NoApprovedDrafts('No approved drafts to send')

    if campaign.status == Campaign.DRAFTED:
        campaign.status = Campaign.SENDING
        campaign.save(update_fields=['status', 'updated_at'])

    backend = backend or get_delivery_backend()
    sent_count = 0
    failed_count = 0

    for draft in approved:
        try:
            backend.deliver(draft)
        except DeliveryError as e:
            logger.warning(f"Delivery failed for draft {draft.id}: {e}")
            Send.objects.update_or_create(
                campaign=campaign,
                customer=draft.customer,
                defaults={'status': Send.FAILED, 'error': str(e)},
            )
            failed_count += 1
        else:
            Send.objects.update_or_create(
                campaign=campaign,
                customer=draft.customer,
                defaults={'status': Send.SENT, 'sent_at': timezone.now(), 'error': None},
            )
            sent_count += 1

    # Partial success is still reported as sent
    final_status = Campaign.SENT if sent_count > 0 else Campaign.FAILED
    if campaign.status != final_status and campaign.can_transition_to(final_status):
        campaign.status = final_status
        campaign.save(update_fields=['status', 'updated_at'])

    logger.info(
        f"Campaign {campaign.id} send finished: {sent_count} sent, {failed_count} failed"
    )
    return SendResult(sent_count=sent_count, failed_count=failed_count)
