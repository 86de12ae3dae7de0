import strawberry_django
from typing import List
from strawberry import auto
from apps.campaigns.models import Campaign, EmailDraft, Send
from apps.customers.graphql.types import CustomerType
from apps.segments.graphql.types import SegmentType


@strawberry_django.type(EmailDraft)
class EmailDraftType:
    id: auto
    customer: CustomerType
    subject: auto
    body: auto
    recommended_sku: auto
    status: auto
    created_at: auto
    updated_at: auto


@strawberry_django.type(Send)
class SendType:
    id: auto
    customer: CustomerType
    status: auto
    sent_at: auto
    error: auto


@strawberry_django.type(Campaign)
class CampaignType:
    id: auto
    name: auto
    description: auto
    status: auto
    segment: SegmentType
    segment_snapshot: auto
    created_at: auto
    updated_at: auto
    drafts: List[EmailDraftType]
    sends: List[SendType]
