import strawberry
from typing import List, Optional
from apps.campaigns.models import Campaign, EmailDraft
from .types import CampaignType, EmailDraftType


@strawberry.type
class CampaignQueries:

    @strawberry.field
    def campaigns(self) -> List[CampaignType]:
        return Campaign.objects.select_related('segment').order_by('-updated_at', '-id')

    @strawberry.field
    def campaign(self, id: int) -> Optional[CampaignType]:
        return Campaign.objects.select_related('segment').filter(id=id).first()

    @strawberry.field
    def drafts(self, campaign_id: int) -> List[EmailDraftType]:
        return EmailDraft.objects.select_related('customer').filter(
            campaign_id=campaign_id
        ).order_by('created_at', 'id')
