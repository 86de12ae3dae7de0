from rest_framework import serializers
from apps.segments.models import Segment
from .models import Campaign, EmailDraft, Send


class SegmentSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Segment
        fields = ('id', 'name')


class CustomerSummarySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    email = serializers.EmailField()


class CampaignCreateSerializer(serializers.Serializer):
    name = serializers.CharField(
        max_length=100,
        error_messages={'required': 'Campaign name is required', 'blank': 'Campaign name is required'}
    )
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    segmentId = serializers.IntegerField(
        error_messages={'required': 'segmentId is required', 'invalid': 'segmentId is required'}
    )

    def validate_description(self, value):
        if value is None:
            return None
        return value.strip() or None


class CampaignSerializer(serializers.ModelSerializer):
    segment = SegmentSummarySerializer(read_only=True)

    class Meta:
        model = Campaign
        fields = ('id', 'name', 'description', 'status', 'segment', 'segment_snapshot', 'created_at', 'updated_at')


class CampaignListSerializer(serializers.ModelSerializer):
    segment = SegmentSummarySerializer(read_only=True)

    class Meta:
        model = Campaign
        fields = ('id', 'name', 'description', 'status', 'segment', 'updated_at')


class EmailDraftSerializer(serializers.ModelSerializer):
    customer = CustomerSummarySerializer(read_only=True)

    class Meta:
        model = EmailDraft
        fields = ('id', 'customer', 'subject', 'body', 'recommended_sku', 'status', 'created_at', 'updated_at')


class SendSerializer(serializers.ModelSerializer):
    customer = CustomerSummarySerializer(read_only=True)

    class Meta:
        model = Send
        fields = ('id', 'customer', 'status', 'sent_at', 'error', 'created_at', 'updated_at')


class CampaignDetailSerializer(CampaignSerializer):
    drafts = serializers.SerializerMethodField()
    sends = serializers.SerializerMethodField()

    class Meta(CampaignSerializer.Meta):
        fields = CampaignSerializer.Meta.fields + ('drafts', 'sends')

    def get_drafts(self, obj):
        drafts = obj.drafts.select_related('customer').order_by('created_at', 'id')
        return EmailDraftSerializer(drafts, many=True).data

    def get_sends(self, obj):
        sends = obj.sends.select_related('customer').order_by('created_at', 'id')
        return SendSerializer(sends, many=True).data


class DraftReviewSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=EmailDraft.REVIEW_STATUSES,
        error_messages={
            'required': 'status must be one of: approved, rejected',
            'invalid_choice': 'status must be one of: approved, rejected',
        }
    )
