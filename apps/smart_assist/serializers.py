from rest_framework import serializers


class SegmentPromptSerializer(serializers.Serializer):
    prompt = serializers.CharField(
        error_messages={'required': 'Prompt is required', 'blank': 'Prompt is required'}
    )


class EmailDraftRequestSerializer(serializers.Serializer):
    customerEmail = serializers.CharField(
        error_messages={'required': 'customerEmail is required', 'blank': 'customerEmail is required'}
    )
    recentEventType = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    recommendedSku = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class EmailDraftSerializer(serializers.Serializer):
    subject = serializers.CharField()
    body = serializers.CharField()
