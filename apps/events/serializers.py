from rest_framework import serializers
from apps.customers.utils import is_valid_email, normalize_email


class CustomerRefSerializer(serializers.Serializer):
    email = serializers.CharField(required=False)


class EventIngestSerializer(serializers.Serializer):
    """Incoming event payload; the email may also arrive as ``customer.email``"""
    email = serializers.CharField(
        required=False,
        trim_whitespace=False,
        error_messages={'blank': 'Email is required'}
    )
    customer = CustomerRefSerializer(required=False)
    type = serializers.CharField(
        max_length=100,
        error_messages={
            'required': 'Event type is required',
            'blank': 'Event type is required',
            'max_length': 'Event type must be at most 100 characters',
        }
    )
    properties = serializers.JSONField(required=False)
    occurredAt = serializers.DateTimeField(
        required=False,
        error_messages={'invalid': 'Invalid occurredAt date format'}
    )

    def validate_properties(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError('Properties must be a JSON object')
        return value

    def validate(self, data):
        email = data.get('email')
        if email is None:
            email = (data.get('customer') or {}).get('email')
        if not email:
            raise serializers.ValidationError({'email': 'Email is required'})

        email = normalize_email(email)
        if len(email) > 254 or not is_valid_email(email):
            raise serializers.ValidationError({'email': 'Invalid email format'})

        data['email'] = email
        return data
