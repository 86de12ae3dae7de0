from rest_framework import serializers
from .definitions import InvalidSegmentDefinition, parse_definition
from .models import Segment


def validated_definition(value):
    """Parse a raw definition, returning its normalized wire form"""
    try:
        return parse_definition(value).to_dict()
    except InvalidSegmentDefinition as e:
        raise serializers.ValidationError(str(e))


class SegmentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Segment
        fields = ('id', 'name', 'description', 'definition', 'created_at', 'updated_at')
        extra_kwargs = {
            'name': {'error_messages': {
                'required': 'Segment name is required',
                'blank': 'Segment name is required',
            }},
        }

    def validate_description(self, value):
        if value is None:
            return None
        return value.strip() or None

    def validate_definition(self, value):
        return validated_definition(value)


class SegmentListSerializer(serializers.ModelSerializer):
    class Meta:
        model = Segment
        fields = ('id', 'name', 'description', 'updated_at')


class DefinitionPreviewSerializer(serializers.Serializer):
    definition = serializers.JSONField()

    def validate_definition(self, value):
        return validated_definition(value)


class PreviewCustomerSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    email = serializers.EmailField()


class PreviewResultSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    customers = PreviewCustomerSerializer(many=True)
