from rest_framework import serializers
from apps.events.models import Event
from .models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    event_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Customer
        fields = ('id', 'email', 'event_count', 'created_at', 'updated_at')


class CustomerEventSerializer(serializers.ModelSerializer):
    class Meta:
        model = Event
        fields = ('id', 'type', 'properties', 'occurred_at', 'idempotency_key', 'created_at')


class CustomerDetailSerializer(serializers.ModelSerializer):
    events = serializers.SerializerMethodField()

    class Meta:
        model = Customer
        fields = ('id', 'email', 'created_at', 'updated_at', 'events')

    def get_events(self, obj):
        events = obj.events.order_by('-occurred_at', '-id')
        return CustomerEventSerializer(events, many=True).data
