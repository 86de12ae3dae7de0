# apps/events/views.py
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from .ingestion import ingest_event
from .serializers import EventIngestSerializer
import logging

logger = logging.getLogger(__name__)

MAX_IDEMPOTENCY_KEY_LENGTH = 255


@api_view(['POST'])
def record_event(request):
    """Ingest one customer event, deduplicated by the Idempotency-Key header"""
    serializer = EventIngestSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    idempotency_key = request.headers.get('Idempotency-Key')
    if idempotency_key and len(idempotency_key) > MAX_IDEMPOTENCY_KEY_LENGTH:
        return Response({
            'error': f'Idempotency-Key must be at most {MAX_IDEMPOTENCY_KEY_LENGTH} characters'
        }, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data
    try:
        event, created = ingest_event(
            data['email'],
            data['type'],
            properties=data.get('properties'),
            occurred_at=data.get('occurredAt'),
            idempotency_key=idempotency_key,
        )
    except Exception:
        logger.exception("Error recording event")
        return Response({
            'error': 'Internal server error'
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({
        'created': created,
        'eventId': event.id,
        'customerId': event.customer_id,
    }, status=status.HTTP_201_CREATED if created else status.HTTP_200_OK)
