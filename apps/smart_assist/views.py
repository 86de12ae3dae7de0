# apps/smart_assist/views.py
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from .client import generate_email_draft, generate_segment_definition
from .providers import SmartAssistError
from .serializers import EmailDraftRequestSerializer, EmailDraftSerializer, SegmentPromptSerializer
import logging

logger = logging.getLogger(__name__)


@api_view(['POST'])
def smart_generate_segment(request):
    """Turn a natural-language prompt into a segment definition"""
    serializer = SegmentPromptSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        definition = generate_segment_definition(serializer.validated_data['prompt'])
    except SmartAssistError as e:
        logger.error(f"Segment provider failed: {e}")
        return Response({
            'error': 'Segment generation is unavailable'
        }, status=status.HTTP_503_SERVICE_UNAVAILABLE)
    except Exception:
        logger.exception("Error generating segment definition")
        return Response({
            'error': 'Internal server error'
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({'definition': definition.to_dict()})


@api_view(['POST'])
def smart_draft_email(request):
    """Draft email copy for one customer"""
    serializer = EmailDraftRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data
    try:
        draft = generate_email_draft(
            data['customerEmail'],
            recent_event_type=data.get('recentEventType') or None,
            recommended_sku=data.get('recommendedSku') or None,
        )
    except SmartAssistError as e:
        logger.error(f"Draft provider failed: {e}")
        return Response({
            'error': 'Draft generation is unavailable'
        }, status=status.HTTP_503_SERVICE_UNAVAILABLE)
    except Exception:
        logger.exception("Error generating smart draft")
        return Response({
            'error': 'Internal server error'
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(EmailDraftSerializer(draft.to_dict()).data)
