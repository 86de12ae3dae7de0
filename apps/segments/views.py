from django.db.models import ProtectedError
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from .definitions import InvalidSegmentDefinition, parse_definition
from .evaluation import evaluate_segment
from .models import Segment
from .serializers import (
    DefinitionPreviewSerializer,
    PreviewResultSerializer,
    SegmentListSerializer,
    SegmentSerializer,
)
import logging

logger = logging.getLogger(__name__)


class SegmentViewSet(viewsets.ModelViewSet):
    queryset = Segment.objects.all()

    def get_queryset(self):
        return Segment.objects.order_by('-updated_at', '-id')

    def get_serializer_class(self):
        if self.action == 'list':
            return SegmentListSerializer
        if self.action == 'preview_definition':
            return DefinitionPreviewSerializer
        return SegmentSerializer

    def perform_create(self, serializer):
        segment = serializer.save()
        logger.info(f"Segment created: {segment.name} ({segment.id})")

    def destroy(self, request, *args, **kwargs):
        segment = self.get_object()
        try:
            segment.delete()
        except ProtectedError:
            return Response({
                'error': 'Segment is referenced by existing campaigns'
            }, status=status.HTTP_409_CONFLICT)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['get'])
    def preview(self, request, pk=None):
        """Evaluate a stored segment against current events"""
        segment = self.get_object()
        try:
            definition = parse_definition(segment.definition)
        except InvalidSegmentDefinition as e:
            return Response({
                'error': f'Invalid segment definition: {e}'
            }, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = evaluate_segment(definition)
        except Exception:
            logger.exception(f"Error previewing segment {segment.id}")
            return Response({
                'error': 'Internal server error'
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(PreviewResultSerializer(result.to_dict()).data)

    @action(detail=False, methods=['post'], url_path='preview')
    def preview_definition(self, request):
        """Evaluate an unsaved definition"""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        definition = parse_definition(serializer.validated_data['definition'])

        try:
            result = evaluate_segment(definition)
        except Exception:
            logger.exception("Error previewing segment definition")
            return Response({
                'error': 'Internal server error'
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(PreviewResultSerializer(result.to_dict()).data)
