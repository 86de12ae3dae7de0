from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from apps.segments.definitions import InvalidSegmentDefinition
from apps.segments.models import Segment
from apps.smart_assist.providers import SmartAssistError
from .exceptions import CampaignStateError, DraftTransitionError, NoApprovedDrafts
from .models import Campaign, EmailDraft
from .serializers import (
    CampaignCreateSerializer,
    CampaignDetailSerializer,
    CampaignListSerializer,
    CampaignSerializer,
    DraftReviewSerializer,
    EmailDraftSerializer,
)
from . import services
import logging

logger = logging.getLogger(__name__)


class CampaignViewSet(mixins.CreateModelMixin,
                      mixins.ListModelMixin,
                      mixins.RetrieveModelMixin,
                      viewsets.GenericViewSet):
    queryset = Campaign.objects.all()

    def get_queryset(self):
        return Campaign.objects.select_related('segment').order_by('-updated_at', '-id')

    def get_serializer_class(self):
        if self.action == 'create':
            return CampaignCreateSerializer
        if self.action == 'list':
            return CampaignListSerializer
        if self.action == 'retrieve':
            return CampaignDetailSerializer
        if self.action == 'review_draft':
            return DraftReviewSerializer
        return CampaignSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        segment = Segment.objects.filter(pk=data['segmentId']).first()
        if segment is None:
            return Response({'error': 'Segment not found'}, status=status.HTTP_404_NOT_FOUND)

        campaign = services.create_campaign(
            segment,
            name=data['name'],
            description=data.get('description'),
        )
        return Response(CampaignSerializer(campaign).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['post'], url_path='generate-drafts')
    def generate_drafts(self, request, pk=None):
        """Generate (or refresh) one email draft per matching customer"""
        campaign = self.get_object()
        try:
            drafted_count = services.generate_drafts(campaign)
        except InvalidSegmentDefinition as e:
            return Response({
                'error': f'Invalid segment snapshot: {e}'
            }, status=status.HTTP_400_BAD_REQUEST)
        except CampaignStateError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except SmartAssistError as e:
            logger.error(f"Draft provider failed for campaign {campaign.id}: {e}")
            return Response({
                'error': 'Draft generation is unavailable'
            }, status=status.HTTP_503_SERVICE_UNAVAILABLE)
        except Exception:
            logger.exception(f"Error generating drafts for campaign {campaign.id}")
            return Response({
                'error': 'Internal server error'
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({'draftedCount': drafted_count})

    @action(detail=True, methods=['patch'], url_path=r'drafts/(?P<draft_id>[^/.]+)')
    def review_draft(self, request, pk=None, draft_id=None):
        """Approve or reject one generated draft"""
        campaign = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            draft = services.review_draft(campaign, draft_id, serializer.validated_data['status'])
        except (EmailDraft.DoesNotExist, ValueError):
            return Response({'error': 'Draft not found'}, status=status.HTTP_404_NOT_FOUND)
        except DraftTransitionError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except Exception:
            logger.exception(f"Error updating draft {draft_id} in campaign {campaign.id}")
            return Response({
                'error': 'Internal server error'
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(EmailDraftSerializer(draft).data)

    @action(detail=True, methods=['post'])
    def send(self, request, pk=None):
        """Simulate delivery of every approved draft"""
        campaign = self.get_object()
        try:
            result = services.send_campaign(campaign)
        except NoApprovedDrafts as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except CampaignStateError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except Exception:
            logger.exception(f"Error sending campaign {campaign.id}")
            return Response({
                'error': 'Internal server error'
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({
            'sentCount': result.sent_count,
            'failedCount': result.failed_count,
        })
