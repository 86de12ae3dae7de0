import strawberry
from typing import List, Optional
from apps.segments.models import Segment
from .types import SegmentType


@strawberry.type
class SegmentQueries:

    @strawberry.field
    def segments(self) -> List[SegmentType]:
        return Segment.objects.order_by('-updated_at', '-id')

    @strawberry.field
    def segment(self, id: int) -> Optional[SegmentType]:
        return Segment.objects.filter(id=id).first()
