import strawberry_django
from strawberry import auto
from apps.segments.models import Segment


@strawberry_django.type(Segment)
class SegmentType:
    id: auto
    name: auto
    description: auto
    definition: auto
    created_at: auto
    updated_at: auto
