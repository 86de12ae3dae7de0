# apps/segments/evaluation.py
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, List, Optional
from django.conf import settings
from django.db.models import Count
from django.db.models.fields.json import KeyTransform
from django.utils import timezone
from apps.customers.models import Customer
from apps.events.models import Event
from .definitions import (
    EventCountGteInLastDays,
    EventPropertyEquals,
    EventTypeInLastDays,
    SegmentDefinition,
)
from .performance import monitor_query_performance
import logging

logger = logging.getLogger(__name__)


@dataclass
class PreviewResult:
    count: int
    customers: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"count": self.count, "customers": self.customers}


def cutoff_for(days: int, now=None):
    """Start of the ``days`` window, or None when it reaches past the earliest datetime"""
    try:
        return (now or timezone.now()) - timedelta(days=days)
    except OverflowError:
        return None


def matching_customer_ids(definition: SegmentDefinition, now=None) -> List[int]:
    """Distinct ids of every customer the definition currently matches"""
    events = Event.objects.filter(type=definition.event_type).order_by()
    cutoff = cutoff_for(definition.days, now)
    if cutoff is not None:
        events = events.filter(occurred_at__gte=cutoff)

    if isinstance(definition, EventTypeInLastDays):
        return list(events.values_list("customer_id", flat=True).distinct())

    if isinstance(definition, EventPropertyEquals):
        # JSON equality: the stored property must be the string itself
        matching = events.annotate(
            property_value=KeyTransform(definition.path, "properties")
        ).filter(property_value=definition.value)
        return list(matching.values_list("customer_id", flat=True).distinct())

    if isinstance(definition, EventCountGteInLastDays):
        grouped = (
            events.values("customer_id")
            .annotate(event_count=Count("id"))
            .filter(event_count__gte=definition.min_count)
        )
        return [row["customer_id"] for row in grouped]

    raise TypeError(f"Unsupported segment definition: {definition!r}")


def matching_customers(definition: SegmentDefinition, now=None):
    """Uncapped queryset of matching customers, ordered by email"""
    return Customer.objects.filter(id__in=matching_customer_ids(definition, now)).order_by("email", "id")


@monitor_query_performance
def evaluate_segment(definition: SegmentDefinition, limit: Optional[int] = None, now=None) -> PreviewResult:
    """
    Count every matching customer and list the first ``limit`` of them.

    The count is never capped, so it can exceed the number of customers
    returned for large segments.
    """
    if limit is None:
        limit = settings.SEGMENT_PREVIEW_LIMIT

    customer_ids = matching_customer_ids(definition, now)
    if not customer_ids:
        return PreviewResult(count=0, customers=[])

    customers = (
        Customer.objects.filter(id__in=customer_ids)
        .order_by("email", "id")
        .values("id", "email")[:limit]
    )
    logger.debug(f"Segment {definition.kind} matched {len(customer_ids)} customers")
    return PreviewResult(count=len(customer_ids), customers=list(customers))
