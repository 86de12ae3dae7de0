# apps/segments/definitions.py
"""
Segment rule definitions.

A definition arrives as untrusted JSON and is parsed into exactly one of three
frozen dataclasses. ``to_dict`` gives back the camelCase wire shape, which is
also what gets stored on segments and campaign snapshots.
"""
from dataclasses import dataclass
from typing import Any, Dict, Union

EVENT_TYPE_IN_LAST_DAYS = "event_type_in_last_days"
EVENT_PROPERTY_EQUALS = "event_property_equals"
EVENT_COUNT_GTE_IN_LAST_DAYS = "event_count_gte_in_last_days"


class InvalidSegmentDefinition(ValueError):
    """Raised with a human-readable reason when a definition is rejected"""


@dataclass(frozen=True)
class EventTypeInLastDays:
    event_type: str
    days: int

    kind = EVENT_TYPE_IN_LAST_DAYS

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "eventType": self.event_type, "days": self.days}


@dataclass(frozen=True)
class EventPropertyEquals:
    event_type: str
    path: str
    value: str
    days: int

    kind = EVENT_PROPERTY_EQUALS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "eventType": self.event_type,
            "path": self.path,
            "value": self.value,
            "days": self.days,
        }


@dataclass(frozen=True)
class EventCountGteInLastDays:
    event_type: str
    days: int
    min_count: int

    kind = EVENT_COUNT_GTE_IN_LAST_DAYS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "eventType": self.event_type,
            "days": self.days,
            "minCount": self.min_count,
        }


SegmentDefinition = Union[EventTypeInLastDays, EventPropertyEquals, EventCountGteInLastDays]


def parse_definition(raw: Any) -> SegmentDefinition:
    """Validate raw JSON and return the typed definition it describes"""
    if not isinstance(raw, dict):
        raise InvalidSegmentDefinition("Definition must be a JSON object")

    kind = raw.get("kind")
    if not isinstance(kind, str):
        raise InvalidSegmentDefinition("Definition must have a 'kind' field")

    if kind == EVENT_TYPE_IN_LAST_DAYS:
        return EventTypeInLastDays(
            event_type=_non_empty_string(raw, "eventType"),
            days=_positive_int(raw, "days"),
        )
    if kind == EVENT_PROPERTY_EQUALS:
        event_type = _non_empty_string(raw, "eventType")
        path = _non_empty_string(raw, "path")
        value = raw.get("value")
        if not isinstance(value, str):
            raise InvalidSegmentDefinition("value must be a string")
        return EventPropertyEquals(
            event_type=event_type,
            path=path,
            value=value,
            days=_positive_int(raw, "days"),
        )
    if kind == EVENT_COUNT_GTE_IN_LAST_DAYS:
        return EventCountGteInLastDays(
            event_type=_non_empty_string(raw, "eventType"),
            days=_positive_int(raw, "days"),
            min_count=_positive_int(raw, "minCount"),
        )

    raise InvalidSegmentDefinition(f"Unknown definition kind: '{kind}'")


def _non_empty_string(raw: Dict[str, Any], field: str) -> str:
    value = raw.get(field)
    if not isinstance(value, str) or not value.strip():
        raise InvalidSegmentDefinition(f"{field} must be a non-empty string")
    return value.strip()


def _positive_int(raw: Dict[str, Any], field: str) -> int:
    value = raw.get(field)
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidSegmentDefinition(f"{field} must be a positive integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidSegmentDefinition(f"{field} must be a positive integer")
        value = int(value)
    if value <= 0:
        raise InvalidSegmentDefinition(f"{field} must be a positive integer")
    return value
