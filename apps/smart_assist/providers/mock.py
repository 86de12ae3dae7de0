# apps/smart_assist/providers/mock.py
"""
Deterministic providers that need no generation backend.

They are the configured defaults and stay useful in tests and demos.
"""
import re
from apps.segments.definitions import (
    EventCountGteInLastDays,
    EventPropertyEquals,
    EventTypeInLastDays,
)
from .base import DraftInput, DraftOutput, EmailDraftProvider, SegmentDefinitionProvider

DEFAULT_DAYS = 30
DEFAULT_EVENT_TYPE = 'page_view'

DAYS_PATTERN = re.compile(r'(?:last|past|within)\s+(\d+)\s*days?')
WEEKS_PATTERN = re.compile(r'(?:last|past)\s+(\d+)\s*weeks?')
AT_LEAST_PATTERN = re.compile(r'at\s+least\s+(\d+)')
GTE_PATTERN = re.compile(r'>=\s*(\d+)')
MORE_THAN_PATTERN = re.compile(r'more\s+than\s+(\d+)')
PROPERTY_PATH_PATTERN = re.compile(r'(?:pricing|/pricing|visited\s+/\w+|viewed\s+/\w+)', re.ASCII)
URL_PATH_PATTERN = re.compile(r'/(\w+)', re.ASCII)

EVENT_TYPE_KEYWORDS = [
    (re.compile(r'add(?:ed)?\s+to\s+cart'), 'added_to_cart'),
    (re.compile(r'purchas'), 'purchase'),
    (re.compile(r'sign(?:ed)?\s*up'), 'signup'),
    (re.compile(r'log(?:ged)?\s*in'), 'login'),
    (re.compile(r'page\s*view'), 'page_view'),
    (re.compile(r'check(?:ed)?\s*out'), 'checkout'),
]


def parse_days(text):
    match = DAYS_PATTERN.search(text)
    if match:
        return int(match.group(1))

    match = WEEKS_PATTERN.search(text)
    if match:
        return int(match.group(1)) * 7

    if 'week' in text:
        return 7
    if 'month' in text:
        return 30
    return DEFAULT_DAYS


def parse_min_count(text):
    """Minimum event count mentioned in the prompt, or 0 when there is none"""
    match = AT_LEAST_PATTERN.search(text) or GTE_PATTERN.search(text)
    if match:
        return int(match.group(1))

    # "more than 3" means at least 4
    match = MORE_THAN_PATTERN.search(text)
    if match:
        return int(match.group(1)) + 1
    return 0


def parse_event_type(text):
    for pattern, event_type in EVENT_TYPE_KEYWORDS:
        if pattern.search(text):
            return event_type
    return DEFAULT_EVENT_TYPE


class MockSegmentDefinitionProvider(SegmentDefinitionProvider):
    """Keyword matching over a natural-language audience description"""

    def generate(self, prompt):
        text = prompt.lower()
        days = parse_days(text)
        min_count = parse_min_count(text)
        event_type = parse_event_type(text)

        if PROPERTY_PATH_PATTERN.search(text):
            path_match = URL_PATH_PATTERN.search(text)
            value = f'/{path_match.group(1)}' if path_match else '/pricing'
            return EventPropertyEquals(event_type='page_view', path='path', value=value, days=days)

        if min_count > 0:
            return EventCountGteInLastDays(event_type=event_type, days=days, min_count=min_count)

        return EventTypeInLastDays(event_type=event_type, days=days)


def format_event_type(event_type):
    return event_type.replace('_', ' ')


class MockEmailDraftProvider(EmailDraftProvider):
    """Template copy personalised with the SKU and latest activity when known"""

    def generate(self, draft_input: DraftInput) -> DraftOutput:
        first_name = draft_input.customer_email.split('@')[0]
        sku = draft_input.recommended_sku
        event_type = draft_input.recent_event_type
        activity = format_event_type(event_type) if event_type else 'recently visited us'

        if sku and event_type:
            return DraftOutput(
                subject=f'Still thinking about {sku}?',
                body=(
                    f'Hi {first_name},\n\nWe noticed you {activity} and showed interest in {sku}. '
                    f"Don't let it get away!\n\nShop now →"
                ),
            )

        if sku:
            return DraftOutput(
                subject=f'Still thinking about {sku}?',
                body=(
                    f'Hi {first_name},\n\nWe think {sku} would be perfect for you. '
                    f"Grab it before it's gone!\n\nShop now →"
                ),
            )

        if event_type:
            return DraftOutput(
                subject='We have something special for you',
                body=(
                    f'Hi {first_name},\n\nThank you for {activity}. '
                    f"We'd love to help you find what you're looking for.\n\nExplore our latest →"
                ),
            )

        return DraftOutput(
            subject='We have something special for you',
            body=(
                f'Hi {first_name},\n\n'
                f"We'd love to reconnect and share our latest offerings with you.\n\nExplore now →"
            ),
        )
