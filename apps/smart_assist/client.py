# apps/smart_assist/client.py
"""
Provider lookup and calls.

Providers come from the dotted paths in ``settings.SMART_ASSIST`` and are
built fresh for every call, so swapping one is a settings change (or an
explicit ``provider=`` argument) rather than process-wide state.
"""
from django.conf import settings
from django.utils.module_loading import import_string
from tenacity import before_sleep_log, retry, retry_if_exception_type, stop_after_attempt, wait_exponential
from .providers import DraftInput, SmartAssistError
import logging

logger = logging.getLogger(__name__)


def get_segment_provider():
    return import_string(settings.SMART_ASSIST['SEGMENT_PROVIDER'])()


def get_draft_provider():
    return import_string(settings.SMART_ASSIST['DRAFT_PROVIDER'])()


def generate_segment_definition(prompt, provider=None):
    provider = provider or get_segment_provider()
    return provider.generate(prompt)


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=0.1, max=2),
    retry=retry_if_exception_type(SmartAssistError),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
def _request_draft(provider, draft_input):
    return provider.generate(draft_input)


def generate_email_draft(customer_email, recent_event_type=None, recommended_sku=None, provider=None):
    """Subject and body for one customer, retrying transient provider errors"""
    provider = provider or get_draft_provider()
    draft_input = DraftInput(
        customer_email=customer_email,
        recent_event_type=recent_event_type,
        recommended_sku=recommended_sku,
    )
    return _request_draft(provider, draft_input)
