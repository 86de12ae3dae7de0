# apps/events/ingestion.py
from django.db import IntegrityError, transaction
from django.utils import timezone
from apps.customers.models import Customer
from apps.customers.utils import normalize_email
from .models import Event
import logging

logger = logging.getLogger(__name__)


def ingest_event(email, event_type, properties=None, occurred_at=None, idempotency_key=None):
    """
    Upsert the customer by email and record one event for them.

    Returns ``(event, created)``. When ``idempotency_key`` was already used by
    the same customer the earlier event is returned with ``created=False``.
    """
    customer, customer_created = Customer.objects.get_or_create(email=normalize_email(email))
    if customer_created:
        logger.info(f"Customer created: {customer.email} ({customer.id})")

    idempotency_key = idempotency_key or None
    if idempotency_key:
        existing = Event.objects.filter(customer=customer, idempotency_key=idempotency_key).first()
        if existing:
            logger.info(f"Duplicate event ignored for customer {customer.id} (key {idempotency_key})")
            return existing, False

    try:
        with transaction.atomic():
            event = Event.objects.create(
                customer=customer,
                type=event_type.strip(),
                properties=properties or {},
                occurred_at=occurred_at or timezone.now(),
                idempotency_key=idempotency_key,
            )
    except IntegrityError:
        # A concurrent request with the same key won the insert
        if not idempotency_key:
            raise
        existing = Event.objects.get(customer=customer, idempotency_key=idempotency_key)
        return existing, False

    logger.info(f"Event recorded: {event.type} for customer {customer.id}")
    return event, True
