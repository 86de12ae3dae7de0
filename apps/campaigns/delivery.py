# apps/campaigns/delivery.py
from abc import ABC, abstractmethod
from django.conf import settings
from django.utils.module_loading import import_string
import logging

logger = logging.getLogger(__name__)


class DeliveryBackend(ABC):
    @abstractmethod
    def deliver(self, draft):
        """Hand one approved draft to the mail transport; raise DeliveryError on failure"""


class SimulatedDeliveryBackend(DeliveryBackend):
    """Stands in for a real mail transport; every message goes through"""

    def deliver(self, draft):
        logger.info(f"Simulated delivery of draft {draft.id} to {draft.customer.email}")


def get_delivery_backend():
    return import_string(settings.CAMPAIGN_DELIVERY_BACKEND)()
