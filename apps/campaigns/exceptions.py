class CampaignStateError(Exception):
    """The campaign's current status does not allow the requested operation"""


class DraftTransitionError(Exception):
    """A reviewed draft cannot change status again"""


class NoApprovedDrafts(Exception):
    pass


class DeliveryError(Exception):
    """The delivery backend could not hand off a message"""
