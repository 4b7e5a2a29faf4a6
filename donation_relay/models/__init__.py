from .charge import ChargeOutcome, DonationRequest, OutcomeKind
from .notification import NotificationEvent

__all__ = ["ChargeOutcome", "DonationRequest", "OutcomeKind", "NotificationEvent"]
