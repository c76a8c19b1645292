from .events import DeliveryEvent
from .ledger import Batch, Ledger, Portion, Withdrawal
from .policy import DAILY_CONSUMPTION

__all__ = [
    "DeliveryEvent",
    "Batch",
    "Ledger",
    "Portion",
    "Withdrawal",
    "DAILY_CONSUMPTION",
]
