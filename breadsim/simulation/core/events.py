from __future__ import annotations
from dataclasses import dataclass


# -------------------------
# Delivery
# -------------------------
@dataclass(frozen=True)
class DeliveryEvent:
    day: int          # >= 1
    quantity: int     # > 0
