"""Spot price value object"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SpotPrice:
    """Price quote from an external feed"""

    price: float
    fetched_at: datetime
    source: str

    @property
    def is_valid(self) -> bool:
        return self.price > 0
