"""Profit and loss value object"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfitLoss:
    """Signed profit per unit and as a percentage of entry price"""

    absolute: float
    percent: float

    @property
    def is_profit(self) -> bool:
        return self.absolute > 0
