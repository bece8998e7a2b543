"""Position domain model"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Side(Enum):
    """Direction of a position"""

    BUY = "BUY"
    SELL = "SELL"

    @property
    def opposite(self) -> "Side":
        return Side.SELL if self is Side.BUY else Side.BUY


class PositionStatus(Enum):
    """Lifecycle status of a position"""

    OPEN = "OPEN"
    CLOSED = "CLOSED"


@dataclass
class Position:
    """Tracked directional trade exposure (domain model)

    Attributes:
        id: Opaque unique identifier assigned by the store
        side: BUY or SELL, fixed at creation
        price_usd: Entry unit price
        opened_at: When the position was opened
        status: OPEN until closed, then CLOSED for good
        close_price_usd: Exit unit price, set once at close
        closed_at: When the position was closed
        profit_loss: Absolute P&L per unit, derived at close
        profit_loss_percent: P&L as a percentage of entry price
        amount: Quantity traded, informational only
    """

    id: str
    side: Side
    price_usd: float
    opened_at: datetime
    status: PositionStatus = PositionStatus.OPEN
    close_price_usd: float | None = None
    closed_at: datetime | None = None
    profit_loss: float | None = None
    profit_loss_percent: float | None = None
    amount: float | None = None

    def __post_init__(self):
        if self.price_usd <= 0:
            raise ValueError(
                f"Position price must be positive, got {self.price_usd}"
            )

    @property
    def is_open(self) -> bool:
        return self.status is PositionStatus.OPEN

    @property
    def is_closed(self) -> bool:
        return (
            self.status is PositionStatus.CLOSED
            and self.close_price_usd is not None
            and self.closed_at is not None
        )

    def holding_hours(self, now: datetime | None = None) -> float | None:
        """Hours between open and close (or ``now`` for open positions).

        Returns None when the end precedes the start, which only happens
        with inconsistent timestamps.
        """
        end = self.closed_at or now
        if end is None:
            return None
        hours = (end - self.opened_at).total_seconds() / 3600
        if hours < 0:
            return None
        return hours


@dataclass(frozen=True)
class OpenPositionRef:
    """Read-only projection of an open position used for matching"""

    id: str
    opened_at: datetime
    side: Side
