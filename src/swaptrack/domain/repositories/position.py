"""Position repository protocol"""

from datetime import datetime
from typing import Protocol, runtime_checkable

from ..models import OpenPositionRef, Position, Side


@runtime_checkable
class PositionRepository(Protocol):
    """Position repository protocol"""

    def open(
        self,
        side: Side,
        price_usd: float,
        opened_at: datetime | None = None,
        amount: float | None = None,
    ) -> Position:
        """Create a new open position"""
        ...

    def close(
        self, position_id: str, closed_at: datetime, close_price_usd: float
    ) -> Position:
        """Close an open position and record its P&L"""
        ...

    def get(self, position_id: str) -> Position | None:
        """Get position by ID"""
        ...

    def list_all(self) -> list[Position]:
        """Get all positions in insertion order"""
        ...

    def list_open(self) -> list[OpenPositionRef]:
        """Get open positions in insertion order"""
        ...

    def delete(self, position_id: str) -> None:
        """Delete position by ID"""
        ...

    def delete_all(self) -> int:
        """Delete every position, return how many were removed"""
        ...
