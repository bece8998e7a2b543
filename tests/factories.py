"""Test data factories for swap results and positions"""

from datetime import UTC, datetime

from swaptrack.domain.models import Position, PositionStatus, Side, SwapResult

FIXED_NOW = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)


class SwapFactory:
    """Factory for creating test swap results"""

    @staticmethod
    def swap(
        from_amount: str | None = "2000",
        to_amount: str | None = "1",
        timestamp=None,
        block_timestamp=None,
    ) -> SwapResult:
        return SwapResult(
            from_amount=from_amount,
            to_amount=to_amount,
            timestamp=timestamp,
            block_timestamp=block_timestamp,
        )

    @staticmethod
    def buy(usdc: str = "2000", eth: str = "1", timestamp=None) -> SwapResult:
        """USDC -> ETH swap"""
        return SwapFactory.swap(
            from_amount=usdc, to_amount=eth, timestamp=timestamp
        )

    @staticmethod
    def sell(eth: str = "1", usdc: str = "2200", timestamp=None) -> SwapResult:
        """ETH -> USDC swap"""
        return SwapFactory.swap(
            from_amount=eth, to_amount=usdc, timestamp=timestamp
        )


class PositionFactory:
    """Factory for creating test positions"""

    @staticmethod
    def position(
        id: str = "pos-1",
        side: Side = Side.BUY,
        price_usd: float = 2000.0,
        opened_at: datetime | None = None,
        status: PositionStatus = PositionStatus.OPEN,
        close_price_usd: float | None = None,
        closed_at: datetime | None = None,
        profit_loss: float | None = None,
        profit_loss_percent: float | None = None,
    ) -> Position:
        return Position(
            id=id,
            side=side,
            price_usd=price_usd,
            opened_at=opened_at or datetime(2025, 6, 1, 10, 0, tzinfo=UTC),
            status=status,
            close_price_usd=close_price_usd,
            closed_at=closed_at,
            profit_loss=profit_loss,
            profit_loss_percent=profit_loss_percent,
        )
