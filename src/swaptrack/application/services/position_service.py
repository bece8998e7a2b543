"""Manual position management and dashboard valuation.

Unlike reconciliation, these operations let errors propagate so the
caller can show them to the user. Prices may come from the external feed
here, which reconciliation never does.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from loguru import logger

from swaptrack.domain.models import Position, ProfitLoss, Side, SpotPrice
from swaptrack.domain.pnl import compute_pnl
from swaptrack.domain.repositories import PositionRepository
from swaptrack.infrastructure.price_feeds import PriceFeedAdapter
from swaptrack.shared.exceptions import PriceFeedError


@dataclass(frozen=True)
class PositionSnapshot:
    """Position with its realized or unrealized P&L at a point in time"""

    position: Position
    pnl: ProfitLoss | None
    holding_hours: float | None

    @property
    def is_realized(self) -> bool:
        return not self.position.is_open


def _checked(quote: SpotPrice) -> SpotPrice:
    if not quote.is_valid:
        raise PriceFeedError(f"Unusable price {quote.price} from {quote.source}")
    return quote


class PositionService:
    """Manual open/close/delete and mark-to-market for positions"""

    def __init__(
        self,
        store: PositionRepository,
        price_feed: PriceFeedAdapter | None = None,
    ):
        """Initialise position service

        Args:
            store: Position store
            price_feed: Spot price source for entries without a manual price
        """
        self.store = store
        self.price_feed = price_feed

    def _resolve_price(
        self, manual_price: float | None, at: datetime | None
    ) -> SpotPrice:
        if manual_price is not None and manual_price <= 0:
            raise ValueError(f"Price must be positive, got {manual_price}")
        if self.price_feed is None:
            if manual_price is None:
                raise ValueError("A price is required when no price feed is set")
            return SpotPrice(
                price=float(manual_price),
                fetched_at=datetime.now(UTC),
                source="manual",
            )
        return _checked(
            self.price_feed.get_price_with_fallback(
                at=at, manual_price=manual_price
            )
        )

    def open_position(
        self,
        side: Side,
        price_usd: float | None = None,
        opened_at: datetime | None = None,
        amount: float | None = None,
    ) -> Position:
        """Open a position by hand

        Args:
            side: BUY or SELL
            price_usd: Entry price; fetched from the feed when omitted
            opened_at: Entry time (defaults to now)
            amount: Optional quantity

        Raises:
            PriceFeedError: If the feed is needed and fails
            StorageError: If the store fails
        """
        quote = self._resolve_price(price_usd, opened_at)
        logger.info(
            f"Manual {side.value} entry at ${quote.price:.2f} ({quote.source})"
        )
        return self.store.open(
            side, quote.price, opened_at=opened_at, amount=amount
        )

    def close_position(
        self,
        position_id: str,
        close_price_usd: float | None = None,
        closed_at: datetime | None = None,
    ) -> Position:
        """Close a position by hand

        Args:
            position_id: Position ID
            close_price_usd: Exit price; fetched from the feed when omitted
            closed_at: Exit time (defaults to now)

        Raises:
            PositionNotFound: If the position does not exist
            AlreadyClosed: If the position is already closed
            PriceFeedError: If the feed is needed and fails
            StorageError: If the store fails
        """
        quote = self._resolve_price(close_price_usd, closed_at)
        return self.store.close(
            position_id, closed_at or datetime.now(UTC), quote.price
        )

    def delete_position(self, position_id: str) -> None:
        self.store.delete(position_id)

    def delete_all_positions(self) -> int:
        return self.store.delete_all()

    def list_positions(self) -> list[Position]:
        return self.store.list_all()

    def current_price(self) -> SpotPrice:
        """Fetch the current price for dashboard refresh

        Raises:
            ValueError: If no price feed is configured
            PriceFeedError: If the feed fails
        """
        if self.price_feed is None:
            raise ValueError("No price feed configured")
        return _checked(self.price_feed.get_spot_price())

    def snapshot(
        self,
        current_price: float | None = None,
        now: datetime | None = None,
    ) -> list[PositionSnapshot]:
        """Value every position

        Closed positions report their stored P&L. Open positions are marked
        to ``current_price`` when one is given, otherwise they have no P&L.

        Args:
            current_price: Latest price of the volatile asset
            now: Reference time for open positions' holding duration

        Returns:
            Snapshots in insertion order
        """
        now = now or datetime.now(UTC)
        snapshots = []
        for position in self.store.list_all():
            if not position.is_open:
                pnl = ProfitLoss(
                    absolute=position.profit_loss or 0.0,
                    percent=position.profit_loss_percent or 0.0,
                )
            elif current_price is not None and current_price > 0:
                pnl = compute_pnl(
                    position.side, position.price_usd, current_price
                )
            else:
                pnl = None

            hours = position.holding_hours(now)
            if hours is None and not position.is_open:
                logger.warning(
                    f"Position {position.id} has inconsistent timestamps"
                )

            snapshots.append(
                PositionSnapshot(
                    position=position, pnl=pnl, holding_hours=hours
                )
            )
        return snapshots
