"""Position store backed by SQLModel.

Single point of enforcement for position invariants: IDs are generated
here, closes are rejected twice, and all close fields are written in one
commit so a half-closed position is never visible.
"""

import uuid
from datetime import UTC, datetime

from loguru import logger
from sqlmodel import col, delete, select

from swaptrack.domain.models import (
    OpenPositionRef,
    Position,
    PositionStatus,
    Side,
)
from swaptrack.domain.pnl import compute_pnl
from swaptrack.infrastructure.database.base import BaseDatabase
from swaptrack.infrastructure.database.positions.mappers import (
    map_position_to_table,
    map_table_to_open_ref,
    map_table_to_position,
    to_utc,
)
from swaptrack.infrastructure.database.positions.models import PositionTable
from swaptrack.shared.exceptions import AlreadyClosed, PositionNotFound


class PositionStore(BaseDatabase):
    """SQLite position store using SQLModel.

    Every operation runs in its own session_scope.
    """

    entity = "position"

    def open(
        self,
        side: Side,
        price_usd: float,
        opened_at: datetime | None = None,
        amount: float | None = None,
    ) -> Position:
        """Create a new open position

        Args:
            side: BUY or SELL
            price_usd: Entry unit price (must be positive)
            opened_at: When the position opened (defaults to now)
            amount: Optional quantity traded

        Returns:
            The created Position

        Raises:
            ValueError: If price_usd is not positive
            StorageError: If the database write fails
        """
        position = Position(
            id=uuid.uuid4().hex,
            side=side,
            price_usd=price_usd,
            opened_at=to_utc(opened_at) if opened_at else datetime.now(UTC),
            amount=amount,
        )

        with self.session_scope("open") as session:
            table = map_position_to_table(position)
            session.add(table)
            session.commit()
            session.refresh(table)
            created = map_table_to_position(table)

        logger.info(
            f"Opened {created.side.value} position {created.id} "
            f"@ ${created.price_usd:.2f}"
        )
        return created

    def close(
        self, position_id: str, closed_at: datetime, close_price_usd: float
    ) -> Position:
        """Close an open position and record its P&L

        Args:
            position_id: Position ID
            closed_at: When the position closed
            close_price_usd: Exit unit price (must be positive)

        Returns:
            The closed Position

        Raises:
            ValueError: If close_price_usd is not positive
            PositionNotFound: If no position has this ID
            AlreadyClosed: If the position is already closed
            StorageError: If the database write fails
        """
        if close_price_usd <= 0:
            raise ValueError(
                f"Close price must be positive, got {close_price_usd}"
            )

        closed_at = to_utc(closed_at)

        with self.session_scope("close") as session:
            table = session.exec(
                select(PositionTable).where(PositionTable.id == position_id)
            ).first()

            if table is None:
                raise PositionNotFound(position_id)
            if table.status == PositionStatus.CLOSED.value:
                raise AlreadyClosed(position_id)

            position = map_table_to_position(table)
            if closed_at < position.opened_at:
                logger.warning(
                    f"Position {position_id} closes at {closed_at.isoformat()} "
                    f"before it opened at {position.opened_at.isoformat()}"
                )

            pnl = compute_pnl(position.side, position.price_usd, close_price_usd)

            table.status = PositionStatus.CLOSED.value
            table.close_price_usd = close_price_usd
            table.closed_at = closed_at.isoformat()
            table.profit_loss = pnl.absolute
            table.profit_loss_percent = pnl.percent
            session.add(table)
            session.commit()
            session.refresh(table)
            closed = map_table_to_position(table)

        logger.info(
            f"Closed {closed.side.value} position {closed.id} "
            f"@ ${close_price_usd:.2f} (P&L {pnl.absolute:+.2f}, "
            f"{pnl.percent:+.2f}%)"
        )
        return closed

    def get(self, position_id: str) -> Position | None:
        """Get position by ID

        Args:
            position_id: Position ID

        Returns:
            Position object or None if not found
        """
        with self.session_scope("read") as session:
            table = session.exec(
                select(PositionTable).where(PositionTable.id == position_id)
            ).first()
            return map_table_to_position(table) if table else None

    def list_all(self) -> list[Position]:
        """Get all positions in insertion order"""
        with self.session_scope("list") as session:
            results = session.exec(
                select(PositionTable).order_by(col(PositionTable.seq))
            ).all()
            return [map_table_to_position(table) for table in results]

    def list_open(self) -> list[OpenPositionRef]:
        """Get open positions in insertion order

        Returns:
            Projections with id, opened_at and side only
        """
        with self.session_scope("list open") as session:
            results = session.exec(
                select(PositionTable)
                .where(PositionTable.status == PositionStatus.OPEN.value)
                .order_by(col(PositionTable.seq))
            ).all()
            return [map_table_to_open_ref(table) for table in results]

    def delete(self, position_id: str) -> None:
        """Delete a position (no-op if it does not exist)

        Args:
            position_id: Position ID
        """
        with self.session_scope("delete") as session:
            result = session.exec(
                delete(PositionTable).where(PositionTable.id == position_id)
            )
            session.commit()

        if result.rowcount:
            logger.info(f"Deleted position {position_id}")
        else:
            logger.debug(f"Delete requested for unknown position {position_id}")

    def delete_all(self) -> int:
        """Delete every position

        Returns:
            Number of rows deleted.
        """
        with self.session_scope("delete all") as session:
            result = session.exec(delete(PositionTable))
            session.commit()

        logger.info(f"Deleted {result.rowcount} positions")
        return result.rowcount
