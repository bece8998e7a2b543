"""Mappers for converting between domain and persistence models"""

from datetime import UTC, datetime

from swaptrack.domain.models import (
    OpenPositionRef,
    Position,
    PositionStatus,
    Side,
)
from swaptrack.infrastructure.database.positions.models import PositionTable


def to_utc(value: datetime) -> datetime:
    """Normalise a datetime to aware UTC (naive values are taken as UTC)"""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_timestamp(value: str) -> datetime:
    """Parse a stored ISO-8601 timestamp into an aware UTC datetime"""
    # fromisoformat handles a trailing "Z" from 3.11 onwards
    return to_utc(datetime.fromisoformat(value))


def map_table_to_position(table: PositionTable) -> Position:
    """Map database table to domain Position

    Args:
        table: Position database table

    Returns:
        Domain Position object
    """
    return Position(
        id=table.id,
        side=Side(table.side),
        status=PositionStatus(table.status),
        price_usd=table.price_usd,
        opened_at=parse_timestamp(table.opened_at),
        close_price_usd=table.close_price_usd,
        closed_at=parse_timestamp(table.closed_at)
        if table.closed_at
        else None,
        profit_loss=table.profit_loss,
        profit_loss_percent=table.profit_loss_percent,
        amount=table.amount,
    )


def map_position_to_table(position: Position) -> PositionTable:
    """Map domain Position to database table

    Args:
        position: Domain Position object

    Returns:
        Position database table
    """
    return PositionTable(
        id=position.id,
        side=position.side.value,
        status=position.status.value,
        price_usd=position.price_usd,
        opened_at=to_utc(position.opened_at).isoformat(),
        close_price_usd=position.close_price_usd,
        closed_at=to_utc(position.closed_at).isoformat()
        if position.closed_at
        else None,
        profit_loss=position.profit_loss,
        profit_loss_percent=position.profit_loss_percent,
        amount=position.amount,
    )


def map_table_to_open_ref(table: PositionTable) -> OpenPositionRef:
    """Map database table to the open-position projection"""
    return OpenPositionRef(
        id=table.id,
        opened_at=parse_timestamp(table.opened_at),
        side=Side(table.side),
    )
