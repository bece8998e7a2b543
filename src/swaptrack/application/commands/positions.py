from datetime import datetime

from loguru import logger
from rich.console import Console
from rich.table import Table

from swaptrack.application.commands.base import (
    CloseCommand,
    DeleteCommand,
    ListCommand,
    OpenCommand,
    PriceCommand,
    PurgeCommand,
)
from swaptrack.application.services import PositionSnapshot
from swaptrack.domain.models import ProfitLoss, Side
from swaptrack.shared.exceptions import SwaptrackError


def format_percentage(percentage: float) -> str:
    """Signed percentage with two decimals, e.g. +10.00%"""
    formatted = f"{percentage:.2f}"
    return f"+{formatted}%" if percentage > 0 else f"{formatted}%"


def format_duration(hours: float | None) -> str:
    if hours is None:
        return "-"
    if hours < 1:
        return f"{int(hours * 60)}m"
    if hours < 24:
        return f"{hours:.1f}h"
    return f"{hours / 24:.1f}d"


def format_pnl(pnl: ProfitLoss | None) -> str:
    """Coloured rich markup for a P&L cell"""
    if pnl is None:
        return "Update prices"
    if pnl.is_profit:
        colour = "green"
    elif pnl.absolute < 0:
        colour = "red"
    else:
        colour = "white"
    return f"[{colour}]{format_percentage(pnl.percent)}[/{colour}]"


def _format_time(value: datetime | None) -> str:
    return value.strftime("%b %d, %Y %H:%M") if value else "-"


def _parse_price(raw: str | None) -> float | None:
    return float(raw) if raw is not None else None


def build_positions_table(snapshots: list[PositionSnapshot]) -> Table:
    """Render position snapshots as a rich table"""
    table = Table(title="Positions")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Side")
    table.add_column("Opened")
    table.add_column("Entry", justify="right")
    table.add_column("Closed")
    table.add_column("Exit", justify="right")
    table.add_column("Duration", justify="right")
    table.add_column("P&L", justify="right")

    for snapshot in snapshots:
        position = snapshot.position
        table.add_row(
            position.id[:8],
            position.side.value,
            _format_time(position.opened_at),
            f"${position.price_usd:,.2f}",
            _format_time(position.closed_at)
            if position.closed_at
            else "Open Position",
            f"${position.close_price_usd:,.2f}"
            if position.close_price_usd
            else "-",
            format_duration(snapshot.holding_hours),
            format_pnl(snapshot.pnl),
        )
    return table


async def handle_open(app, command: OpenCommand) -> int:
    """Open a position by hand

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        side = Side(command.side.upper())
        price = _parse_price(command.price)
    except ValueError:
        logger.error("Usage: open BUY|SELL [PRICE]")
        return 1

    try:
        position = app.positions.open_position(side, price_usd=price)
    except (SwaptrackError, ValueError) as e:
        logger.error(f"Failed to open position: {e}")
        return 1

    logger.info(f"Opened position {position.id}")
    return 0


async def handle_close(app, command: CloseCommand) -> int:
    """Close a position by hand

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        price = _parse_price(command.price)
    except ValueError:
        logger.error("Usage: close POSITION_ID [PRICE]")
        return 1

    try:
        position = app.positions.close_position(
            command.position_id, close_price_usd=price
        )
    except (SwaptrackError, ValueError) as e:
        logger.error(f"Failed to close position: {e}")
        return 1

    logger.info(
        f"Closed position {position.id}: "
        f"{format_percentage(position.profit_loss_percent or 0.0)}"
    )
    return 0


async def handle_list(app, command: ListCommand) -> int:
    """Print all positions

    Returns:
        Exit code (0 for success, 1 for error)
    """
    current_price = None
    try:
        if command.with_price:
            current_price = app.positions.current_price().price
        snapshots = app.positions.snapshot(current_price=current_price)
    except (SwaptrackError, ValueError) as e:
        logger.error(f"Failed to list positions: {e}")
        return 1

    console = Console()
    if not snapshots:
        console.print(
            "[yellow]No positions found. Open a new position to get started.[/yellow]"
        )
        return 0

    console.print(build_positions_table(snapshots))
    if current_price is not None:
        console.print(f"Current price: ${current_price:,.2f}")
    return 0


async def handle_delete(app, command: DeleteCommand) -> int:
    try:
        app.positions.delete_position(command.position_id)
    except SwaptrackError as e:
        logger.error(f"Failed to delete position: {e}")
        return 1
    return 0


async def handle_purge(app, command: PurgeCommand) -> int:
    try:
        count = app.positions.delete_all_positions()
    except SwaptrackError as e:
        logger.error(f"Failed to delete positions: {e}")
        return 1
    logger.info(f"Deleted {count} positions")
    return 0


async def handle_price(app, command: PriceCommand) -> int:
    try:
        quote = app.positions.current_price()
    except SwaptrackError as e:
        logger.error(f"Failed to fetch price: {e}")
        return 1
    Console().print(
        f"{app.config.volatile_symbol}: ${quote.price:,.2f} "
        f"({quote.source}, {quote.fetched_at.isoformat()})"
    )
    return 0
