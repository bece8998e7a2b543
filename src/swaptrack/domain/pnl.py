"""Profit and loss calculation"""

from .models.pnl import ProfitLoss
from .models.position import Side


def compute_pnl(side: Side, open_price: float, close_price: float) -> ProfitLoss:
    """Compute P&L for a position between two prices.

    A BUY profits when the price rises, a SELL profits when it falls.
    Works for realized P&L (close price) and unrealized P&L (current price).
    Values are not rounded.

    Args:
        side: Position side
        open_price: Entry unit price
        close_price: Exit or current unit price

    Returns:
        ProfitLoss with signed absolute and percent values

    Raises:
        ValueError: If open_price is not positive
    """
    if open_price <= 0:
        raise ValueError(f"Open price must be positive, got {open_price}")

    if side is Side.BUY:
        absolute = close_price - open_price
    else:
        absolute = open_price - close_price

    return ProfitLoss(absolute=absolute, percent=absolute / open_price * 100)
