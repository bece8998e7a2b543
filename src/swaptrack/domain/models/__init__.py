"""Domain models"""

from .pnl import ProfitLoss
from .position import OpenPositionRef, Position, PositionStatus, Side
from .signal import MarketSignal, Prediction
from .spot_price import SpotPrice
from .swap import (
    ActionType,
    PositionAction,
    SwapDirection,
    SwapResult,
    TokenPair,
)

__all__ = [
    "Side",
    "PositionStatus",
    "Position",
    "OpenPositionRef",
    "ProfitLoss",
    "SpotPrice",
    "TokenPair",
    "SwapDirection",
    "SwapResult",
    "ActionType",
    "PositionAction",
    "Prediction",
    "MarketSignal",
]
