"""Swap domain models"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .position import Side


@dataclass(frozen=True)
class TokenPair:
    """Symbols swapped from and to"""

    from_symbol: str
    to_symbol: str

    def __str__(self) -> str:
        return f"{self.from_symbol}->{self.to_symbol}"


class SwapDirection(Enum):
    """Classification of a swap relative to the stable asset

    BUY: stable asset in, volatile asset out
    SELL: volatile asset in, stable asset out
    """

    BUY = "buy"
    SELL = "sell"

    @property
    def side(self) -> Side:
        return Side.BUY if self is SwapDirection.BUY else Side.SELL


# Accepted spellings per field, in lookup order
_PAYLOAD_KEYS = {
    "from_amount": ("fromAmount", "from_amount"),
    "to_amount": ("toAmount", "to_amount"),
    "timestamp": ("timestamp",),
    "block_timestamp": ("blockTimestamp", "block_timestamp"),
}


@dataclass(frozen=True)
class SwapResult:
    """Result of a completed swap as reported by the swap executor

    Amounts are kept as the raw decimal strings the executor produced.
    Timestamps are epoch seconds when present. Anything else the payload
    carried is kept in ``extras``.
    """

    from_amount: str | None = None
    to_amount: str | None = None
    timestamp: Any = None
    block_timestamp: Any = None
    extras: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> "SwapResult":
        """Build a SwapResult from a loosely-shaped payload mapping"""
        data = dict(payload or {})
        values: dict[str, Any] = {}
        for name, keys in _PAYLOAD_KEYS.items():
            for key in keys:
                if key in data:
                    values.setdefault(name, data.pop(key))
        for name in ("from_amount", "to_amount"):
            raw = values.get(name)
            if raw is not None and not isinstance(raw, str):
                values[name] = str(raw)
        return cls(extras=data, **values)


class ActionType(Enum):
    """What a reconciliation did to the position store"""

    OPENED = "opened"
    CLOSED = "closed"


@dataclass(frozen=True)
class PositionAction:
    """Outcome of reconciling one swap"""

    action: ActionType
    side: Side
    position_id: str

    def __str__(self) -> str:
        return f"{self.action.value} {self.side.value} position {self.position_id}"
