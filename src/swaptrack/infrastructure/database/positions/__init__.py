"""Position persistence"""

from .models import PositionTable
from .store import PositionStore

__all__ = ["PositionTable", "PositionStore"]
