"""Application services"""

from .position_service import PositionService, PositionSnapshot

__all__ = ["PositionService", "PositionSnapshot"]
