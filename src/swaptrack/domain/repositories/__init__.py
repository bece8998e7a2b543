"""Domain repositories"""

from .position import PositionRepository

__all__ = ["PositionRepository"]
