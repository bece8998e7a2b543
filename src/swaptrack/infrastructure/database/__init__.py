"""Database infrastructure"""

from .base import BaseDatabase
from .positions import PositionStore

__all__ = ["BaseDatabase", "PositionStore"]
