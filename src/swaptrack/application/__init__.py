"""Application layer: reconciliation and position services"""

from swaptrack.application.reconciliation import (
    InFlightGuard,
    Reconciler,
    ReconciliationQueue,
)
from swaptrack.application.services import PositionService

__all__ = [
    "InFlightGuard",
    "Reconciler",
    "ReconciliationQueue",
    "PositionService",
]
