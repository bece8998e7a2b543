"""Swap-to-position reconciliation"""

from .guard import InFlightGuard
from .queue import ReconciliationJob, ReconciliationQueue
from .reconciler import Reconciler, oldest_open

__all__ = [
    "InFlightGuard",
    "Reconciler",
    "ReconciliationJob",
    "ReconciliationQueue",
    "oldest_open",
]
