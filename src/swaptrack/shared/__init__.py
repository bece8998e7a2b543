"""Shared utilities and exceptions"""

from .exceptions import (
    AlreadyClosed,
    ConfigurationError,
    PositionError,
    PositionNotFound,
    PriceFeedError,
    PriceUnavailable,
    SignalError,
    StorageError,
    SwaptrackError,
)

__all__ = [
    "SwaptrackError",
    "PriceUnavailable",
    "PriceFeedError",
    "PositionError",
    "PositionNotFound",
    "AlreadyClosed",
    "StorageError",
    "SignalError",
    "ConfigurationError",
]
