"""Consolidated exceptions for swaptrack.

All custom exceptions are defined here to provide a single source of truth
for error handling across the application.
"""


class SwaptrackError(Exception):
    """Base exception for swaptrack errors"""

    pass


class PriceUnavailable(SwaptrackError):
    """Raised when an execution price cannot be computed from a swap"""

    pass


class PriceFeedError(SwaptrackError):
    """Raised when an external spot-price feed is unreachable or malformed"""

    pass


class PositionError(SwaptrackError):
    """Base position error"""

    pass


class PositionNotFound(PositionError):
    """Raised when a position ID does not exist"""

    def __init__(self, position_id: str):
        self.position_id = position_id
        super().__init__(f"Position not found: {position_id}")


class AlreadyClosed(PositionError):
    """Raised when closing a position that is already closed"""

    def __init__(self, position_id: str):
        self.position_id = position_id
        super().__init__(f"Position already closed: {position_id}")


class StorageError(SwaptrackError):
    """Raised when the persistence layer fails"""

    pass


class ConfigurationError(SwaptrackError):
    """Raised when configuration is invalid or missing"""

    pass


class SignalError(SwaptrackError):
    """Raised when the prediction service is unreachable or its answer unusable"""

    pass
