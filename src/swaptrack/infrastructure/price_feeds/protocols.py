"""Price feed protocol defining the interface for spot-price providers.

Providers are interchangeable; the adapter picks one from configuration.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable

from swaptrack.domain.models import SpotPrice


@runtime_checkable
class PriceFeed(Protocol):
    """Protocol for spot-price retrieval."""

    source: str

    def get_spot_price(self) -> SpotPrice:
        """Fetch the current spot price."""
        ...

    def get_price_at(self, at: datetime) -> SpotPrice:
        """Fetch the price at a past moment, where the provider supports it."""
        ...
