"""External spot price providers"""

from .adapter import PriceFeedAdapter, create_price_feed, normalise_provider
from .coinbase import CoinbaseSpotPriceClient
from .coingecko import CoinGeckoPriceClient
from .protocols import PriceFeed

__all__ = [
    "PriceFeed",
    "PriceFeedAdapter",
    "CoinbaseSpotPriceClient",
    "CoinGeckoPriceClient",
    "create_price_feed",
    "normalise_provider",
]
