"""Price feed adapter with configurable backend.

Only used outside strict reconciliation: manual position entry and
dashboard price refresh.
"""

from datetime import UTC, datetime

from loguru import logger

from swaptrack.domain.models import SpotPrice

from .coinbase import CoinbaseSpotPriceClient
from .coingecko import CoinGeckoPriceClient
from .protocols import PriceFeed

PROVIDERS = ("coinbase", "coingecko")
DEFAULT_PROVIDER = "coinbase"


def normalise_provider(provider: str | None) -> str:
    """Return a supported provider name, defaulting to coinbase"""
    name = (provider or "").strip().lower()
    if name in PROVIDERS:
        return name
    if name:
        logger.warning(
            f"Unknown price feed provider '{provider}', using {DEFAULT_PROVIDER}"
        )
    return DEFAULT_PROVIDER


def create_price_feed(
    provider: str | None,
    base_symbol: str = "ETH",
    coingecko_asset_id: str = "ethereum",
    timeout: float | None = None,
) -> PriceFeed:
    """Build the configured price feed client"""
    if normalise_provider(provider) == "coingecko":
        return CoinGeckoPriceClient(asset_id=coingecko_asset_id, timeout=timeout)
    return CoinbaseSpotPriceClient(base_symbol=base_symbol, timeout=timeout)


class PriceFeedAdapter:
    """Single entry point for spot prices from the configured provider"""

    def __init__(self, feed: PriceFeed, provider: str = DEFAULT_PROVIDER):
        """Initialise adapter

        Args:
            feed: Provider client
            provider: Provider name, for display
        """
        self.feed = feed
        self.provider = provider

    @classmethod
    def from_config(cls, config) -> "PriceFeedAdapter":
        provider = normalise_provider(config.price_feed_provider)
        feed = create_price_feed(
            provider,
            base_symbol=config.volatile_symbol,
            coingecko_asset_id=config.coingecko_asset_id,
            timeout=config.price_feed_timeout_seconds,
        )
        return cls(feed, provider)

    @property
    def provider_name(self) -> str:
        return self.provider.upper()

    def get_spot_price(self) -> SpotPrice:
        """Fetch the current spot price

        Raises:
            PriceFeedError: If the provider fails
        """
        logger.info(f"Fetching spot price from: {self.provider_name}")
        return self.feed.get_spot_price()

    def get_price_with_fallback(
        self, at: datetime | None = None, manual_price: float | None = None
    ) -> SpotPrice:
        """Resolve a price for manual position entry

        A positive manual price always wins. Otherwise a historical price
        is requested when ``at`` is given, else the current spot.

        Raises:
            PriceFeedError: If the provider fails
        """
        if manual_price is not None and manual_price > 0:
            return SpotPrice(
                price=float(manual_price),
                fetched_at=datetime.now(UTC),
                source="manual",
            )
        if at is not None:
            logger.info(
                f"Fetching price at {at.isoformat()} from: {self.provider_name}"
            )
            return self.feed.get_price_at(at)
        return self.get_spot_price()
