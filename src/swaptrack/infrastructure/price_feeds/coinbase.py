"""Coinbase spot price client"""

from datetime import UTC, datetime

from loguru import logger

from swaptrack.domain.models import SpotPrice

from .http import fetch_json, parse_price


class CoinbaseSpotPriceClient:
    """Fetches spot prices from the Coinbase public prices API

    Coinbase only serves current spot prices.
    """

    BASE_URL = "https://api.coinbase.com/v2/prices"
    source = "coinbase_spot"

    def __init__(
        self,
        base_symbol: str = "ETH",
        quote_symbol: str = "USD",
        timeout: float | None = None,
    ):
        """Initialise Coinbase client

        Args:
            base_symbol: Asset to price
            quote_symbol: Currency to price it in
            timeout: Request timeout in seconds (None waits indefinitely)
        """
        self.product = f"{base_symbol.upper()}-{quote_symbol.upper()}"
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.BASE_URL}/{self.product}/spot"

    def get_spot_price(self) -> SpotPrice:
        """Fetch the current spot price

        Raises:
            PriceFeedError: If the request fails or the response is malformed
        """
        payload = fetch_json(self.url, "Coinbase", timeout=self.timeout)
        data = payload.get("data") if isinstance(payload, dict) else None
        amount = data.get("amount") if isinstance(data, dict) else None
        price = parse_price(amount, "Coinbase")
        logger.debug(f"Coinbase {self.product} spot: {price}")
        return SpotPrice(
            price=price, fetched_at=datetime.now(UTC), source=self.source
        )

    def get_price_at(self, at: datetime) -> SpotPrice:
        """Historical prices are not supported; returns the current spot"""
        logger.warning(
            "Coinbase API does not support historical prices. "
            "Using current spot price."
        )
        return self.get_spot_price()
