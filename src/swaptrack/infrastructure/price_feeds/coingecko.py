"""CoinGecko price client"""

from datetime import UTC, datetime

from loguru import logger

from swaptrack.domain.models import SpotPrice

from .http import fetch_json, parse_price


class CoinGeckoPriceClient:
    """Fetches current and historical prices from the CoinGecko API"""

    BASE_URL = "https://api.coingecko.com/api/v3"
    source = "coingecko"

    def __init__(
        self,
        asset_id: str = "ethereum",
        vs_currency: str = "usd",
        timeout: float | None = None,
    ):
        """Initialise CoinGecko client

        Args:
            asset_id: CoinGecko coin id (e.g. "ethereum")
            vs_currency: Quote currency
            timeout: Request timeout in seconds (None waits indefinitely)
        """
        self.asset_id = asset_id
        self.vs_currency = vs_currency.lower()
        self.timeout = timeout

    def get_spot_price(self) -> SpotPrice:
        """Fetch the current price

        Raises:
            PriceFeedError: If the request fails or the response is malformed
        """
        payload = fetch_json(
            f"{self.BASE_URL}/simple/price",
            "CoinGecko",
            params={"ids": self.asset_id, "vs_currencies": self.vs_currency},
            timeout=self.timeout,
        )
        quote = payload.get(self.asset_id) if isinstance(payload, dict) else None
        value = quote.get(self.vs_currency) if isinstance(quote, dict) else None
        price = parse_price(value, "CoinGecko")
        logger.debug(f"CoinGecko {self.asset_id} price: {price}")
        return SpotPrice(
            price=price, fetched_at=datetime.now(UTC), source=self.source
        )

    def get_price_at(self, at: datetime) -> SpotPrice:
        """Fetch the daily historical price for the date of ``at``

        Raises:
            PriceFeedError: If the request fails or the response is malformed
        """
        payload = fetch_json(
            f"{self.BASE_URL}/coins/{self.asset_id}/history",
            "CoinGecko",
            params={"date": at.strftime("%d-%m-%Y"), "localization": "false"},
            timeout=self.timeout,
        )
        market_data = (
            payload.get("market_data") if isinstance(payload, dict) else None
        )
        current = (
            market_data.get("current_price")
            if isinstance(market_data, dict)
            else None
        )
        value = current.get(self.vs_currency) if isinstance(current, dict) else None
        price = parse_price(value, "CoinGecko")
        logger.debug(
            f"CoinGecko {self.asset_id} price on {at.date().isoformat()}: {price}"
        )
        return SpotPrice(price=price, fetched_at=at, source=f"{self.source}_history")
