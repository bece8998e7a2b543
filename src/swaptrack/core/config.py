"""Configuration management for swaptrack"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from swaptrack.domain.pricing import AssetSymbols
from swaptrack.shared.exceptions import ConfigurationError


def get_db_path() -> Path:
    """Get database path that works both locally and in production.

    Priority order:
    1. Production path: /opt/swaptrack/data/swaptrack.db
    2. Local development path: project_root/data/swaptrack.db

    Returns:
        Path object for the database file
    """
    production_path = Path("/opt/swaptrack/data/swaptrack.db")
    if production_path.parent.exists():
        logger.debug(f"Using production database path: {production_path}")
        return production_path

    # src/swaptrack/core/config.py -> project root
    project_root = Path(__file__).parent.parent.parent.parent
    local_path = project_root / "data" / "swaptrack.db"
    local_path.parent.mkdir(parents=True, exist_ok=True)

    logger.debug(f"Using local database path: {local_path}")
    return local_path


def _get_float(name: str, default: float | None) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {raw!r}")
    return value


@dataclass
class Config:
    """Configuration for swaptrack loaded from environment variables"""

    db_path: str

    # Price feed backend: "coinbase" or "coingecko"
    price_feed_provider: str = "coinbase"

    # Stable reference asset and volatile traded asset
    stable_symbol: str = "USDC"
    volatile_symbol: str = "ETH"

    # CoinGecko coin id for the volatile asset
    coingecko_asset_id: str = "ethereum"

    # Yield before reconciling so the swap result renders first
    reconcile_delay_seconds: float = 0.1

    # None waits indefinitely
    price_feed_timeout_seconds: float | None = None

    # Prediction service endpoint for directional signals
    signal_api_url: str | None = None
    signal_timeout_seconds: float | None = None

    @property
    def asset_symbols(self) -> AssetSymbols:
        return AssetSymbols(
            stable=self.stable_symbol, volatile=self.volatile_symbol
        )

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """Load configuration from environment variables

        Args:
            env_file: Optional .env file loaded before reading the environment

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If a value is invalid
        """
        if env_file is not None:
            load_dotenv(env_file)
        else:
            load_dotenv()

        db_path = os.getenv("SWAPTRACK_DB_PATH") or str(get_db_path())

        stable = os.getenv("STABLE_SYMBOL", cls.stable_symbol).strip().upper()
        volatile = (
            os.getenv("VOLATILE_SYMBOL", cls.volatile_symbol).strip().upper()
        )
        if not stable or not volatile:
            raise ConfigurationError("Asset symbols cannot be empty")
        if stable == volatile:
            raise ConfigurationError(
                f"Stable and volatile symbols must differ, both are {stable}"
            )

        config = cls(
            db_path=db_path,
            price_feed_provider=os.getenv(
                "PRICE_FEED_PROVIDER", cls.price_feed_provider
            )
            .strip()
            .lower(),
            stable_symbol=stable,
            volatile_symbol=volatile,
            coingecko_asset_id=os.getenv(
                "COINGECKO_ASSET_ID", cls.coingecko_asset_id
            ),
            reconcile_delay_seconds=_get_float(
                "RECONCILE_DELAY_SECONDS", cls.reconcile_delay_seconds
            ),
            price_feed_timeout_seconds=_get_float(
                "PRICE_FEED_TIMEOUT_SECONDS", None
            ),
            signal_api_url=os.getenv("SIGNAL_API_URL", "").strip() or None,
            signal_timeout_seconds=_get_float("SIGNAL_TIMEOUT_SECONDS", None),
        )

        logger.info("Configuration loaded:")
        logger.info(f"  Database: {config.db_path}")
        logger.info(f"  Price Feed: {config.price_feed_provider}")
        logger.info(
            f"  Pair: {config.stable_symbol}/{config.volatile_symbol}"
        )
        logger.info(f"  CoinGecko Asset: {config.coingecko_asset_id}")
        logger.info(
            f"  Reconcile Delay: {config.reconcile_delay_seconds} seconds"
        )
        logger.info(
            f"  Price Feed Timeout: "
            f"{config.price_feed_timeout_seconds or 'none'}"
        )
        logger.info(f"  Signal API: {config.signal_api_url or 'not set'}")

        return config
