"""Application wiring for swaptrack"""

from loguru import logger

from swaptrack.application.reconciliation import (
    InFlightGuard,
    Reconciler,
    ReconciliationQueue,
)
from swaptrack.application.services import PositionService
from swaptrack.core.config import Config
from swaptrack.infrastructure.database import PositionStore
from swaptrack.infrastructure.price_feeds import PriceFeedAdapter
from swaptrack.infrastructure.signals import PredictionClient


class SwaptrackApp:
    """Builds and owns the components for one running process"""

    def __init__(self, config: Config):
        """Initialise components from configuration

        Args:
            config: Loaded configuration
        """
        self.config = config
        self.store = PositionStore(config.db_path)
        self.price_feed = PriceFeedAdapter.from_config(config)
        self.reconciler = Reconciler(self.store, config.asset_symbols)
        self.queue = ReconciliationQueue(
            self.reconciler, delay_seconds=config.reconcile_delay_seconds
        )
        self.guard = InFlightGuard()
        self.positions = PositionService(self.store, self.price_feed)
        self.signals = PredictionClient.from_config(config)
        logger.debug("Application components initialised")

    async def shutdown(self) -> None:
        if self.queue.running:
            await self.queue.stop()
        self.store.close()
