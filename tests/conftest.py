"""Pytest fixtures for swaptrack tests"""

import pytest
from loguru import logger

from swaptrack.application.reconciliation import Reconciler
from swaptrack.domain.models import TokenPair
from swaptrack.infrastructure.database import PositionStore
from tests.factories import FIXED_NOW


@pytest.fixture
def store():
    """In-memory position store for testing"""
    position_store = PositionStore(":memory:")
    yield position_store
    position_store.close()


@pytest.fixture
def reconciler(store):
    """Reconciler with a fixed clock for timestamp fallback"""
    return Reconciler(store, clock=lambda: FIXED_NOW)


@pytest.fixture
def buy_pair() -> TokenPair:
    return TokenPair(from_symbol="USDC", to_symbol="ETH")


@pytest.fixture
def sell_pair() -> TokenPair:
    return TokenPair(from_symbol="ETH", to_symbol="USDC")


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test"""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)
