"""Unit tests for PositionService"""

from datetime import UTC, datetime, timedelta
from unittest.mock import Mock

import pytest

from swaptrack.application.services import PositionService
from swaptrack.domain.models import Side, SpotPrice
from swaptrack.shared.exceptions import AlreadyClosed, PositionNotFound, PriceFeedError

OPENED = datetime(2025, 6, 1, 10, 0, tzinfo=UTC)


@pytest.fixture
def price_feed():
    feed = Mock()
    feed.get_price_with_fallback.return_value = SpotPrice(
        price=2500.0, fetched_at=OPENED, source="mock"
    )
    feed.get_spot_price.return_value = SpotPrice(
        price=2600.0, fetched_at=OPENED, source="mock"
    )
    return feed


@pytest.fixture
def service(store, price_feed):
    return PositionService(store, price_feed)


class TestManualEntry:
    """Tests for opening and closing positions by hand"""

    def test_open_with_manual_price(self, store):
        service = PositionService(store)

        position = service.open_position(Side.BUY, price_usd=1800.0, opened_at=OPENED)

        assert position.price_usd == 1800.0
        assert position.opened_at == OPENED
        assert store.get(position.id) == position

    def test_open_without_price_or_feed_rejected(self, store):
        service = PositionService(store)

        with pytest.raises(ValueError):
            service.open_position(Side.BUY)

        assert store.list_all() == []

    def test_open_non_positive_price_rejected(self, service, price_feed):
        with pytest.raises(ValueError):
            service.open_position(Side.SELL, price_usd=0)

        price_feed.get_price_with_fallback.assert_not_called()

    def test_open_uses_feed_price(self, service, price_feed):
        position = service.open_position(Side.SELL, opened_at=OPENED, amount=0.5)

        assert position.price_usd == 2500.0
        assert position.amount == 0.5
        price_feed.get_price_with_fallback.assert_called_once_with(
            at=OPENED, manual_price=None
        )

    def test_open_feed_failure_propagates(self, service, price_feed, store):
        price_feed.get_price_with_fallback.side_effect = PriceFeedError("down")

        with pytest.raises(PriceFeedError):
            service.open_position(Side.BUY)

        assert store.list_all() == []

    @pytest.mark.parametrize("price", [0.0, -1.0])
    def test_open_rejects_unusable_feed_price(self, service, price_feed, store, price):
        price_feed.get_price_with_fallback.return_value = SpotPrice(
            price=price, fetched_at=OPENED, source="mock"
        )

        with pytest.raises(PriceFeedError, match="Unusable price"):
            service.open_position(Side.BUY)

        assert store.list_all() == []

    def test_close_with_manual_price(self, store):
        service = PositionService(store)
        position = service.open_position(Side.BUY, price_usd=2000.0, opened_at=OPENED)

        closed = service.close_position(
            position.id, close_price_usd=1800.0, closed_at=OPENED + timedelta(hours=2)
        )

        assert closed.profit_loss == -200.0
        assert closed.profit_loss_percent == -10.0

    def test_close_uses_feed_price(self, service):
        position = service.open_position(Side.SELL, price_usd=3000.0, opened_at=OPENED)

        closed = service.close_position(position.id)

        assert closed.close_price_usd == 2500.0
        assert closed.profit_loss == 500.0

    def test_close_unknown_position(self, service):
        with pytest.raises(PositionNotFound):
            service.close_position("missing", close_price_usd=2000.0)

    def test_close_twice(self, service):
        position = service.open_position(Side.BUY, price_usd=2000.0)
        service.close_position(position.id, close_price_usd=2100.0)

        with pytest.raises(AlreadyClosed):
            service.close_position(position.id, close_price_usd=2200.0)


class TestDeletion:
    """Tests for position deletion"""

    def test_delete_position(self, service, store):
        position = service.open_position(Side.BUY, price_usd=2000.0)

        service.delete_position(position.id)

        assert store.get(position.id) is None

    def test_delete_all_positions(self, service):
        service.open_position(Side.BUY, price_usd=2000.0)
        service.open_position(Side.SELL, price_usd=2100.0)

        assert service.delete_all_positions() == 2
        assert service.list_positions() == []


class TestSnapshot:
    """Tests for dashboard valuation"""

    def test_open_position_marked_to_market(self, service):
        service.open_position(Side.BUY, price_usd=2000.0, opened_at=OPENED)

        [snapshot] = service.snapshot(
            current_price=2500.0, now=OPENED + timedelta(hours=3)
        )

        assert snapshot.is_realized is False
        assert snapshot.pnl.absolute == 500.0
        assert snapshot.pnl.percent == 25.0
        assert snapshot.holding_hours == 3.0

    def test_open_sell_marked_to_market(self, service):
        service.open_position(Side.SELL, price_usd=2000.0, opened_at=OPENED)

        [snapshot] = service.snapshot(current_price=2500.0, now=OPENED)

        assert snapshot.pnl.absolute == -500.0

    def test_open_position_without_price_has_no_pnl(self, service):
        service.open_position(Side.BUY, price_usd=2000.0, opened_at=OPENED)

        [snapshot] = service.snapshot(now=OPENED)

        assert snapshot.pnl is None

    def test_closed_position_reports_stored_pnl(self, service):
        position = service.open_position(Side.BUY, price_usd=2000.0, opened_at=OPENED)
        service.close_position(
            position.id, close_price_usd=2200.0, closed_at=OPENED + timedelta(hours=1)
        )

        [snapshot] = service.snapshot(current_price=9999.0)

        assert snapshot.is_realized is True
        assert snapshot.pnl.absolute == 200.0
        assert snapshot.pnl.percent == 10.0
        assert snapshot.holding_hours == 1.0

    def test_snapshots_in_insertion_order(self, service):
        first = service.open_position(Side.BUY, price_usd=2000.0)
        second = service.open_position(Side.SELL, price_usd=2100.0)

        snapshots = service.snapshot()

        assert [s.position.id for s in snapshots] == [first.id, second.id]

    def test_current_price(self, service):
        assert service.current_price().price == 2600.0

    def test_current_price_rejects_unusable_quote(self, service, price_feed):
        price_feed.get_spot_price.return_value = SpotPrice(
            price=0.0, fetched_at=OPENED, source="mock"
        )

        with pytest.raises(PriceFeedError):
            service.current_price()

    def test_current_price_without_feed(self, store):
        with pytest.raises(ValueError):
            PositionService(store).current_price()
