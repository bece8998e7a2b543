"""Unit tests for CLI command dispatch and handlers"""

import pytest
import responses

from swaptrack.application.commands.positions import (
    build_positions_table,
    format_duration,
    format_percentage,
    format_pnl,
)
from swaptrack.application.services import PositionSnapshot
from swaptrack.application.services.command_dispatcher import CommandDispatcher
from swaptrack.core.app import SwaptrackApp
from swaptrack.core.config import Config
from swaptrack.domain.models import ProfitLoss, Side
from tests.factories import PositionFactory

COINBASE_URL = "https://api.coinbase.com/v2/prices/ETH-USD/spot"
SIGNAL_URL = "https://signals.example.com/predict"


@pytest.fixture
def app():
    application = SwaptrackApp(Config(db_path=":memory:", reconcile_delay_seconds=0))
    yield application
    application.store.close()


@pytest.fixture
def dispatcher(app):
    return CommandDispatcher(app)


class TestFormatting:
    """Tests for display helpers"""

    @pytest.mark.parametrize(
        "value,expected",
        [(10, "+10.00%"), (-5.5, "-5.50%"), (0, "0.00%"), (3.14159, "+3.14%")],
    )
    def test_format_percentage(self, value, expected):
        assert format_percentage(value) == expected

    @pytest.mark.parametrize(
        "hours,expected",
        [(None, "-"), (0.5, "30m"), (2.25, "2.2h"), (48, "2.0d")],
    )
    def test_format_duration(self, hours, expected):
        assert format_duration(hours) == expected

    @pytest.mark.parametrize(
        "pnl,expected",
        [
            (ProfitLoss(absolute=200.0, percent=10.0), "[green]+10.00%[/green]"),
            (ProfitLoss(absolute=-50.0, percent=-2.5), "[red]-2.50%[/red]"),
            (ProfitLoss(absolute=0.0, percent=0.0), "[white]0.00%[/white]"),
            (None, "Update prices"),
        ],
    )
    def test_format_pnl(self, pnl, expected):
        assert format_pnl(pnl) == expected

    def test_build_positions_table(self):
        snapshots = [
            PositionSnapshot(
                position=PositionFactory.position(),
                pnl=ProfitLoss(absolute=100.0, percent=5.0),
                holding_hours=1.5,
            ),
            PositionSnapshot(
                position=PositionFactory.position(id="pos-2", side=Side.SELL),
                pnl=None,
                holding_hours=None,
            ),
        ]

        table = build_positions_table(snapshots)

        assert table.row_count == 2


@pytest.mark.asyncio
class TestCommandDispatcher:
    """Tests for CommandDispatcher"""

    async def test_no_method(self, dispatcher):
        assert await dispatcher.dispatch(["swaptrack"]) == 1

    async def test_unknown_method(self, dispatcher):
        assert await dispatcher.dispatch(["swaptrack", "bogus"]) == 1

    async def test_reconcile_missing_arguments(self, dispatcher):
        assert await dispatcher.dispatch(["swaptrack", "reconcile", "USDC"]) == 1

    async def test_reconcile_opens_and_closes(self, dispatcher, app):
        opened = await dispatcher.dispatch(
            ["swaptrack", "reconcile", "USDC", "ETH", "2000", "1", "1717236000"]
        )
        closed = await dispatcher.dispatch(
            ["swaptrack", "reconcile", "ETH", "USDC", "1", "2200"]
        )

        assert opened == 0
        assert closed == 0
        [position] = app.store.list_all()
        assert position.profit_loss == 200.0
        assert position.profit_loss_percent == 10.0
        assert app.guard.busy is False

    async def test_reconcile_unsupported_pair_succeeds(self, dispatcher, app):
        result = await dispatcher.dispatch(
            ["swaptrack", "reconcile", "DAI", "WBTC", "100", "1"]
        )

        assert result == 0
        assert app.store.list_all() == []

    async def test_reconcile_failure_returns_error(self, dispatcher, app):
        result = await dispatcher.dispatch(
            ["swaptrack", "reconcile", "USDC", "ETH", "2000", "0"]
        )

        assert result == 1
        assert app.store.list_all() == []

    async def test_reconcile_invalid_timestamp(self, dispatcher):
        result = await dispatcher.dispatch(
            ["swaptrack", "reconcile", "USDC", "ETH", "2000", "1", "yesterday"]
        )

        assert result == 1

    async def test_open_close_with_manual_prices(self, dispatcher, app):
        assert await dispatcher.dispatch(["swaptrack", "open", "buy", "2000"]) == 0
        [position] = app.store.list_all()

        result = await dispatcher.dispatch(
            ["swaptrack", "close", position.id, "2500"]
        )

        assert result == 0
        assert app.store.get(position.id).profit_loss_percent == 25.0

    async def test_open_invalid_side(self, dispatcher):
        assert await dispatcher.dispatch(["swaptrack", "open", "long"]) == 1

    async def test_close_unknown_position(self, dispatcher):
        result = await dispatcher.dispatch(["swaptrack", "close", "missing", "2000"])

        assert result == 1

    @responses.activate
    async def test_open_fetches_price(self, dispatcher, app):
        responses.add(
            responses.GET,
            COINBASE_URL,
            json={"data": {"amount": "3050.10"}},
            status=200,
        )

        assert await dispatcher.dispatch(["swaptrack", "open", "SELL"]) == 0
        assert app.store.list_all()[0].price_usd == 3050.10

    @responses.activate
    async def test_open_price_feed_failure(self, dispatcher, app):
        responses.add(responses.GET, COINBASE_URL, json={}, status=500)

        assert await dispatcher.dispatch(["swaptrack", "open", "SELL"]) == 1
        assert app.store.list_all() == []

    async def test_list_empty(self, dispatcher):
        assert await dispatcher.dispatch(["swaptrack", "list"]) == 0

    @responses.activate
    async def test_list_with_price(self, dispatcher):
        responses.add(
            responses.GET,
            COINBASE_URL,
            json={"data": {"amount": "2100"}},
            status=200,
        )
        await dispatcher.dispatch(["swaptrack", "open", "BUY", "2000"])

        assert await dispatcher.dispatch(["swaptrack", "list", "--price"]) == 0
        assert len(responses.calls) == 1

    async def test_delete_and_purge(self, dispatcher, app):
        await dispatcher.dispatch(["swaptrack", "open", "BUY", "2000"])
        await dispatcher.dispatch(["swaptrack", "open", "SELL", "2100"])
        first = app.store.list_all()[0]

        assert await dispatcher.dispatch(["swaptrack", "delete", first.id]) == 0
        assert len(app.store.list_all()) == 1

        assert await dispatcher.dispatch(["swaptrack", "purge"]) == 0
        assert app.store.list_all() == []

    async def test_delete_missing_arguments(self, dispatcher):
        assert await dispatcher.dispatch(["swaptrack", "delete"]) == 1

    @responses.activate
    async def test_price(self, dispatcher):
        responses.add(
            responses.GET,
            COINBASE_URL,
            json={"data": {"amount": "2999.99"}},
            status=200,
        )

        assert await dispatcher.dispatch(["swaptrack", "price"]) == 0

    @responses.activate
    async def test_signal(self, dispatcher, app):
        app.signals.url = SIGNAL_URL
        responses.add(
            responses.POST,
            SIGNAL_URL,
            json={"prediction": "positive", "tokenToBuy": "ETH"},
            status=200,
        )

        assert await dispatcher.dispatch(["swaptrack", "signal"]) == 0
        assert responses.calls[0].request.method == "POST"

    @responses.activate
    async def test_signal_service_error(self, dispatcher, app):
        app.signals.url = SIGNAL_URL
        responses.add(responses.POST, SIGNAL_URL, body="down", status=502)

        assert await dispatcher.dispatch(["swaptrack", "signal"]) == 1

    async def test_signal_not_configured(self, dispatcher):
        assert await dispatcher.dispatch(["swaptrack", "signal"]) == 1
