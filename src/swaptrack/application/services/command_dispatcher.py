from loguru import logger

from swaptrack.application.commands.base import (
    CloseCommand,
    DeleteCommand,
    ListCommand,
    OpenCommand,
    PriceCommand,
    PurgeCommand,
    ReconcileCommand,
    SignalCommand,
)
from swaptrack.application.commands.positions import (
    handle_close,
    handle_delete,
    handle_list,
    handle_open,
    handle_price,
    handle_purge,
)
from swaptrack.application.commands.reconcile import handle_reconcile
from swaptrack.application.commands.signal import handle_signal


class CommandDispatcher:
    """Dispatches CLI commands to appropriate handlers"""

    def __init__(self, app) -> None:
        self.app = app
        self._handlers = {
            "reconcile": self._handle_reconcile,
            "open": self._handle_open,
            "close": self._handle_close,
            "list": self._handle_list,
            "delete": self._handle_delete,
            "purge": self._handle_purge,
            "price": self._handle_price,
            "signal": self._handle_signal,
        }

    async def dispatch(self, argv: list[str]) -> int:
        """Parse and execute command

        Args:
            argv: Command line arguments (sys.argv)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        if len(argv) < 2:
            self._print_usage()
            return 1

        method = argv[1]
        handler = self._handlers.get(method)

        if handler is None:
            logger.error(f"Unknown method: {method}")
            self._print_usage()
            return 1

        return await handler(argv)

    def _print_usage(self) -> None:
        logger.error(
            "No method specified. Available: reconcile, open, close, list, "
            "delete, purge, price, signal"
        )

    async def _handle_reconcile(self, argv: list[str]) -> int:
        """Handle reconcile FROM TO FROM_AMOUNT TO_AMOUNT [TIMESTAMP]"""
        if len(argv) < 6:
            logger.error(
                "Usage: reconcile FROM TO FROM_AMOUNT TO_AMOUNT [TIMESTAMP]"
            )
            return 1
        command = ReconcileCommand(
            name="reconcile",
            from_symbol=argv[2],
            to_symbol=argv[3],
            from_amount=argv[4],
            to_amount=argv[5],
            timestamp=argv[6] if len(argv) > 6 else None,
        )
        return await handle_reconcile(self.app, command)

    async def _handle_open(self, argv: list[str]) -> int:
        """Handle open SIDE [PRICE]"""
        if len(argv) < 3:
            logger.error("Usage: open BUY|SELL [PRICE]")
            return 1
        command = OpenCommand(
            name="open",
            side=argv[2],
            price=argv[3] if len(argv) > 3 else None,
        )
        return await handle_open(self.app, command)

    async def _handle_close(self, argv: list[str]) -> int:
        """Handle close POSITION_ID [PRICE]"""
        if len(argv) < 3:
            logger.error("Usage: close POSITION_ID [PRICE]")
            return 1
        command = CloseCommand(
            name="close",
            position_id=argv[2],
            price=argv[3] if len(argv) > 3 else None,
        )
        return await handle_close(self.app, command)

    async def _handle_list(self, argv: list[str]) -> int:
        """Handle list [--price]"""
        command = ListCommand(name="list", with_price="--price" in argv[2:])
        return await handle_list(self.app, command)

    async def _handle_delete(self, argv: list[str]) -> int:
        """Handle delete POSITION_ID"""
        if len(argv) < 3:
            logger.error("Usage: delete POSITION_ID")
            return 1
        command = DeleteCommand(name="delete", position_id=argv[2])
        return await handle_delete(self.app, command)

    async def _handle_purge(self, argv: list[str]) -> int:
        return await handle_purge(self.app, PurgeCommand(name="purge"))

    async def _handle_price(self, argv: list[str]) -> int:
        return await handle_price(self.app, PriceCommand(name="price"))

    async def _handle_signal(self, argv: list[str]) -> int:
        return await handle_signal(self.app, SignalCommand(name="signal"))
