import asyncio
import sys

from loguru import logger

from swaptrack.application.services.command_dispatcher import CommandDispatcher
from swaptrack.core.app import SwaptrackApp
from swaptrack.core.config import Config
from swaptrack.shared.exceptions import ConfigurationError


def main() -> int:
    """CLI entry point for swaptrack

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    logger.add(
        "logs/swaptrack_{time}.log",
        rotation="1 day",
        retention="30 days",
        compression="gz",
        level="INFO",
    )

    try:
        config = Config.from_env()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    app = SwaptrackApp(config)
    dispatcher = CommandDispatcher(app)

    async def run():
        try:
            return await dispatcher.dispatch(sys.argv)
        finally:
            await app.shutdown()

    try:
        return asyncio.run(run())
    except KeyboardInterrupt:
        logger.warning("Stopped manually.")
        return 1
    except Exception as e:
        logger.opt(exception=True).critical(f"Unhandled exception: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
