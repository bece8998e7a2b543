from loguru import logger
from rich.console import Console

from swaptrack.application.commands.base import SignalCommand
from swaptrack.domain.models import Prediction
from swaptrack.shared.exceptions import SwaptrackError


async def handle_signal(app, command: SignalCommand) -> int:
    """Fetch the directional signal and print the swap it suggests

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        signal = app.signals.fetch_signal()
    except SwaptrackError as e:
        logger.error(f"Failed to fetch signal: {e}")
        return 1

    pair = signal.suggested_pair(app.config.stable_symbol)
    colour = "green" if signal.prediction is Prediction.POSITIVE else "red"
    Console().print(
        f"[{colour}]{signal.prediction.value.upper()}[/{colour}] "
        f"on {signal.token_to_buy}: suggested swap {pair}"
    )
    return 0
