from loguru import logger

from swaptrack.application.commands.base import ReconcileCommand
from swaptrack.domain.models import PositionAction, SwapResult, TokenPair


def _parse_timestamp(raw: str | None) -> float | None:
    if raw is None:
        return None
    return float(raw)


async def handle_reconcile(app, command: ReconcileCommand) -> int:
    """Reconcile a swap through the background queue

    Args:
        app: SwaptrackApp instance
        command: ReconcileCommand with pair, amounts and optional timestamp

    Returns:
        Exit code (0 for success or ignored pair, 1 for error)
    """
    try:
        timestamp = _parse_timestamp(command.timestamp)
    except ValueError:
        logger.error("Invalid timestamp. Use epoch seconds.")
        return 1

    swap = SwapResult(
        from_amount=command.from_amount,
        to_amount=command.to_amount,
        timestamp=timestamp,
    )
    pair = TokenPair(command.from_symbol, command.to_symbol)
    errors: list[str] = []

    def on_success(action: PositionAction) -> None:
        logger.info(f"Swap tracked: {action}")

    await app.queue.start()
    try:
        job = app.queue.submit(
            swap,
            pair,
            guard=app.guard,
            on_success=on_success,
            on_error=errors.append,
        )
        if job is None:
            return 1
        action = await job.future
    finally:
        await app.queue.stop()

    if errors:
        logger.error(errors[0])
        return 1
    if action is None:
        logger.info(f"No position change for {pair}")
    return 0
