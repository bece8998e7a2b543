"""Action timestamp extraction from swap results.

Extractors run in priority order; the first one that yields a usable
timestamp wins. When none does, the current time is used.
"""

import math
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from numbers import Real

from loguru import logger

from swaptrack.domain.models import SwapResult

Extractor = Callable[[SwapResult], datetime | None]

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _from_epoch_seconds(value) -> datetime | None:
    # bool is a Real subclass but never a timestamp
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    # Zero is a placeholder, not the epoch
    if not math.isfinite(value) or value == 0:
        return None
    try:
        return EPOCH + timedelta(milliseconds=int(value * 1000))
    except (OverflowError, OSError, ValueError):
        logger.warning(f"Ignoring out-of-range swap timestamp: {value}")
        return None


def transaction_timestamp(swap: SwapResult) -> datetime | None:
    return _from_epoch_seconds(swap.timestamp)


def block_timestamp(swap: SwapResult) -> datetime | None:
    return _from_epoch_seconds(swap.block_timestamp)


DEFAULT_EXTRACTORS: tuple[tuple[str, Extractor], ...] = (
    ("transaction", transaction_timestamp),
    ("block", block_timestamp),
)


def resolve_timestamp(
    swap: SwapResult,
    now: Callable[[], datetime] | None = None,
    extractors: tuple[tuple[str, Extractor], ...] = DEFAULT_EXTRACTORS,
) -> datetime:
    """Resolve when a swap happened.

    Args:
        swap: Completed swap result
        now: Clock used for the fallback (defaults to UTC now)
        extractors: Named extractors in priority order

    Returns:
        Timezone-aware UTC datetime
    """
    for name, extractor in extractors:
        resolved = extractor(swap)
        if resolved is not None:
            logger.debug(f"Using {name} timestamp: {resolved.isoformat()}")
            return resolved

    current = now() if now else datetime.now(UTC)
    logger.debug(f"Using current time as fallback: {current.isoformat()}")
    return current
