"""Swap-to-position reconciliation.

Maps a completed swap onto exactly one position store mutation:

- buy-direction swap (stable -> volatile): close the oldest open SELL
  position if there is one, otherwise open a BUY position
- sell-direction swap (volatile -> stable): close the oldest open BUY
  position if there is one, otherwise open a SELL position

Swaps on any other pair are ignored.
"""

import inspect
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from loguru import logger

from swaptrack.domain.models import (
    ActionType,
    OpenPositionRef,
    PositionAction,
    Side,
    SwapResult,
    TokenPair,
)
from swaptrack.domain.pricing import (
    AssetSymbols,
    classify_swap,
    resolve_price,
    resolve_timestamp,
)
from swaptrack.domain.repositories import PositionRepository
from swaptrack.shared.exceptions import SwaptrackError

SuccessCallback = Callable[[PositionAction], Any]
ErrorCallback = Callable[[str], Any]


def oldest_open(
    positions: list[OpenPositionRef], side: Side
) -> OpenPositionRef | None:
    """Oldest open position on a side.

    Ordered by opened_at; ties keep insertion order (sorted is stable).
    """
    candidates = [p for p in positions if p.side is side]
    if not candidates:
        return None
    return sorted(candidates, key=lambda p: p.opened_at)[0]


async def invoke_callback(callback: Callable | None, *args: Any) -> None:
    """Call a sync or async callback, logging instead of raising"""
    if callback is None:
        return
    try:
        result = callback(*args)
        if inspect.isawaitable(result):
            await result
    except Exception as e:
        logger.exception(f"Reconciliation callback failed: {e}")


class Reconciler:
    """Turns completed swaps into position opens and closes"""

    def __init__(
        self,
        store: PositionRepository,
        symbols: AssetSymbols | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialise reconciler

        Args:
            store: Position store, the only thing that mutates positions
            symbols: Stable/volatile asset symbols
            clock: Source of the current time for timestamp fallback
        """
        self.store = store
        self.symbols = symbols or AssetSymbols()
        self.clock = clock or (lambda: datetime.now(UTC))

    def reconcile(
        self, swap: SwapResult, pair: TokenPair
    ) -> PositionAction | None:
        """Apply one swap to the position store

        Args:
            swap: Completed swap result
            pair: Token pair of the swap

        Returns:
            The action taken, or None for unsupported pairs

        Raises:
            PriceUnavailable: If the execution price cannot be computed
            StorageError: If the store fails
        """
        direction = classify_swap(pair, self.symbols)
        if direction is None:
            logger.info(
                f"Not a supported swap type ({pair}), "
                "skipping position management"
            )
            return None

        logger.info(f"{direction.value.upper()} swap detected ({pair})")

        price = resolve_price(swap, pair, self.symbols)
        timestamp = resolve_timestamp(swap, now=self.clock)

        side = direction.side
        opposing = oldest_open(self.store.list_open(), side.opposite)

        if opposing is not None:
            logger.info(
                f"Closing oldest {opposing.side.value} position: {opposing.id}"
            )
            closed = self.store.close(opposing.id, timestamp, price)
            return PositionAction(
                action=ActionType.CLOSED,
                side=closed.side,
                position_id=closed.id,
            )

        logger.info(f"Creating new {side.value} position with price: {price}")
        opened = self.store.open(side, price, opened_at=timestamp)
        return PositionAction(
            action=ActionType.OPENED, side=opened.side, position_id=opened.id
        )

    async def handle_swap_success(
        self,
        swap: SwapResult,
        pair: TokenPair,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> PositionAction | None:
        """Reconcile a swap and report the outcome through callbacks.

        Never raises: the swap is already final, so a tracking failure is
        only reported to ``on_error``.

        Returns:
            The action taken, or None if nothing was done or it failed
        """
        logger.info("Starting automatic position management")
        logger.debug(f"Swap data received: {swap}")

        try:
            action = self.reconcile(swap, pair)
        except SwaptrackError as e:
            logger.error(f"Failed to manage position from swap: {e}")
            await invoke_callback(on_error, f"Failed to manage position: {e}")
            return None
        except Exception as e:
            logger.exception(f"Unexpected error managing position: {e}")
            await invoke_callback(on_error, f"Failed to manage position: {e}")
            return None

        if action is not None:
            logger.info(f"Position management complete: {action}")
            await invoke_callback(on_success, action)
        return action
