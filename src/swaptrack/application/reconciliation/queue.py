"""Background queue for swap reconciliation.

Swap completions are submitted as jobs and processed one at a time by a
single worker task, so the position store only ever has one writer.
"""

import asyncio
from dataclasses import dataclass

from loguru import logger

from swaptrack.domain.models import PositionAction, SwapResult, TokenPair

from .guard import InFlightGuard
from .reconciler import ErrorCallback, Reconciler, SuccessCallback


@dataclass
class ReconciliationJob:
    """One submitted swap and its outcome future

    The future resolves to the PositionAction taken, or None when the
    swap was ignored or reconciliation failed.
    """

    swap: SwapResult
    pair: TokenPair
    guard: InFlightGuard | None
    future: asyncio.Future
    on_success: SuccessCallback | None = None
    on_error: ErrorCallback | None = None

    def __repr__(self) -> str:
        return f"ReconciliationJob(pair={self.pair})"


class ReconciliationQueue:
    """Single-worker queue that runs reconciliations in the background

    Submitting never blocks; results are delivered through the job's
    callbacks and future.
    """

    def __init__(self, reconciler: Reconciler, delay_seconds: float = 0.1):
        """Initialise queue

        Args:
            reconciler: Reconciler that applies each swap
            delay_seconds: Yield before each job so the swap UI updates first
        """
        self.reconciler = reconciler
        self.delay_seconds = delay_seconds
        self._queue: asyncio.Queue = asyncio.Queue()
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._running

    def submit(
        self,
        swap: SwapResult,
        pair: TokenPair,
        guard: InFlightGuard | None = None,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> ReconciliationJob | None:
        """Schedule a swap for reconciliation

        Args:
            swap: Completed swap result
            pair: Token pair of the swap
            guard: Caller-owned in-flight guard; held until the job finishes
            on_success: Called with the PositionAction taken
            on_error: Called with a failure message

        Returns:
            The queued job, or None if dropped because the guard was busy

        Raises:
            RuntimeError: If called outside a running event loop
        """
        future = asyncio.get_running_loop().create_future()
        if guard is not None and not guard.try_acquire():
            return None

        job = ReconciliationJob(
            swap=swap,
            pair=pair,
            guard=guard,
            future=future,
            on_success=on_success,
            on_error=on_error,
        )
        self._queue.put_nowait(job)
        logger.debug(f"Queued reconciliation: {job}")
        return job

    async def start(self) -> None:
        """Start the worker task"""
        if self._running:
            logger.warning("Reconciliation queue already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._process_jobs())
        logger.info("Reconciliation queue started")

    async def stop(self) -> None:
        """Stop the worker after already-queued jobs are processed"""
        if not self._running:
            logger.warning("Reconciliation queue not running")
            return

        if self._task:
            await self._queue.put(None)
            await self._task
            self._task = None

        self._running = False
        logger.info("Reconciliation queue stopped")

    async def _process_jobs(self) -> None:
        logger.debug("Reconciliation loop started")

        while True:
            job = await self._queue.get()
            if job is None:
                break
            await self._process_job(job)

        logger.debug("Reconciliation loop stopped")

    async def _process_job(self, job: ReconciliationJob) -> PositionAction | None:
        action = None
        try:
            await asyncio.sleep(self.delay_seconds)
            action = await self.reconciler.handle_swap_success(
                job.swap, job.pair, job.on_success, job.on_error
            )
        except Exception as e:
            logger.exception(f"Error processing {job}: {e}")
        finally:
            if job.guard is not None:
                job.guard.release()
            if not job.future.done():
                job.future.set_result(action)
        return action
