"""Single-slot in-flight guard for swap reconciliation"""

from loguru import logger


class InFlightGuard:
    """Tracks whether a reconciliation is currently running.

    Owned by the caller that handles swap completion (one per UI session
    or per wallet) and handed to the queue with every submission. While
    the slot is held, further submissions are dropped rather than queued.
    """

    def __init__(self, name: str = "reconciliation") -> None:
        self.name = name
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    def try_acquire(self) -> bool:
        """Take the slot if it is free

        Returns:
            True if acquired, False if a reconciliation is already in flight
        """
        if self._busy:
            logger.warning(f"{self.name} already in progress, skipping")
            return False
        self._busy = True
        return True

    def release(self) -> None:
        self._busy = False
