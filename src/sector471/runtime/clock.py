"""Pause-aware delay primitive shared by every timeline."""

from __future__ import annotations

import asyncio
import logging
import time
from collections import deque
from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_TICK_SECONDS = 0.05


class PauseClock:
    """Clock whose sleepers stop counting time while it is paused.

    ``sleep()`` works in short ticks so a pause is observed within one tick.
    Remaining duration is measured against ``now()``, which excludes paused
    intervals, so a pause landing mid-tick costs the sleeper nothing: the
    wall-clock time to finish ``sleep(d)`` is ``d`` plus the time spent paused.

    Any number of tasks may sleep concurrently. ``resume()`` releases every
    parked sleeper in the order it parked.
    """

    def __init__(
        self,
        tick: float = DEFAULT_TICK_SECONDS,
        *,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        if tick <= 0:
            raise ValueError(f"tick must be positive, got {tick}")
        self.tick = tick
        self._monotonic = monotonic
        self._origin = monotonic()
        self._paused = False
        self._paused_at: float | None = None
        self._paused_total = 0.0
        self._waiters: deque[asyncio.Future[None]] = deque()

    @property
    def paused(self) -> bool:
        """Whether the clock is currently paused."""
        return self._paused

    @property
    def waiter_count(self) -> int:
        """Number of sleepers parked until the next resume."""
        return len(self._waiters)

    def now(self) -> float:
        """Active seconds since the clock was created, paused time excluded."""
        current = self._paused_at if self._paused_at is not None else self._monotonic()
        return current - self._origin - self._paused_total

    def pause(self) -> None:
        """Freeze every in-flight sleep. No-op if already paused."""
        if self._paused:
            return
        self._paused = True
        self._paused_at = self._monotonic()
        logger.info("Clock paused at %.3fs", self.now())

    def resume(self) -> None:
        """Unfreeze the clock and wake all parked sleepers. No-op if running."""
        if not self._paused:
            return
        if self._paused_at is not None:
            self._paused_total += self._monotonic() - self._paused_at
        self._paused_at = None
        self._paused = False

        waiters = list(self._waiters)
        self._waiters.clear()
        for waiter in waiters:
            if not waiter.done():
                waiter.set_result(None)
        logger.info("Clock resumed at %.3fs, released %d waiters", self.now(), len(waiters))

    async def sleep(self, seconds: float) -> None:
        """Wait ``seconds`` of active (unpaused) time.

        Returns immediately for non-positive durations. Cancelling the calling
        task aborts the wait at the next tick boundary.
        """
        if seconds <= 0:
            return

        deadline = self.now() + seconds
        while True:
            if self._paused:
                await self._wait_until_resumed()
                continue

            remaining = deadline - self.now()
            if remaining <= 0:
                return
            await asyncio.sleep(min(self.tick, remaining))

    async def _wait_until_resumed(self) -> None:
        waiter: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._waiters.append(waiter)
        try:
            await waiter
        finally:
            # A cancelled sleeper must not linger in the queue.
            if waiter in self._waiters:
                self._waiters.remove(waiter)
