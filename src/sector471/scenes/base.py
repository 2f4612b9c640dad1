"""Shared lifecycle for per-scene timelines."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum
from typing import ClassVar

from sector471.models.scene import Scene
from sector471.runtime.clock import PauseClock

logger = logging.getLogger(__name__)

FinishCallback = Callable[[], None]
"""Called once when a timeline runs to completion (never on stop)."""


class TimelineState(Enum):
    """Lifecycle of one timeline activation."""

    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"
    STOPPED = "stopped"


class SceneTimeline(ABC):
    """A scripted sequence of pause-aware waits for one scene.

    Each activation runs as a single asyncio task. ``start()`` while a task
    exists is a no-op, ``stop()`` cancels the task and any helper tasks the
    timeline spawned. Published values are plain attributes and ``Fade``
    channels that only the timeline's own task writes.
    """

    scene: ClassVar[Scene]

    def __init__(
        self,
        clock: PauseClock,
        *,
        on_finish: FinishCallback | None = None,
    ) -> None:
        self.clock = clock
        self.on_finish = on_finish
        self.state = TimelineState.IDLE
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self.state == TimelineState.RUNNING

    @property
    def finished(self) -> bool:
        return self.state == TimelineState.FINISHED

    def start(self) -> bool:
        """Start the timeline. Returns False if it is already active."""
        if self._task is not None:
            logger.debug("%s timeline already started", self.scene.value)
            return False
        self.reset()
        self.state = TimelineState.RUNNING
        self._task = asyncio.create_task(
            self._execute(), name=f"{self.scene.value}-timeline"
        )
        return True

    def stop(self) -> None:
        """Cancel the timeline and everything it spawned. Safe to repeat."""
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()
            self.state = TimelineState.STOPPED
            logger.info("%s timeline stopped", self.scene.value)
        self._stop_children()

    async def wait(self) -> None:
        """Wait until the current activation finishes or is cancelled."""
        task = self._task
        if task is not None:
            await asyncio.wait({task})

    def reset(self) -> None:
        """Restore published values to their pre-start state."""

    def _stop_children(self) -> None:
        """Cancel helper tasks (typewriters, gates) owned by the timeline."""

    async def _execute(self) -> None:
        logger.info("%s timeline started", self.scene.value)
        await self._run()
        self.state = TimelineState.FINISHED
        logger.info("%s timeline finished", self.scene.value)
        if self.on_finish is not None:
            self.on_finish()

    @abstractmethod
    async def _run(self) -> None:
        """The scripted sequence itself."""
