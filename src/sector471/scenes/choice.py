"""Timed binary choice shown during the Space warning."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from sector471.models.timings import ChoiceTimings
from sector471.runtime.clock import PauseClock

logger = logging.getLogger(__name__)


class Choice(str, Enum):
    """The two options offered while the ship is failing."""

    SAVE_SHIP = "save_ship"
    SAVE_SELF = "save_self"


@dataclass
class ChoiceState:
    """Outcome of one gate activation. ``selected`` is written once."""

    selected: Choice | None = None
    window_expired: bool = False
    auto_selected: bool = False


class ChoiceGate:
    """Accepts one selection within a window, else picks the default.

    After a selection (manual or automatic) the gate stays visible but inert
    for ``linger`` seconds, then hides and calls ``on_hide``. Both the window
    and the linger run on the PauseClock.
    """

    def __init__(
        self,
        clock: PauseClock,
        timings: ChoiceTimings | None = None,
        *,
        on_hide: Callable[[], None] | None = None,
    ) -> None:
        self.clock = clock
        self.timings = timings or ChoiceTimings()
        self.default_choice = Choice(self.timings.default_choice)
        self.on_hide = on_hide
        self.state = ChoiceState()
        self.is_open = False
        self.visible = False
        self._selected = asyncio.Event()
        self._task: asyncio.Task[None] | None = None

    @property
    def selected(self) -> Choice | None:
        return self.state.selected

    @property
    def accepting(self) -> bool:
        """True while a selection would be accepted."""
        return self.is_open and self.state.selected is None

    def open(self, window: float) -> bool:
        """Show the gate for ``window`` seconds. Returns False if already opened."""
        if self._task is not None:
            return False
        self.state = ChoiceState()
        self._selected = asyncio.Event()
        self.is_open = True
        self.visible = True
        self._task = asyncio.create_task(self._run(window), name="choice-gate")
        logger.info("Choice gate opened for %.2fs", window)
        return True

    def select(self, choice: Choice | str) -> bool:
        """Record a user selection. Ignored once a choice exists."""
        if not self.accepting:
            return False
        self._resolve(Choice(choice), auto=False)
        return True

    def close(self) -> None:
        """Cancel the gate without resolving it."""
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()
        self.is_open = False
        self.visible = False

    def _resolve(self, choice: Choice, *, auto: bool) -> None:
        self.state.selected = choice
        self.state.auto_selected = auto
        self._selected.set()
        logger.info("Choice resolved: %s (%s)", choice.value, "auto" if auto else "user")

    async def _run(self, window: float) -> None:
        deadline = asyncio.create_task(self.clock.sleep(window))
        picked = asyncio.create_task(self._selected.wait())
        try:
            await asyncio.wait({deadline, picked}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            deadline.cancel()
            picked.cancel()

        if self.state.selected is None:
            self.state.window_expired = True
            self._resolve(self.default_choice, auto=True)

        await self.clock.sleep(self.timings.linger)
        self.is_open = False
        self.visible = False
        logger.info("Choice gate hidden")
        if self.on_hide is not None:
            self.on_hide()
