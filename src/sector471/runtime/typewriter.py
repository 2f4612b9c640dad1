"""Character-by-character text reveal driven by the PauseClock.

Each reveal captures a ``SessionHandle`` carrying the generation it was
started under. Starting a newer reveal or calling ``stop()`` bumps the
session generation; an older loop notices the mismatch before its next
character and exits without writing anything further.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Generator
from dataclasses import dataclass
from typing import Any

from sector471.runtime.clock import PauseClock

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[str], None]
"""Receives the revealed-so-far text after each character."""


@dataclass
class TypingSession:
    """Text currently being revealed in one logical slot."""

    full_text: str = ""
    revealed: str = ""
    generation: int = 0


@dataclass(frozen=True, slots=True)
class SessionHandle:
    """Generation captured by one reveal loop."""

    generation: int


class RevealHandle:
    """Awaitable, cancellable handle for an in-flight reveal.

    Awaiting it yields ``True`` if every character was emitted and ``False``
    if the reveal was superseded or stopped.
    """

    def __init__(self, task: asyncio.Task[bool], session: SessionHandle) -> None:
        self._task = task
        self.session = session

    @property
    def done(self) -> bool:
        return self._task.done()

    def cancel(self) -> None:
        self._task.cancel()

    async def wait(self) -> bool:
        """Wait for the reveal to finish."""
        try:
            return await self._task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
            return False

    def __await__(self) -> Generator[Any, None, bool]:
        return self.wait().__await__()


class TypewriterSequencer:
    """Reveals text into one slot, one character per ``char_delay``."""

    def __init__(self, clock: PauseClock, char_delay: float) -> None:
        self.clock = clock
        self.char_delay = char_delay
        self.session = TypingSession()
        self._tasks: set[asyncio.Task[bool]] = set()

    @property
    def revealed(self) -> str:
        return self.session.revealed

    def is_current(self, handle: SessionHandle) -> bool:
        """Check whether ``handle`` still owns the slot."""
        return handle.generation == self.session.generation

    def begin(self, text: str) -> SessionHandle:
        """Invalidate any prior reveal and claim the slot for ``text``."""
        self.session.generation += 1
        self.session.full_text = text
        self.session.revealed = ""
        return SessionHandle(self.session.generation)

    def reveal(
        self,
        text: str,
        on_update: UpdateCallback | None = None,
        *,
        char_delay: float | None = None,
    ) -> RevealHandle:
        """Start revealing ``text`` as a background task."""
        handle = self.begin(text)
        delay = self.char_delay if char_delay is None else char_delay
        task = asyncio.create_task(
            self._type(handle, text, on_update, delay),
            name=f"typewriter-{handle.generation}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return RevealHandle(task, handle)

    def stop(self) -> None:
        """Invalidate the current reveal and cancel any running loops."""
        self.session.generation += 1
        for task in list(self._tasks):
            task.cancel()

    async def _type(
        self,
        handle: SessionHandle,
        text: str,
        on_update: UpdateCallback | None,
        delay: float,
    ) -> bool:
        revealed = ""
        for char in text:
            if not self.is_current(handle):
                logger.debug("Reveal generation %d superseded", handle.generation)
                return False
            revealed += char
            self.session.revealed = revealed
            if on_update is not None:
                on_update(revealed)
            await self.clock.sleep(delay)
        return self.is_current(handle)
