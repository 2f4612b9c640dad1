"""Ordered slide crossfades with direction-dependent timing."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from sector471.runtime.clock import PauseClock
from sector471.runtime.fade import Fade

logger = logging.getLogger(__name__)

_TRAILING_DIGITS = re.compile(r"(\d+)\s*$")


class Direction(Enum):
    """Direction of a slide transition, judged by slide level."""

    FORWARD = "forward"
    BACKWARD = "backward"


def slide_level(name: str) -> int:
    """Numeric suffix of a slide name ("Fade to Black 3" -> 3), 0 if none."""
    match = _TRAILING_DIGITS.search(name)
    return int(match.group(1)) if match else 0


def choose_crossfade(
    current: str | None,
    target: str,
    *,
    forward_duration: float,
    backward_duration: float,
) -> tuple[Direction, float]:
    """Pick direction and crossfade duration for ``current`` -> ``target``."""
    current_level = slide_level(current) if current is not None else 0
    if slide_level(target) < current_level:
        return Direction.BACKWARD, backward_duration
    return Direction.FORWARD, forward_duration


@dataclass
class CrossfadeState:
    """Slides a renderer should draw. ``next_slide`` is set only mid-transition."""

    current_slide: str | None = None
    next_slide: str | None = None
    sequence_done: bool = False


@dataclass(frozen=True, slots=True)
class CrossfadeStep:
    """Record of one completed transition."""

    from_slide: str | None
    to_slide: str
    direction: Direction
    duration: float
    settle: float


@dataclass
class CrossfadeSequencer:
    """Walks an ordered slide list, crossfading each into the next."""

    clock: PauseClock
    state: CrossfadeState = field(default_factory=CrossfadeState)
    steps: list[CrossfadeStep] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.next_opacity = Fade(self.clock)

    def reset(self) -> None:
        """Clear all visible state."""
        self.state = CrossfadeState()
        self.next_opacity.set(0.0)
        self.steps.clear()

    async def run(
        self,
        slides: Sequence[str],
        *,
        forward_duration: float,
        backward_duration: float,
        step_hold: float,
        min_settle: float,
    ) -> None:
        """Play ``slides`` in order and mark the sequence done.

        Cancellation aborts at the current sleep and leaves state as it was;
        callers reset visible state themselves when stopping.
        """
        self.reset()
        if slides:
            self.state.current_slide = slides[0]

        for target in slides[1:]:
            current = self.state.current_slide
            direction, duration = choose_crossfade(
                current,
                target,
                forward_duration=forward_duration,
                backward_duration=backward_duration,
            )
            settle = max(min_settle, step_hold - duration)

            self.state.next_slide = target
            self.next_opacity.set(0.0)
            self.next_opacity.to(1.0, duration)
            await self.clock.sleep(duration)

            self.state.current_slide = target
            self.state.next_slide = None
            self.next_opacity.set(0.0)
            self.steps.append(
                CrossfadeStep(
                    from_slide=current,
                    to_slide=target,
                    direction=direction,
                    duration=duration,
                    settle=settle,
                )
            )
            logger.debug("Crossfaded %s -> %s (%s)", current, target, direction.value)

            if settle > 0:
                await self.clock.sleep(settle)

        self.state.current_slide = None
        self.state.next_slide = None
        self.next_opacity.set(0.0)
        self.state.sequence_done = True
        logger.info("Crossfade sequence finished after %d transitions", len(self.steps))
