"""Pause-aware timing primitives.

Every timer in the engine goes through a shared ``PauseClock``; the
sequencers here build typewriter reveals and slide crossfades on top of it.
"""

from sector471.runtime.clock import DEFAULT_TICK_SECONDS, PauseClock
from sector471.runtime.crossfade import (
    CrossfadeSequencer,
    CrossfadeState,
    CrossfadeStep,
    Direction,
    choose_crossfade,
    slide_level,
)
from sector471.runtime.fade import Fade
from sector471.runtime.typewriter import (
    RevealHandle,
    SessionHandle,
    TypewriterSequencer,
    TypingSession,
)

__all__ = [
    "DEFAULT_TICK_SECONDS",
    "CrossfadeSequencer",
    "CrossfadeState",
    "CrossfadeStep",
    "Direction",
    "Fade",
    "PauseClock",
    "RevealHandle",
    "SessionHandle",
    "TypewriterSequencer",
    "TypingSession",
    "choose_crossfade",
    "slide_level",
]
