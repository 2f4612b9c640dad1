"""Timing profiles for the flow and each scene timeline.

Defaults reproduce the shipped cinematic. Every profile can be scaled as a
whole so the full flow can be previewed or tested faster.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, TypeVar

T = TypeVar("T")


def _scale_floats(profile: T, factor: float) -> T:
    if factor <= 0:
        raise ValueError(f"time scale must be positive, got {factor}")
    changes: dict[str, Any] = {}
    for f in fields(profile):  # type: ignore[arg-type]
        value = getattr(profile, f.name)
        if isinstance(value, float):
            changes[f.name] = value * factor
    return replace(profile, **changes)  # type: ignore[type-var]


@dataclass(frozen=True, slots=True)
class FlowTimings:
    """Top-level scene switching."""

    fade_duration: float = 1.2
    universal_to_earth: float = 11.0
    earth_hold: float = 26.0
    earth_black_fade: float = 1.2
    post_black_delay: float = 1.5

    @property
    def earth_to_space(self) -> float:
        """Wait between entering Earth and switching to Space."""
        return self.earth_hold + self.earth_black_fade + self.post_black_delay

    def scaled(self, factor: float) -> FlowTimings:
        return _scale_floats(self, factor)


@dataclass(frozen=True, slots=True)
class UniversalTimings:
    intro_fade_out: float = 1.2
    type_start_delay: float = 0.5
    char_delay: float = 0.10
    total_show: float = 10.0
    fade_to_black: float = 1.2
    black_hold: float = 5.0

    def scaled(self, factor: float) -> UniversalTimings:
        return _scale_floats(self, factor)


@dataclass(frozen=True, slots=True)
class EarthTimings:
    char_delay: float = 0.09
    fade: float = 1.2
    first_hold: float = 5.0
    top_left_hold: float = 4.0
    third_hold: float = 5.0
    visibility_switch: float = 0.5
    black_fade: float = 1.0
    black_hold: float = 1.0

    def scaled(self, factor: float) -> EarthTimings:
        return _scale_floats(self, factor)


@dataclass(frozen=True, slots=True)
class ChoiceTimings:
    """Choice window and linger. The window closes ``window_margin`` early."""

    window_margin: float = 2.0
    linger: float = 1.5
    default_choice: str = "save_ship"

    def window_for(self, warning_visible: float) -> float:
        return max(0.0, warning_visible - self.window_margin)

    def scaled(self, factor: float) -> ChoiceTimings:
        return _scale_floats(self, factor)


@dataclass(frozen=True, slots=True)
class SpaceTimings:
    grow: float = 40.0
    warning_delay: float = 10.0
    warning_visible: float = 10.0
    impact_delay: float = 0.0
    impact_start: float = 0.02
    impact_ramp: float = 5.5
    white_out_fade: float = 0.25
    white_out_hold: float = 0.6
    warning_name: str = "FullWarning"

    def scaled(self, factor: float) -> SpaceTimings:
        scaled = _scale_floats(self, factor)
        # impact_start is an amount, not a duration
        return replace(scaled, impact_start=self.impact_start)


@dataclass(frozen=True, slots=True)
class CrashTimings:
    white_reveal: float = 1.8
    start_delay_after_reveal: float = 1.5
    initial_delay: float = 11.0
    step_hold: float = 1.2
    forward_crossfade: float = 3.95
    backward_crossfade: float = 4.35
    min_settle: float = 0.10
    slides: tuple[str, ...] = (
        "Fade to Black 1",
        "Fade to Black 2",
        "Fade to Black 3",
        "Fade to Black 4",
    )

    def scaled(self, factor: float) -> CrashTimings:
        return _scale_floats(self, factor)


@dataclass(frozen=True, slots=True)
class TimingProfile:
    """All timings for one playthrough."""

    flow: FlowTimings = field(default_factory=FlowTimings)
    universal: UniversalTimings = field(default_factory=UniversalTimings)
    earth: EarthTimings = field(default_factory=EarthTimings)
    space: SpaceTimings = field(default_factory=SpaceTimings)
    choice: ChoiceTimings = field(default_factory=ChoiceTimings)
    crash: CrashTimings = field(default_factory=CrashTimings)

    def scaled(self, factor: float) -> TimingProfile:
        if factor <= 0:
            raise ValueError(f"time scale must be positive, got {factor}")
        return TimingProfile(
            flow=self.flow.scaled(factor),
            universal=self.universal.scaled(factor),
            earth=self.earth.scaled(factor),
            space=self.space.scaled(factor),
            choice=self.choice.scaled(factor),
            crash=self.crash.scaled(factor),
        )
