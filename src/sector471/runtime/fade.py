"""Clock-bound linear value channels for published opacities and amounts."""

from __future__ import annotations

from sector471.runtime.clock import PauseClock


class Fade:
    """A float that is either settled or ramping linearly toward a target.

    Ramps are measured on the PauseClock, so a paused clock freezes every
    channel at its current value. Renderers read ``value``; tests usually
    assert on ``target``.
    """

    def __init__(self, clock: PauseClock, value: float = 0.0) -> None:
        self._clock = clock
        self._start = value
        self._target = value
        self._duration = 0.0
        self._started_at = clock.now()

    def __repr__(self) -> str:
        return f"Fade(value={self.value:.3f}, target={self._target:.3f})"

    @property
    def target(self) -> float:
        return self._target

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def value(self) -> float:
        """Current value of the channel."""
        if self._duration <= 0:
            return self._target
        progress = (self._clock.now() - self._started_at) / self._duration
        progress = min(1.0, max(0.0, progress))
        return self._start + (self._target - self._start) * progress

    @property
    def settled(self) -> bool:
        """True once the current ramp (if any) has reached its target."""
        if self._duration <= 0:
            return True
        return self._clock.now() - self._started_at >= self._duration

    def set(self, value: float) -> None:
        """Jump to ``value`` immediately."""
        self._start = value
        self._target = value
        self._duration = 0.0
        self._started_at = self._clock.now()

    def to(self, target: float, duration: float) -> None:
        """Ramp from the current value to ``target`` over ``duration`` seconds."""
        if duration <= 0:
            self.set(target)
            return
        self._start = self.value
        self._target = target
        self._duration = duration
        self._started_at = self._clock.now()
