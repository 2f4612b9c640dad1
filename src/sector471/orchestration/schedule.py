"""Planned timeline of a full, unpaused playthrough."""

from __future__ import annotations

from dataclasses import dataclass

from sector471.models.scene import Scene
from sector471.models.timings import TimingProfile
from sector471.runtime.crossfade import choose_crossfade


@dataclass(frozen=True, slots=True)
class ScheduleEntry:
    """One milestone, in seconds from flow start."""

    at: float
    scene: Scene
    label: str


def plan_schedule(profile: TimingProfile | None = None) -> list[ScheduleEntry]:
    """Compute when each milestone happens if the flow is never paused."""
    p = profile or TimingProfile()
    entries: list[ScheduleEntry] = [ScheduleEntry(0.0, Scene.UNIVERSAL, "flow starts")]

    earth_at = p.flow.universal_to_earth
    entries.append(ScheduleEntry(earth_at, Scene.EARTH, "crossfade to earth"))

    space_at = earth_at + p.flow.earth_to_space
    entries.append(ScheduleEntry(space_at, Scene.SPACE, "crossfade to space"))

    s = p.space
    warning_at = space_at + s.warning_delay
    entries.append(ScheduleEntry(warning_at, Scene.SPACE, f"warning {s.warning_name} + choice opens"))
    entries.append(
        ScheduleEntry(
            warning_at + p.choice.window_for(s.warning_visible),
            Scene.SPACE,
            f"choice defaults to {p.choice.default_choice}",
        )
    )
    warning_end = warning_at + s.warning_visible
    entries.append(ScheduleEntry(warning_end, Scene.SPACE, "warning cleared"))
    impact_at = warning_end + s.impact_delay
    entries.append(ScheduleEntry(impact_at, Scene.SPACE, "impact ramp"))
    white_at = impact_at + s.impact_ramp
    entries.append(ScheduleEntry(white_at, Scene.SPACE, "white out"))

    crash_at = white_at + s.white_out_hold
    entries.append(ScheduleEntry(crash_at, Scene.CRASH, "crossfade to crash"))

    c = p.crash
    at = crash_at + c.white_reveal + c.start_delay_after_reveal + c.initial_delay
    if c.slides:
        entries.append(ScheduleEntry(at, Scene.CRASH, f"slide {c.slides[0]}"))
    current = c.slides[0] if c.slides else None
    for target in c.slides[1:]:
        _, duration = choose_crossfade(
            current,
            target,
            forward_duration=c.forward_crossfade,
            backward_duration=c.backward_crossfade,
        )
        at += duration
        entries.append(ScheduleEntry(at, Scene.CRASH, f"slide {target}"))
        at += max(c.min_settle, c.step_hold - duration)
        current = target
    entries.append(ScheduleEntry(at, Scene.CRASH, "final background"))
    return entries


def render_schedule(entries: list[ScheduleEntry]) -> str:
    """Render schedule entries for terminal output."""
    lines = ["Sector 471 Schedule", ""]
    for entry in entries:
        lines.append(f"{entry.at:8.2f}s  {entry.scene.value:<10} {entry.label}")
    return "\n".join(lines)
