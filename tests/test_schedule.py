"""Tests for the planned playthrough schedule."""

import pytest

from sector471.models.scene import Scene
from sector471.models.timings import TimingProfile
from sector471.orchestration.schedule import plan_schedule, render_schedule


def _at(entries, label: str) -> float:
    return next(e.at for e in entries if e.label == label)


def test_default_schedule_milestones() -> None:
    entries = plan_schedule()

    assert entries[0].at == 0.0
    assert _at(entries, "crossfade to earth") == pytest.approx(11.0)
    assert _at(entries, "crossfade to space") == pytest.approx(39.7)
    assert _at(entries, "warning FullWarning + choice opens") == pytest.approx(49.7)
    assert _at(entries, "choice defaults to save_ship") == pytest.approx(57.7)
    assert _at(entries, "warning cleared") == pytest.approx(59.7)
    assert _at(entries, "white out") == pytest.approx(65.2)
    assert _at(entries, "crossfade to crash") == pytest.approx(65.8)
    assert _at(entries, "slide Fade to Black 1") == pytest.approx(80.1)
    assert _at(entries, "slide Fade to Black 2") == pytest.approx(84.05)
    assert _at(entries, "final background") == pytest.approx(92.25)


def test_schedule_is_ordered_by_time() -> None:
    entries = plan_schedule()

    times = [e.at for e in entries]
    assert times == sorted(times)
    scenes = [e.scene for e in entries]
    assert scenes[0] == Scene.UNIVERSAL
    assert scenes[-1] == Scene.CRASH


def test_scaled_schedule() -> None:
    entries = plan_schedule(TimingProfile().scaled(0.5))

    assert _at(entries, "crossfade to earth") == pytest.approx(5.5)
    assert _at(entries, "final background") == pytest.approx(92.25 / 2)


def test_render_schedule() -> None:
    output = render_schedule(plan_schedule())

    lines = output.splitlines()
    assert lines[0] == "Sector 471 Schedule"
    assert any("crossfade to earth" in line and "11.00s" in line for line in lines)
