from __future__ import annotations

import asyncio

import pytest

from sector471.models.scene import Scene
from sector471.models.scripts import StaticTextProvider
from sector471.models.timings import ChoiceTimings, SpaceTimings, TimingProfile
from sector471.orchestration import build_flow
from sector471.runtime.clock import PauseClock
from sector471.scenes import Choice, SpaceTimeline
from sector471.tui.app import PlayerApp
from sector471.tui.widgets.scene_panel import render_flow


@pytest.mark.anyio
async def test_render_flow_shows_active_scene(
    clock: PauseClock, text_provider: StaticTextProvider
) -> None:
    flow = build_flow(clock, text_provider)

    plain = render_flow(flow).plain

    assert "UNIVERSAL" in plain
    assert "EARTH" not in plain
    assert "▶" in plain


@pytest.mark.anyio
async def test_render_flow_shows_choice_labels(
    clock: PauseClock, text_provider: StaticTextProvider
) -> None:
    flow = build_flow(clock, text_provider)
    space = flow.timelines[Scene.SPACE]
    assert isinstance(space, SpaceTimeline)
    flow.step = Scene.SPACE
    space.warning_name = "FullWarning"
    space.choice.open(1.0)

    plain = render_flow(flow).plain

    assert "FullWarning" in plain
    assert "[1] Save the ship" in plain
    assert "[2] Save yourself" in plain
    space.choice.close()


@pytest.mark.anyio
async def test_player_actions_drive_flow(text_provider: StaticTextProvider) -> None:
    profile = TimingProfile(
        space=SpaceTimings(warning_delay=0.0, warning_visible=1.0),
        choice=ChoiceTimings(window_margin=0.0),
    )
    app = PlayerApp(text_provider, profile, tick=0.002)
    refreshed: list[bool] = []
    app._refresh_view = lambda: refreshed.append(True)  # type: ignore[method-assign]

    app.action_toggle_pause()
    assert app.flow.is_paused
    app.action_toggle_pause()
    assert not app.flow.is_paused
    assert refreshed == [True, True]

    space = app.flow.timelines[Scene.SPACE]
    assert isinstance(space, SpaceTimeline)
    app.action_choose("save_self")
    assert space.choice.selected is None

    space.start()
    await asyncio.sleep(0.01)
    app.action_choose("save_self")

    assert space.choice.selected == Choice.SAVE_SELF
    space.stop()
