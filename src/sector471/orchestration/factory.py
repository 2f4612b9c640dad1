"""Wiring of a complete flow from a clock, a text provider and timings."""

from __future__ import annotations

from sector471.models.scene import Scene
from sector471.models.scripts import TextProvider
from sector471.models.timings import TimingProfile
from sector471.orchestration.flow import FlowOrchestrator, SceneChangeCallback
from sector471.runtime.clock import PauseClock
from sector471.scenes import (
    CrashTimeline,
    EarthTimeline,
    SceneTimeline,
    SpaceTimeline,
    UniversalTimeline,
)


def build_flow(
    clock: PauseClock,
    text_provider: TextProvider,
    profile: TimingProfile | None = None,
    *,
    on_scene_change: SceneChangeCallback | None = None,
) -> FlowOrchestrator:
    """Create the four scene timelines and an orchestrator that drives them."""
    profile = profile or TimingProfile()
    timelines: dict[Scene, SceneTimeline] = {
        Scene.UNIVERSAL: UniversalTimeline(clock, text_provider, profile.universal),
        Scene.EARTH: EarthTimeline(clock, text_provider, profile.earth),
        Scene.SPACE: SpaceTimeline(clock, profile.space, profile.choice),
        Scene.CRASH: CrashTimeline(clock, profile.crash),
    }
    return FlowOrchestrator(
        clock,
        profile.flow,
        timelines,
        on_scene_change=on_scene_change,
    )
