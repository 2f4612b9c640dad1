"""Per-scene timelines and the Space choice gate."""

from sector471.scenes.base import FinishCallback, SceneTimeline, TimelineState
from sector471.scenes.choice import Choice, ChoiceGate, ChoiceState
from sector471.scenes.crash import CrashTimeline
from sector471.scenes.earth import EarthTimeline
from sector471.scenes.space import SpaceTimeline
from sector471.scenes.universal import UniversalTimeline

__all__ = [
    "Choice",
    "ChoiceGate",
    "ChoiceState",
    "CrashTimeline",
    "EarthTimeline",
    "FinishCallback",
    "SceneTimeline",
    "SpaceTimeline",
    "TimelineState",
    "UniversalTimeline",
]
