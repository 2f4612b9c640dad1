"""Data models for Sector 471."""

from sector471.models.scene import (
    INITIAL_SCENE,
    TERMINAL_SCENES,
    VALID_TRANSITIONS,
    VISIBILITY_EPSILON,
    InvalidSceneTransitionError,
    Scene,
    can_transition,
)
from sector471.models.script_store import SCRIPTS_FILENAME, ScriptStore
from sector471.models.scripts import (
    FALLBACK_TEXT,
    SceneScript,
    Scripts,
    StaticTextProvider,
    TextProvider,
)
from sector471.models.timings import (
    ChoiceTimings,
    CrashTimings,
    EarthTimings,
    FlowTimings,
    SpaceTimings,
    TimingProfile,
    UniversalTimings,
)

__all__ = [
    "FALLBACK_TEXT",
    "INITIAL_SCENE",
    "SCRIPTS_FILENAME",
    "TERMINAL_SCENES",
    "VALID_TRANSITIONS",
    "VISIBILITY_EPSILON",
    "ChoiceTimings",
    "CrashTimings",
    "EarthTimings",
    "FlowTimings",
    "InvalidSceneTransitionError",
    "Scene",
    "SceneScript",
    "ScriptStore",
    "Scripts",
    "SpaceTimings",
    "StaticTextProvider",
    "TextProvider",
    "TimingProfile",
    "UniversalTimings",
    "can_transition",
]
