"""Scene state machine for the story flow.

The flow moves strictly forward through four scenes and stops at CRASH.
"""

from enum import Enum


class Scene(Enum):
    """Top-level narrative scenes, in play order."""

    UNIVERSAL = "universal"
    EARTH = "earth"
    SPACE = "space"
    CRASH = "crash"


class InvalidSceneTransitionError(Exception):
    """Raised when a scene change skips or reverses the flow."""

    def __init__(self, current: Scene, target: Scene) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Invalid transition from {current.value} to {target.value}")


VALID_TRANSITIONS: dict[Scene, set[Scene]] = {
    Scene.UNIVERSAL: {Scene.EARTH},
    Scene.EARTH: {Scene.SPACE},
    Scene.SPACE: {Scene.CRASH},
    # Terminal
    Scene.CRASH: set(),
}

INITIAL_SCENE = Scene.UNIVERSAL
TERMINAL_SCENES: set[Scene] = {Scene.CRASH}

# Renderers keep drawing a fading scene until its opacity drops below this.
VISIBILITY_EPSILON = 0.001


def can_transition(current: Scene, target: Scene) -> bool:
    """Check whether ``current`` -> ``target`` is a legal edge."""
    return target in VALID_TRANSITIONS[current]
