"""Tests for the scene state machine."""

import pytest

from sector471.models.scene import (
    INITIAL_SCENE,
    TERMINAL_SCENES,
    VALID_TRANSITIONS,
    InvalidSceneTransitionError,
    Scene,
    can_transition,
)


def test_every_scene_has_transitions() -> None:
    assert set(VALID_TRANSITIONS) == set(Scene)


def test_flow_is_strictly_linear() -> None:
    order = [Scene.UNIVERSAL, Scene.EARTH, Scene.SPACE, Scene.CRASH]
    for current, following in zip(order, order[1:]):
        assert VALID_TRANSITIONS[current] == {following}


@pytest.mark.parametrize(
    ("current", "target"),
    [
        (Scene.UNIVERSAL, Scene.SPACE),
        (Scene.EARTH, Scene.UNIVERSAL),
        (Scene.SPACE, Scene.SPACE),
        (Scene.CRASH, Scene.UNIVERSAL),
    ],
)
def test_illegal_edges(current: Scene, target: Scene) -> None:
    assert not can_transition(current, target)


def test_crash_is_terminal() -> None:
    assert INITIAL_SCENE == Scene.UNIVERSAL
    assert TERMINAL_SCENES == {Scene.CRASH}
    assert VALID_TRANSITIONS[Scene.CRASH] == set()


def test_transition_error_message() -> None:
    error = InvalidSceneTransitionError(Scene.EARTH, Scene.CRASH)

    assert error.current == Scene.EARTH
    assert error.target == Scene.CRASH
    assert "earth" in str(error)
    assert "crash" in str(error)
