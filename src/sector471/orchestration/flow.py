"""Top-level scene flow: Universal -> Earth -> Space -> Crash."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping

from sector471.models.scene import (
    INITIAL_SCENE,
    VISIBILITY_EPSILON,
    InvalidSceneTransitionError,
    Scene,
    can_transition,
)
from sector471.models.timings import FlowTimings
from sector471.runtime.clock import PauseClock
from sector471.runtime.fade import Fade
from sector471.scenes.base import SceneTimeline

logger = logging.getLogger(__name__)

SceneChangeCallback = Callable[[Scene, Scene], None]
"""Called with (previous, current) whenever the active scene changes."""


class FlowOrchestrator:
    """Owns the active scene and the cross-scene opacity blend.

    ``start()`` runs the timed part of the flow (Universal to Earth to Space)
    as one task. Crash is entered only through ``start_crash_transition()``,
    which the Space timeline triggers when it finishes. Pausing forwards to
    the shared PauseClock and freezes every in-flight wait; it never changes
    ``step`` or the opacity targets.
    """

    def __init__(
        self,
        clock: PauseClock,
        timings: FlowTimings | None = None,
        timelines: Mapping[Scene, SceneTimeline] | None = None,
        *,
        on_scene_change: SceneChangeCallback | None = None,
    ) -> None:
        self.clock = clock
        self.timings = timings or FlowTimings()
        self.timelines: dict[Scene, SceneTimeline] = dict(timelines or {})
        self.on_scene_change = on_scene_change

        self.step = INITIAL_SCENE
        self.opacity: dict[Scene, Fade] = {scene: Fade(clock) for scene in Scene}
        self.is_paused = False

        self._task: asyncio.Task[None] | None = None
        self._retiring: set[asyncio.Task[None]] = set()

        space = self.timelines.get(Scene.SPACE)
        if space is not None and space.on_finish is None:
            space.on_finish = self.start_crash_transition

        self._reset_to_start()

    @property
    def running(self) -> bool:
        return self._task is not None

    def opacity_of(self, scene: Scene) -> float:
        return self.opacity[scene].value

    def visible_scenes(self) -> list[Scene]:
        """Scenes a renderer should draw, in back-to-front order."""
        return [
            scene
            for scene in Scene
            if scene == self.step or self.opacity[scene].value > VISIBILITY_EPSILON
        ]

    def start(self) -> bool:
        """Start the flow from the intro. Returns False if already started."""
        if self._task is not None:
            return False
        self._reset_to_start()
        self._activate(self.step)
        self._task = asyncio.create_task(self._run_sequence(), name="flow-sequence")
        logger.info("Flow started")
        return True

    def stop(self) -> None:
        """Cancel the flow and every scene timeline. Safe to repeat."""
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()
        for retiring in list(self._retiring):
            retiring.cancel()
        self._retiring.clear()
        for timeline in self.timelines.values():
            timeline.stop()
        logger.info("Flow stopped at %s", self.step.value)

    def pause(self) -> None:
        self.is_paused = True
        self.clock.pause()

    def resume(self) -> None:
        self.is_paused = False
        self.clock.resume()

    def start_crash_transition(self) -> bool:
        """Switch Space to Crash. No-op outside Space, including when in Crash."""
        if self.step == Scene.CRASH:
            logger.debug("Crash transition ignored: already in crash")
            return False
        if self.step != Scene.SPACE:
            logger.warning("Crash transition ignored: flow is in %s", self.step.value)
            return False
        self._crossfade_to(Scene.CRASH)
        return True

    async def wait(self) -> None:
        """Wait for the timed part of the flow to finish or be cancelled."""
        task = self._task
        if task is not None:
            await asyncio.wait({task})

    async def _run_sequence(self) -> None:
        t = self.timings
        await self.clock.sleep(t.universal_to_earth)
        self._crossfade_to(Scene.EARTH)
        await self.clock.sleep(t.earth_to_space)
        self._crossfade_to(Scene.SPACE)

    def _reset_to_start(self) -> None:
        self.step = INITIAL_SCENE
        for scene, channel in self.opacity.items():
            channel.set(1.0 if scene == INITIAL_SCENE else 0.0)

    def _crossfade_to(self, target: Scene) -> None:
        previous = self.step
        if not can_transition(previous, target):
            raise InvalidSceneTransitionError(previous, target)

        fade = self.timings.fade_duration
        self.step = target
        self.opacity[target].set(0.0)
        self.opacity[previous].to(0.0, fade)
        self.opacity[target].to(1.0, fade)
        logger.info("Scene %s -> %s", previous.value, target.value)

        self._activate(target)
        self._retire(previous, after=fade)
        if self.on_scene_change is not None:
            self.on_scene_change(previous, target)

    def _activate(self, scene: Scene) -> None:
        timeline = self.timelines.get(scene)
        if timeline is not None:
            timeline.start()

    def _retire(self, scene: Scene, *, after: float) -> None:
        # The outgoing scene keeps rendering until its fade-out completes.
        timeline = self.timelines.get(scene)
        if timeline is None:
            return

        async def _stop_later() -> None:
            await self.clock.sleep(after)
            timeline.stop()

        task = asyncio.create_task(_stop_later(), name=f"retire-{scene.value}")
        self._retiring.add(task)
        task.add_done_callback(self._retiring.discard)
