"""Crash scene: white reveal, then the fade-to-black slide sequence."""

from __future__ import annotations

from sector471.models.scene import Scene
from sector471.models.timings import CrashTimings
from sector471.runtime.clock import PauseClock
from sector471.runtime.crossfade import CrossfadeSequencer
from sector471.runtime.fade import Fade
from sector471.scenes.base import FinishCallback, SceneTimeline


class CrashTimeline(SceneTimeline):
    """Final scene. ``show_final_background`` stays set once reached."""

    scene = Scene.CRASH

    def __init__(
        self,
        clock: PauseClock,
        timings: CrashTimings | None = None,
        *,
        on_finish: FinishCallback | None = None,
    ) -> None:
        super().__init__(clock, on_finish=on_finish)
        self.timings = timings or CrashTimings()
        self.crossfade = CrossfadeSequencer(clock)

        self.white_start = Fade(clock, 1.0)
        self.scene_opacity = Fade(clock, 0.0)
        self.show_final_background = False

    @property
    def current_slide(self) -> str | None:
        return self.crossfade.state.current_slide

    @property
    def next_slide(self) -> str | None:
        return self.crossfade.state.next_slide

    @property
    def next_opacity(self) -> Fade:
        return self.crossfade.next_opacity

    def reset(self) -> None:
        self.crossfade.reset()
        self.white_start.set(1.0)
        self.scene_opacity.set(0.0)
        self.show_final_background = False

    async def _run(self) -> None:
        t = self.timings

        self.white_start.to(0.0, t.white_reveal)
        self.scene_opacity.to(1.0, t.white_reveal)
        await self.clock.sleep(t.white_reveal + t.start_delay_after_reveal)

        await self.clock.sleep(t.initial_delay)
        await self.crossfade.run(
            t.slides,
            forward_duration=t.forward_crossfade,
            backward_duration=t.backward_crossfade,
            step_hold=t.step_hold,
            min_settle=t.min_settle,
        )
        self.show_final_background = True
