"""Space scene: Earth grows, warning and choice, impact, white-out."""

from __future__ import annotations

from sector471.models.scene import Scene
from sector471.models.timings import ChoiceTimings, SpaceTimings
from sector471.runtime.clock import PauseClock
from sector471.runtime.fade import Fade
from sector471.scenes.base import FinishCallback, SceneTimeline
from sector471.scenes.choice import ChoiceGate


class SpaceTimeline(SceneTimeline):
    """Space flight peril. ``on_finish`` hands over to the crash scene."""

    scene = Scene.SPACE

    def __init__(
        self,
        clock: PauseClock,
        timings: SpaceTimings | None = None,
        choice_timings: ChoiceTimings | None = None,
        *,
        on_finish: FinishCallback | None = None,
    ) -> None:
        super().__init__(clock, on_finish=on_finish)
        self.timings = timings or SpaceTimings()
        self.choice = ChoiceGate(clock, choice_timings)

        self.earth_grow = False
        self.grow = Fade(clock, 0.0)
        self.warning_name: str | None = None
        self.impact_amount = Fade(clock, 0.0)
        self.white_out = Fade(clock, 0.0)

    @property
    def warning_active(self) -> bool:
        return self.warning_name is not None

    @property
    def choice_window(self) -> float:
        return self.choice.timings.window_for(self.timings.warning_visible)

    def reset(self) -> None:
        self.earth_grow = False
        self.grow.set(0.0)
        self.warning_name = None
        self.impact_amount.set(0.0)
        self.white_out.set(0.0)

    def _stop_children(self) -> None:
        self.choice.close()

    async def _run(self) -> None:
        t = self.timings

        self.earth_grow = True
        self.grow.to(1.0, t.grow)

        await self.clock.sleep(t.warning_delay)
        self.warning_name = t.warning_name
        self.choice.open(self.choice_window)

        await self.clock.sleep(t.warning_visible)
        self.warning_name = None

        await self.clock.sleep(t.impact_delay)
        self.impact_amount.set(t.impact_start)
        self.white_out.set(0.0)
        self.impact_amount.to(1.0, t.impact_ramp)
        await self.clock.sleep(t.impact_ramp)

        self.white_out.to(1.0, t.white_out_fade)
        await self.clock.sleep(t.white_out_hold)
