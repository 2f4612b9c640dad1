"""Earth scene dialogue timeline.

Three text phases share one typewriter slot, so starting a phase cuts off
any text still typing from the phase before it:

1. bottom dialogue typed while its box fades in, hold, fade out
2. top-left text typed to completion, hold
3. third text typed while the shared box fades in, hold, fade out

The scene then fades a full-screen black overlay in and holds it.
"""

from __future__ import annotations

from sector471.models.scene import Scene
from sector471.models.scripts import TextProvider
from sector471.models.timings import EarthTimings
from sector471.runtime.clock import PauseClock
from sector471.runtime.fade import Fade
from sector471.runtime.typewriter import TypewriterSequencer
from sector471.scenes.base import FinishCallback, SceneTimeline


class EarthTimeline(SceneTimeline):
    """Dialogue sequence played over the Earth backdrop."""

    scene = Scene.EARTH

    def __init__(
        self,
        clock: PauseClock,
        text_provider: TextProvider,
        timings: EarthTimings | None = None,
        *,
        on_finish: FinishCallback | None = None,
    ) -> None:
        super().__init__(clock, on_finish=on_finish)
        self.text_provider = text_provider
        self.timings = timings or EarthTimings()
        self.typewriter = TypewriterSequencer(clock, self.timings.char_delay)

        self.typed_bottom_text = ""
        self.typed_top_left_text = ""
        self.typed_third_text = ""
        # Drives both the first and the third text box.
        self.bottom_opacity = Fade(clock, 0.0)
        self.show_bottom_text = True
        self.show_top_left_text = False
        self.show_third_text = False
        self.fade_to_black = Fade(clock, 0.0)

    @property
    def visibility_switch_duration(self) -> float:
        """How long renderers should take to swap the visible text block."""
        return self.timings.visibility_switch

    def reset(self) -> None:
        self.typed_bottom_text = ""
        self.typed_top_left_text = ""
        self.typed_third_text = ""
        self.bottom_opacity.set(0.0)
        self.show_bottom_text = True
        self.show_top_left_text = False
        self.show_third_text = False
        self.fade_to_black.set(0.0)

    def _stop_children(self) -> None:
        self.typewriter.stop()

    def _set_bottom(self, text: str) -> None:
        self.typed_bottom_text = text

    def _set_top_left(self, text: str) -> None:
        self.typed_top_left_text = text

    def _set_third(self, text: str) -> None:
        self.typed_third_text = text

    async def _run(self) -> None:
        t = self.timings
        script = self.text_provider.get_script(Scene.EARTH)

        # Phase 1: bottom dialogue
        self.show_bottom_text = True
        self.show_top_left_text = False
        self.show_third_text = False
        self.typewriter.reveal(script.dialogue_text, self._set_bottom)
        self.bottom_opacity.set(0.0)
        self.bottom_opacity.to(1.0, t.fade)
        await self.clock.sleep(t.first_hold)
        self.bottom_opacity.to(0.0, t.fade)
        await self.clock.sleep(t.fade)

        # Phase 2: top-left text
        self.show_bottom_text = False
        self.show_top_left_text = True
        self.typed_top_left_text = ""
        await self.typewriter.reveal(script.top_left_text, self._set_top_left)
        await self.clock.sleep(t.top_left_hold)

        # Phase 3: third text
        self.show_top_left_text = False
        self.show_third_text = True
        self.typed_third_text = ""
        self.typewriter.reveal(script.third_text, self._set_third)
        self.bottom_opacity.set(0.0)
        self.bottom_opacity.to(1.0, t.fade)
        await self.clock.sleep(t.third_hold)
        self.bottom_opacity.to(0.0, t.fade)
        await self.clock.sleep(t.fade)

        self.fade_to_black.to(1.0, t.black_fade)
        await self.clock.sleep(t.black_hold)
