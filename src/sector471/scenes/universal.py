"""Intro scene: fade in from black, type the quote, fade to black."""

from __future__ import annotations

from sector471.models.scene import Scene
from sector471.models.scripts import TextProvider
from sector471.models.timings import UniversalTimings
from sector471.runtime.clock import PauseClock
from sector471.runtime.fade import Fade
from sector471.runtime.typewriter import TypewriterSequencer
from sector471.scenes.base import FinishCallback, SceneTimeline


class UniversalTimeline(SceneTimeline):
    """Intro quote over the looping background video."""

    scene = Scene.UNIVERSAL

    def __init__(
        self,
        clock: PauseClock,
        text_provider: TextProvider,
        timings: UniversalTimings | None = None,
        *,
        on_finish: FinishCallback | None = None,
    ) -> None:
        super().__init__(clock, on_finish=on_finish)
        self.text_provider = text_provider
        self.timings = timings or UniversalTimings()
        self.typewriter = TypewriterSequencer(clock, self.timings.char_delay)

        self.intro_black = Fade(clock, 1.0)
        self.fade_to_black = Fade(clock, 0.0)
        self.typed_text = ""
        self.typing_started = False

    def reset(self) -> None:
        self.intro_black.set(1.0)
        self.fade_to_black.set(0.0)
        self.typed_text = ""
        self.typing_started = False

    def _stop_children(self) -> None:
        self.typewriter.stop()

    def _set_typed(self, text: str) -> None:
        self.typed_text = text

    async def _run(self) -> None:
        t = self.timings
        quote = self.text_provider.get_script(Scene.UNIVERSAL).quote_text

        self.intro_black.to(0.0, t.intro_fade_out)
        await self.clock.sleep(t.intro_fade_out + t.type_start_delay)

        self.typed_text = ""
        self.typing_started = True
        await self.typewriter.reveal(quote, self._set_typed)

        await self.clock.sleep(t.total_show)

        self.fade_to_black.to(1.0, t.fade_to_black)
        await self.clock.sleep(t.black_hold)
