"""Terminal player for the Sector 471 flow."""

import logging
from typing import Any

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from sector471.models.scene import Scene
from sector471.models.scripts import TextProvider
from sector471.models.timings import TimingProfile
from sector471.orchestration import FlowOrchestrator, build_flow
from sector471.runtime.clock import DEFAULT_TICK_SECONDS, PauseClock
from sector471.scenes import SpaceTimeline
from sector471.tui.widgets import ScenePanel, StatusBar

logger = logging.getLogger(__name__)

REFRESH_INTERVAL = 1 / 30


class PlayerApp(App[None]):
    """Plays the flow and renders its published state as text."""

    TITLE = "Sector 471"
    SUB_TITLE = "Chapter I: Atmospheric Error"

    BINDINGS = [
        Binding("p", "toggle_pause", "Pause/Resume"),
        Binding("1", "choose('save_ship')", "Save the ship"),
        Binding("2", "choose('save_self')", "Save yourself"),
        Binding("q", "quit", "Quit"),
    ]

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(
        self,
        text_provider: TextProvider,
        profile: TimingProfile | None = None,
        *,
        tick: float = DEFAULT_TICK_SECONDS,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.clock = PauseClock(tick)
        self.flow: FlowOrchestrator = build_flow(self.clock, text_provider, profile)

    def compose(self) -> ComposeResult:
        yield Header()
        yield ScenePanel(id="scene")
        yield StatusBar(id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.flow.start()
        self.set_interval(REFRESH_INTERVAL, self._refresh_view)

    def on_unmount(self) -> None:
        self.flow.stop()

    def action_toggle_pause(self) -> None:
        if self.flow.is_paused:
            self.flow.resume()
        else:
            self.flow.pause()
        self._refresh_view()

    def action_choose(self, choice: str) -> None:
        space = self.flow.timelines.get(Scene.SPACE)
        if not isinstance(space, SpaceTimeline):
            return
        if not space.choice.select(choice):
            logger.debug("Choice %s ignored", choice)

    def _refresh_view(self) -> None:
        self.query_one(ScenePanel).show(self.flow)
        self.query_one(StatusBar).show(self.flow)
