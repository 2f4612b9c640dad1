"""Status line for the player."""

from typing import Any

from rich.text import Text
from textual.widgets import Static

from sector471.orchestration.flow import FlowOrchestrator


class StatusBar(Static):
    """Current scene, pause state and clock time."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        padding: 0 1;
        background: $panel;
    }

    StatusBar.paused {
        background: $warning;
        color: $text;
    }
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__("", **kwargs)

    def show(self, flow: FlowOrchestrator) -> None:
        self.set_class(flow.is_paused, "paused")
        text = Text()
        text.append(f"{flow.step.value.upper()}", style="bold")
        text.append(f"  t={flow.clock.now():6.1f}s")
        if flow.is_paused:
            text.append("  PAUSED", style="bold")
        self.update(text)
