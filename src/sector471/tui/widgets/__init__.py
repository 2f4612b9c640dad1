"""Widgets for the Sector 471 player."""

from sector471.tui.widgets.scene_panel import ScenePanel, render_flow
from sector471.tui.widgets.status import StatusBar

__all__ = ["ScenePanel", "StatusBar", "render_flow"]
