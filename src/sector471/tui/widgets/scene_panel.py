"""Text rendering of the flow's published state."""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.widgets import Static

from sector471.models.scene import Scene
from sector471.orchestration.flow import FlowOrchestrator
from sector471.scenes import (
    CrashTimeline,
    EarthTimeline,
    SceneTimeline,
    SpaceTimeline,
    UniversalTimeline,
)

SCENE_TITLES: dict[Scene, str] = {
    Scene.UNIVERSAL: "UNIVERSAL",
    Scene.EARTH: "EARTH",
    Scene.SPACE: "SPACE",
    Scene.CRASH: "CRASH",
}

CHOICE_LABELS = {
    "save_ship": "[1] Save the ship",
    "save_self": "[2] Save yourself",
}


def _bar(value: float, width: int = 20) -> str:
    filled = round(max(0.0, min(1.0, value)) * width)
    return "█" * filled + "░" * (width - filled)


def _style_for(opacity: float) -> str:
    if opacity >= 0.66:
        return "bold"
    if opacity >= 0.33:
        return ""
    return "dim"


def _universal_lines(timeline: UniversalTimeline, text: Text) -> None:
    text.append(f"  intro black  {_bar(timeline.intro_black.value)}\n")
    if timeline.typed_text:
        text.append(f'  "{timeline.typed_text}"\n', style="italic")
    text.append(f"  fade to black {_bar(timeline.fade_to_black.value)}\n")


def _earth_lines(timeline: EarthTimeline, text: Text) -> None:
    box = timeline.bottom_opacity.value
    if timeline.show_top_left_text:
        text.append(f"  ┌ {timeline.typed_top_left_text}\n", style="cyan")
    if timeline.show_bottom_text and timeline.typed_bottom_text:
        text.append(f"  └ {timeline.typed_bottom_text}\n", style=_style_for(box))
    if timeline.show_third_text and timeline.typed_third_text:
        text.append(f"  └ {timeline.typed_third_text}\n", style=_style_for(box))
    text.append(f"  fade to black {_bar(timeline.fade_to_black.value)}\n")


def _space_lines(timeline: SpaceTimeline, text: Text) -> None:
    text.append(f"  earth grow   {_bar(timeline.grow.value)}\n")
    if timeline.warning_name:
        text.append(f"  !! {timeline.warning_name} !!\n", style="bold red blink")
    gate = timeline.choice
    if gate.visible:
        for choice_id, label in CHOICE_LABELS.items():
            selected = gate.selected
            if selected is None:
                style = "bold"
            elif selected.value == choice_id:
                style = "bold reverse"
            else:
                style = "dim"
            text.append(f"  {label}\n", style=style)
    text.append(f"  impact       {_bar(timeline.impact_amount.value)}\n")
    text.append(f"  white out    {_bar(timeline.white_out.value)}\n")


def _crash_lines(timeline: CrashTimeline, text: Text) -> None:
    text.append(f"  white        {_bar(timeline.white_start.value)}\n")
    if timeline.show_final_background:
        text.append("  [final background]\n", style="bold")
        return
    if timeline.current_slide:
        text.append(f"  slide: {timeline.current_slide}\n")
    if timeline.next_slide:
        text.append(
            f"  next:  {timeline.next_slide} {_bar(timeline.next_opacity.value)}\n",
            style="dim",
        )


def _timeline_lines(timeline: SceneTimeline, text: Text) -> None:
    if isinstance(timeline, UniversalTimeline):
        _universal_lines(timeline, text)
    elif isinstance(timeline, EarthTimeline):
        _earth_lines(timeline, text)
    elif isinstance(timeline, SpaceTimeline):
        _space_lines(timeline, text)
    elif isinstance(timeline, CrashTimeline):
        _crash_lines(timeline, text)


def render_flow(flow: FlowOrchestrator) -> Text:
    """Render every visible scene, back to front."""
    text = Text()
    for scene in flow.visible_scenes():
        opacity = flow.opacity_of(scene)
        marker = "▶" if scene == flow.step else " "
        text.append(
            f"{marker} {SCENE_TITLES[scene]:<10} {_bar(opacity, 10)}\n",
            style=_style_for(opacity),
        )
        timeline = flow.timelines.get(scene)
        if timeline is not None:
            _timeline_lines(timeline, text)
        text.append("\n")
    return text


class ScenePanel(Static):
    """Shows the scenes currently on screen."""

    DEFAULT_CSS = """
    ScenePanel {
        height: 1fr;
        padding: 1 2;
    }
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__("", **kwargs)

    def show(self, flow: FlowOrchestrator) -> None:
        self.update(render_flow(flow))
