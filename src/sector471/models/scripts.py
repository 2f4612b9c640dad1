"""Script text models and the text-provider interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from sector471.models.scene import Scene

FALLBACK_TEXT = "[FALLBACK] Scripts.json not loaded"


@dataclass(frozen=True)
class SceneScript:
    """Texts a single scene may show. Unused fields stay empty."""

    quote_text: str = ""
    dialogue_text: str = ""
    top_left_text: str = ""
    third_text: str = ""


@dataclass(frozen=True)
class Scripts:
    """All scripted text, as stored in Scripts.json."""

    universal: SceneScript = field(default_factory=SceneScript)
    earth: SceneScript = field(default_factory=SceneScript)

    @classmethod
    def fallback(cls) -> Scripts:
        """Placeholder scripts shown when the real file cannot be loaded."""
        return cls(
            universal=SceneScript(quote_text=FALLBACK_TEXT),
            earth=SceneScript(dialogue_text=FALLBACK_TEXT),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Scripts:
        """Build from the Scripts.json layout.

        Raises KeyError or TypeError when required keys are missing.
        """
        universal = data["universal"]
        earth = data["earth"]
        return cls(
            universal=SceneScript(quote_text=str(universal["quoteText"])),
            earth=SceneScript(
                dialogue_text=str(earth["dialogueText"]),
                top_left_text=str(earth["topLeftText"]),
                third_text=str(earth["thirdText"]),
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "universal": {"quoteText": self.universal.quote_text},
            "earth": {
                "dialogueText": self.earth.dialogue_text,
                "topLeftText": self.earth.top_left_text,
                "thirdText": self.earth.third_text,
            },
        }

    def for_scene(self, scene: Scene) -> SceneScript:
        if scene == Scene.UNIVERSAL:
            return self.universal
        if scene == Scene.EARTH:
            return self.earth
        return SceneScript()


class TextProvider(Protocol):
    """Source of scripted text, injected into scene timelines."""

    def get_script(self, scene: Scene) -> SceneScript: ...


class StaticTextProvider:
    """Text provider backed by an in-memory Scripts value."""

    def __init__(self, scripts: Scripts | None = None) -> None:
        self.scripts = scripts or Scripts.fallback()

    def get_script(self, scene: Scene) -> SceneScript:
        return self.scripts.for_scene(scene)
