"""Loading of Scripts.json with graceful fallback."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from sector471.models.scene import Scene
from sector471.models.scripts import SceneScript, Scripts

logger = logging.getLogger(__name__)

SCRIPTS_FILENAME = "Scripts.json"


class ScriptStore:
    """Text provider that reads scripts from a JSON file.

    A missing or malformed file never raises: the store serves
    ``Scripts.fallback()`` and records what went wrong in ``error_message``.
    """

    def __init__(self, path: Path | None) -> None:
        self.path = path
        self.scripts = Scripts.fallback()
        self.error_message: str | None = None
        self.reload()

    @property
    def loaded(self) -> bool:
        """True when the scripts came from the file rather than the fallback."""
        return self.error_message is None

    def reload(self) -> None:
        """Re-read the scripts file."""
        if self.path is None or not self.path.exists():
            self._fall_back(f"{SCRIPTS_FILENAME} not found at {self.path}")
            return

        try:
            # utf-8-sig strips a leading BOM if present
            text = self.path.read_bytes().decode("utf-8-sig")
            scripts = Scripts.from_dict(json.loads(text))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            self._fall_back(f"Failed to read {self.path}: {e}")
            return
        except (KeyError, TypeError) as e:
            self._fall_back(f"Unexpected layout in {self.path}: {e}")
            return

        self.scripts = scripts
        self.error_message = None
        logger.info("Loaded scripts from %s", self.path)

    def get_script(self, scene: Scene) -> SceneScript:
        return self.scripts.for_scene(scene)

    def _fall_back(self, message: str) -> None:
        logger.warning(message)
        self.error_message = message
        self.scripts = Scripts.fallback()
