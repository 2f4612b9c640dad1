"""Tests for script models and Scripts.json loading."""

from __future__ import annotations

import json
from pathlib import Path

from sector471.models.scene import Scene
from sector471.models.script_store import ScriptStore
from sector471.models.scripts import (
    FALLBACK_TEXT,
    SceneScript,
    Scripts,
    StaticTextProvider,
)

SAMPLE = {
    "universal": {"quoteText": "In the beginning"},
    "earth": {
        "dialogueText": "Captain?",
        "topLeftText": "Day 471",
        "thirdText": "Goodbye",
    },
}


def test_from_dict_maps_camel_case_keys() -> None:
    scripts = Scripts.from_dict(SAMPLE)

    assert scripts.universal.quote_text == "In the beginning"
    assert scripts.earth.dialogue_text == "Captain?"
    assert scripts.earth.top_left_text == "Day 471"
    assert scripts.earth.third_text == "Goodbye"
    assert scripts.to_dict() == SAMPLE


def test_for_scene_returns_empty_script_for_textless_scenes() -> None:
    scripts = Scripts.from_dict(SAMPLE)

    assert scripts.for_scene(Scene.SPACE) == SceneScript()
    assert scripts.for_scene(Scene.CRASH) == SceneScript()


def test_static_provider_defaults_to_fallback() -> None:
    provider = StaticTextProvider()

    assert provider.get_script(Scene.UNIVERSAL).quote_text == FALLBACK_TEXT
    assert provider.get_script(Scene.EARTH).dialogue_text == FALLBACK_TEXT


def test_store_loads_file(tmp_path: Path) -> None:
    path = tmp_path / "Scripts.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")

    store = ScriptStore(path)

    assert store.loaded
    assert store.error_message is None
    assert store.get_script(Scene.EARTH).top_left_text == "Day 471"


def test_store_strips_byte_order_mark(tmp_path: Path) -> None:
    path = tmp_path / "Scripts.json"
    path.write_bytes(b"\xef\xbb\xbf" + json.dumps(SAMPLE).encode("utf-8"))

    store = ScriptStore(path)

    assert store.loaded
    assert store.get_script(Scene.UNIVERSAL).quote_text == "In the beginning"


def test_store_falls_back_when_missing(tmp_path: Path) -> None:
    store = ScriptStore(tmp_path / "missing.json")

    assert not store.loaded
    assert store.error_message is not None
    assert "not found" in store.error_message
    assert store.get_script(Scene.UNIVERSAL).quote_text == FALLBACK_TEXT


def test_store_falls_back_without_path() -> None:
    store = ScriptStore(None)

    assert not store.loaded
    assert store.get_script(Scene.EARTH).dialogue_text == FALLBACK_TEXT


def test_store_falls_back_on_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "Scripts.json"
    path.write_text("{not json", encoding="utf-8")

    store = ScriptStore(path)

    assert not store.loaded
    assert store.get_script(Scene.UNIVERSAL).quote_text == FALLBACK_TEXT


def test_store_falls_back_on_wrong_layout(tmp_path: Path) -> None:
    path = tmp_path / "Scripts.json"
    path.write_text(json.dumps({"universal": {}}), encoding="utf-8")

    store = ScriptStore(path)

    assert not store.loaded
    assert store.error_message is not None
    assert "Unexpected layout" in store.error_message


def test_reload_picks_up_fixed_file(tmp_path: Path) -> None:
    path = tmp_path / "Scripts.json"
    store = ScriptStore(path)
    assert not store.loaded

    path.write_text(json.dumps(SAMPLE), encoding="utf-8")
    store.reload()

    assert store.loaded
    assert store.get_script(Scene.EARTH).third_text == "Goodbye"
