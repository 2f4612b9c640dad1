from __future__ import annotations

import copy
from collections.abc import Iterator

import pytest

from sector471.config.settings import settings
from sector471.models.scripts import SceneScript, Scripts, StaticTextProvider
from sector471.runtime.clock import PauseClock

TEST_TICK = 0.002


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Prevent tests from persisting settings to disk."""
    original_data = copy.deepcopy(settings._data)

    def _noop_save() -> None:
        return None

    monkeypatch.setattr(settings, "_save", _noop_save)
    try:
        yield
    finally:
        settings._data = original_data


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def clock() -> PauseClock:
    return PauseClock(TEST_TICK)


@pytest.fixture
def scripts() -> Scripts:
    return Scripts(
        universal=SceneScript(quote_text="Stars fall."),
        earth=SceneScript(
            dialogue_text="Hello",
            top_left_text="Log 1",
            third_text="Bye",
        ),
    )


@pytest.fixture
def text_provider(scripts: Scripts) -> StaticTextProvider:
    return StaticTextProvider(scripts)
