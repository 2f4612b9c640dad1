"""Headless flow runner: timelines -> JSONL events.

Usage:
    # Play the whole flow at a tenth of real time
    python -m sector471.runners.run_flow --time-scale 0.1

    # Pick a choice as soon as the warning appears
    python -m sector471.runners.run_flow --choice save_self

Output:
    JSONL flow events (to stdout)
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from sector471.models.scene import Scene
from sector471.models.scripts import TextProvider
from sector471.models.timings import TimingProfile
from sector471.orchestration import build_flow
from sector471.runtime.clock import DEFAULT_TICK_SECONDS, PauseClock
from sector471.scenes import Choice, CrashTimeline, SpaceTimeline

EventSink = Callable[[str, dict[str, Any]], None]


def log_event(event_type: str, data: dict[str, Any]) -> None:
    """Write an event to stdout as JSONL."""
    event = {
        "timestamp": datetime.now(UTC).isoformat(),
        "type": event_type,
        **data,
    }
    print(json.dumps(event), flush=True)


async def run_flow(
    text_provider: TextProvider,
    profile: TimingProfile | None = None,
    *,
    tick: float = DEFAULT_TICK_SECONDS,
    choice: Choice | None = None,
    emit: EventSink = log_event,
) -> int:
    """Play the flow to the crash scene's final background."""
    clock = PauseClock(tick)
    flow = build_flow(
        clock,
        text_provider,
        profile,
        on_scene_change=lambda previous, current: emit(
            "scene_changed",
            {"from": previous.value, "to": current.value, "clock": round(clock.now(), 3)},
        ),
    )
    space = flow.timelines[Scene.SPACE]
    crash = flow.timelines[Scene.CRASH]
    assert isinstance(space, SpaceTimeline)
    assert isinstance(crash, CrashTimeline)

    done = asyncio.Event()
    crash.on_finish = done.set
    space.choice.on_hide = lambda: emit(
        "choice_hidden", {"clock": round(clock.now(), 3)}
    )

    emit("flow_started", {"clock": 0.0})
    flow.start()
    warning: str | None = None
    resolved = False
    try:
        while not done.is_set():
            if space.warning_name != warning:
                warning = space.warning_name
                emit(
                    "warning_started" if warning else "warning_cleared",
                    {"warning": warning, "clock": round(clock.now(), 3)},
                )
                if warning and choice is not None:
                    space.choice.select(choice)
            if not resolved and space.choice.selected is not None:
                resolved = True
                emit(
                    "choice_resolved",
                    {
                        "choice": space.choice.selected.value,
                        "auto": space.choice.state.auto_selected,
                        "clock": round(clock.now(), 3),
                    },
                )
            await clock.sleep(tick)
    finally:
        flow.stop()

    emit("flow_completed", {"final_background": crash.show_final_background})
    return 0


def main() -> int:
    """CLI entry point for ``python -m sector471.runners.run_flow``."""
    from sector471.cli.commands.run import cmd_run

    parser = argparse.ArgumentParser(description="Play the Sector 471 flow headless")
    parser.add_argument("--scripts", type=Path, help="Path to Scripts.json")
    parser.add_argument("--time-scale", type=float)
    parser.add_argument("--choice", choices=[c.value for c in Choice])
    return cmd_run(parser.parse_args())


if __name__ == "__main__":
    sys.exit(main())
