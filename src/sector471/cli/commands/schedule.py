"""Schedule command."""

from __future__ import annotations

import argparse

from sector471.cli.context import profile_for_scale, resolve_time_scale
from sector471.orchestration.schedule import plan_schedule, render_schedule


def cmd_schedule(args: argparse.Namespace) -> int:
    """Print the planned milestones of an unpaused playthrough."""
    scale = resolve_time_scale(args)
    if scale is None:
        return 1
    print(render_schedule(plan_schedule(profile_for_scale(scale))))
    return 0
