"""Argument parser construction for Sector 471 CLI."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

CHOICE_VALUES = ["save_ship", "save_self"]


def _add_playback_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--scripts",
        type=Path,
        help="Path to Scripts.json (default: settings, then workspace, then data dir)",
    )
    parser.add_argument(
        "--time-scale",
        type=float,
        help="Multiply every timing by this factor (default: from settings, 1.0)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        description="Sector 471 - cinematic scene sequencing engine"
    )
    parser.add_argument(
        "--workdir",
        "-w",
        type=Path,
        help="Working directory for logs and scripts (default: current directory)",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Play command (terminal player, also the default)
    play_parser = subparsers.add_parser(
        "play",
        help="Play the flow in the terminal player",
    )
    _add_playback_options(play_parser)

    # Run command (headless)
    run_parser = subparsers.add_parser(
        "run",
        help="Play the flow headless, emitting JSONL events",
    )
    _add_playback_options(run_parser)
    run_parser.add_argument(
        "--choice",
        choices=CHOICE_VALUES,
        help="Select this choice when the warning appears (default: let it time out)",
    )

    # Schedule command
    schedule_parser = subparsers.add_parser(
        "schedule",
        help="Print when each milestone happens in an unpaused playthrough",
    )
    schedule_parser.add_argument(
        "--time-scale",
        type=float,
        help="Multiply every timing by this factor (default: from settings, 1.0)",
    )

    # Scripts command
    scripts_parser = subparsers.add_parser(
        "scripts",
        help="Load a Scripts.json file and print its texts",
    )
    scripts_parser.add_argument(
        "path",
        type=Path,
        help="Path to Scripts.json",
    )

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)
