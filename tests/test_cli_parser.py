from __future__ import annotations

from pathlib import Path

import pytest

from sector471.cli.parser import parse_args


def test_parse_args_defaults_to_player() -> None:
    args = parse_args([])
    assert args.command is None
    assert args.workdir is None


def test_parse_args_play_options() -> None:
    args = parse_args(["play", "--scripts", "Scripts.json", "--time-scale", "0.5"])
    assert args.command == "play"
    assert args.scripts == Path("Scripts.json")
    assert args.time_scale == pytest.approx(0.5)


def test_parse_args_run_with_choice() -> None:
    args = parse_args(["-w", "/tmp/demo", "run", "--choice", "save_self"])
    assert args.command == "run"
    assert args.workdir == Path("/tmp/demo")
    assert args.choice == "save_self"
    assert args.scripts is None
    assert args.time_scale is None


def test_parse_args_run_rejects_unknown_choice() -> None:
    with pytest.raises(SystemExit):
        _ = parse_args(["run", "--choice", "abandon_ship"])


def test_parse_args_schedule() -> None:
    args = parse_args(["schedule", "--time-scale", "2"])
    assert args.command == "schedule"
    assert args.time_scale == pytest.approx(2.0)


def test_parse_args_scripts_requires_path() -> None:
    args = parse_args(["scripts", "data/Scripts.json"])
    assert args.path == Path("data/Scripts.json")

    with pytest.raises(SystemExit):
        _ = parse_args(["scripts"])
