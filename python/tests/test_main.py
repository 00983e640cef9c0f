"""CLI option handling tests."""

from __future__ import annotations

import logging

import pytest
import typer
from rich.logging import RichHandler
from typer.testing import CliRunner

import main
from backend import config
from frontend.cli.rich import app as rich_app

runner = CliRunner()


@pytest.fixture
def launched(monkeypatch: pytest.MonkeyPatch) -> list[dict]:
    """Capture frontend launches instead of opening the terminal UI."""
    calls: list[dict] = []
    monkeypatch.setattr(rich_app, "run", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(main, "_configure_logging", lambda level, log_file: None)
    return calls


def test_defaults(launched: list[dict]) -> None:
    result = runner.invoke(main.app, [])
    assert result.exit_code == 0, result.output
    assert launched == [{"size": 3, "seed": None, "play": False}]


def test_size_seed_and_play(launched: list[dict]) -> None:
    result = runner.invoke(main.app, ["-s", "5", "--seed", "42", "--play"])
    assert result.exit_code == 0, result.output
    assert launched == [{"size": 5, "seed": 42, "play": True}]


def test_size_from_environment(launched: list[dict]) -> None:
    result = runner.invoke(main.app, [], env={"PICTURE_PUZZLE_SIZE": "4"})
    assert result.exit_code == 0, result.output
    assert launched[0]["size"] == 4


@pytest.mark.parametrize("size", ["1", "9"])
def test_size_out_of_range(launched: list[dict], size: str) -> None:
    result = runner.invoke(main.app, ["--size", size])
    assert result.exit_code != 0
    assert launched == []


def test_unknown_log_level() -> None:
    with pytest.raises(typer.BadParameter):
        main._configure_logging("LOUD", None)


def test_logging_handlers(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    main._configure_logging("debug", tmp_path / "puzzle.log")

    console_handler, file_handler = captured["handlers"]
    assert captured["level"] == logging.DEBUG
    assert isinstance(console_handler, RichHandler)
    assert console_handler.level == logging.WARNING
    assert console_handler.console.stderr
    assert isinstance(file_handler, logging.FileHandler)
    file_handler.close()


def test_console_only_without_log_file(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    main._configure_logging("ERROR", None)

    (console_handler,) = captured["handlers"]
    assert console_handler.level == logging.ERROR
    assert console_handler.console.stderr


def test_size_limits_come_from_config(launched: list[dict]) -> None:
    for size in (config.MIN_SIZE, config.MAX_SIZE):
        result = runner.invoke(main.app, ["--size", str(size)])
        assert result.exit_code == 0, result.output
    assert [call["size"] for call in launched] == [config.MIN_SIZE, config.MAX_SIZE]

    result = runner.invoke(main.app, ["--size", str(config.MAX_SIZE + 1)])
    assert result.exit_code != 0
    assert rich_app.MIN_SIZE == config.MIN_SIZE
    assert rich_app.MAX_SIZE == config.MAX_SIZE
