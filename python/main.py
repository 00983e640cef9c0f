#!/usr/bin/env python3
"""Picture Slide Puzzle.

Usage::

    python main.py                  # menu (3×3 preselected)
    python main.py -s 4 --play      # straight into a 4×4 game
    python main.py --seed 7         # reproducible shuffles
    python main.py --log-file puzzle.log --log-level DEBUG
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import DEFAULT_SIZE, MAX_SIZE, MIN_SIZE  # noqa: E402

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: str, log_file: Optional[Path]) -> None:
    """Send warnings to stderr via Rich, and everything at *level* to *log_file*."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level {level!r}.", param_hint="--log-level")

    handlers: list[logging.Handler] = [
        RichHandler(console=Console(stderr=True), level=max(numeric, logging.WARNING))
    ]
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=numeric, format="%(message)s", handlers=handlers, force=True)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        envvar="PICTURE_PUZZLE_SIZE",
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="PICTURE_PUZZLE_SEED",
        help="Seed for reproducible shuffles.",
    ),
    play: bool = typer.Option(
        False, "--play/--menu",
        help="Start a game immediately instead of showing the menu.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        help="Logging threshold (DEBUG, INFO, WARNING, ...).",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        dir_okay=False, writable=True,
        help="Also write log records to this file.",
    ),
) -> None:
    """Picture Slide Puzzle."""
    _configure_logging(log_level, log_file)

    from frontend.cli.rich.app import run

    run(size=size, seed=seed, play=play)


if __name__ == "__main__":
    app()
