"""Shared fixtures for the puzzle test suite."""

from __future__ import annotations

import pytest

from backend.engine.gameclock import TickTimer
from backend.engine.gameplay import PuzzleSession
from backend.models.board import Board


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def timer(clock: FakeClock) -> TickTimer:
    return TickTimer(clock=clock)


@pytest.fixture
def almost_solved(timer: TickTimer) -> PuzzleSession:
    """3×3 session one slide from solved: empty slot at 7, tile 7 at 8."""
    board = Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 8, 7])
    return PuzzleSession.from_board(board, timer=timer)
