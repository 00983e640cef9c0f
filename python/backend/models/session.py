"""Immutable views of a puzzle session handed to frontends."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.models.board import Board


class SessionState(StrEnum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    SOLVED = "solved"


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything a frontend needs to draw one frame of the game."""

    size: int
    board: tuple[int, ...]
    empty_index: int
    moves: int
    seconds: int
    state: SessionState

    @classmethod
    def empty(cls) -> SessionSnapshot:
        """Snapshot of a session that has no board yet."""
        return cls(
            size=0,
            board=(),
            empty_index=-1,
            moves=0,
            seconds=0,
            state=SessionState.UNINITIALIZED,
        )

    @property
    def is_solved(self) -> bool:
        return self.state is SessionState.SOLVED

    def to_board(self) -> Board | None:
        if self.state is SessionState.UNINITIALIZED:
            return None
        return Board(size=self.size, tiles=self.board, empty_index=self.empty_index)
