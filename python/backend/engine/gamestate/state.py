"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from backend.models.board import Board
from backend.models.session import SessionSnapshot, SessionState


class GameState:
    """Holds the current board, move counter, elapsed seconds and status."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.seconds: int = 0
        self.status = SessionState.SOLVED if board.is_solved() else SessionState.ACTIVE

    # -- counters -------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def increment_seconds(self) -> None:
        self.seconds += 1

    # -- status ---------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.status is SessionState.ACTIVE

    @property
    def is_solved(self) -> bool:
        return self.status is SessionState.SOLVED

    def mark_solved(self) -> None:
        self.status = SessionState.SOLVED

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            size=self.board.size,
            board=self.board.tiles,
            empty_index=self.board.empty_index,
            moves=self.moves,
            seconds=self.seconds,
            state=self.status,
        )
