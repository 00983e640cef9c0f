"""Core gameplay logic — processes moves, ticks and checks the win condition."""

from __future__ import annotations

import logging
import random

from backend.engine.gameclock import TickTimer
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState
from backend.models.board import Board, Direction
from backend.models.session import SessionSnapshot

logger = logging.getLogger(__name__)

# Offset from the empty slot to the tile that slides in each direction.
# UP   → tile below the gap moves up
# DOWN → tile above the gap moves down
# LEFT → tile right of the gap moves left
# RIGHT→ tile left of the gap moves right
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class PuzzleSession:
    """Orchestrates one play-through, from shuffle to solved.

    Every public operation returns a fresh :class:`SessionSnapshot`.  Input
    that does not make sense for the current state (a move before
    :meth:`create`, a non-adjacent tile, anything after the puzzle is
    solved) is ignored rather than raised.
    """

    def __init__(
        self,
        timer: TickTimer | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.timer = timer if timer is not None else TickTimer()
        self._rng = rng
        self.state: GameState | None = None

    @classmethod
    def from_board(cls, board: Board, timer: TickTimer | None = None) -> PuzzleSession:
        """Create a session from an existing board (e.g. a scripted scenario)."""
        session = cls(timer=timer)
        session._begin(GameState(board))
        return session

    # -- lifecycle ------------------------------------------------------------

    def create(self, size: int) -> SessionSnapshot:
        """Start a new game of *size*×*size*, replacing any game in progress."""
        board = GameGenerator.generate(size, self._rng)
        self._begin(GameState(board))
        logger.info("Started %dx%d session", size, size)
        return self.snapshot()

    def _begin(self, state: GameState) -> None:
        self.timer.cancel()
        self.state = state
        if state.is_active:
            self.timer.start()

    # -- movement -------------------------------------------------------------

    def apply_move(self, position: int) -> SessionSnapshot:
        """Slide the tile at flat *position* into the adjacent empty slot."""
        state = self.state
        if state is None or not state.is_active:
            logger.debug("Ignoring move to %r: no active game", position)
            return self.snapshot()
        if not isinstance(position, int) or not state.board.is_adjacent_to_empty(position):
            logger.debug("Rejected move to %r: not next to the empty slot", position)
            return self.snapshot()

        state.board = state.board.slide(position)
        state.increment_moves()

        if state.board.is_solved():
            state.mark_solved()
            self.timer.cancel()
            logger.info(
                "Solved %dx%d in %d moves, %d seconds",
                state.board.size, state.board.size, state.moves, state.seconds,
            )
        return self.snapshot()

    def move(self, direction: Direction) -> SessionSnapshot:
        """Slide a tile in *direction* into the adjacent empty slot.

        E.g. ``Direction.UP`` moves the tile **below** the gap upward.
        At the border there is no such tile and nothing happens.
        """
        state = self.state
        if state is None:
            return self.snapshot()
        board = state.board
        er, ec = board.coords(board.empty_index)
        dr, dc = _OFFSETS[direction]
        tr, tc = er + dr, ec + dc
        if not (0 <= tr < board.size and 0 <= tc < board.size):
            return self.snapshot()
        return self.apply_move(tr * board.size + tc)

    def movable_positions(self) -> tuple[int, ...]:
        """Return the positions a move may currently target."""
        state = self.state
        if state is None or not state.is_active:
            return ()
        board = state.board
        return tuple(
            p for p in range(board.size * board.size) if board.is_adjacent_to_empty(p)
        )

    # -- time -----------------------------------------------------------------

    def tick(self) -> SessionSnapshot:
        """Record one elapsed second; frozen unless the game is active."""
        state = self.state
        if state is not None and state.is_active:
            state.increment_seconds()
        return self.snapshot()

    def sync_clock(self) -> SessionSnapshot:
        """Apply every tick the timer reports as due."""
        for _ in range(self.timer.due()):
            self.tick()
        return self.snapshot()

    # -- queries --------------------------------------------------------------

    def snapshot(self) -> SessionSnapshot:
        if self.state is None:
            return SessionSnapshot.empty()
        return self.state.snapshot()

    @property
    def is_won(self) -> bool:
        return self.state is not None and self.state.is_solved
