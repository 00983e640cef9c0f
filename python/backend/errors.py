"""Exceptions raised by the puzzle engine.

Gameplay itself never raises: a bad move is simply not applied.  These
exist for broken caller contracts and internal invariant faults.
"""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all puzzle engine errors."""


class GeneratorExhaustedError(PuzzleError):
    """The shuffle loop gave up without finding an acceptable board."""

    def __init__(self, size: int, attempts: int) -> None:
        super().__init__(
            f"No solvable, unsolved {size}×{size} board after {attempts} shuffles."
        )
        self.size = size
        self.attempts = attempts
