"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.errors import GeneratorExhaustedError
from backend.models.board import Board

logger = logging.getLogger(__name__)

# About half of all permutations are solvable, so this is never reached
# for a valid size unless the random source is broken.
MAX_SHUFFLE_ATTEMPTS = 10_000


class GameGenerator:
    """Creates solvable puzzles by shuffling and rejecting bad permutations."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (identity order, empty slot last)."""
        return Board.solved(size)

    @staticmethod
    def shuffle(tiles: list[int], rng: random.Random) -> list[int]:
        """Return a Fisher-Yates shuffled copy of *tiles*."""
        shuffled = tiles[:]
        for i in range(len(shuffled) - 1, 0, -1):
            j = rng.randint(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled

    @staticmethod
    def count_inversions(tiles: list[int] | tuple[int, ...], empty: int) -> int:
        """Count out-of-order pairs, ignoring the *empty* identifier."""
        flat = [t for t in tiles if t != empty]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        return inversions

    @staticmethod
    def is_solvable(size: int, tiles: list[int] | tuple[int, ...]) -> bool:
        """Return True if *tiles* can reach the identity order by slides."""
        empty = size * size - 1
        inversions = GameGenerator.count_inversions(tiles, empty)
        if size % 2 == 1:
            return inversions % 2 == 0
        empty_row_from_bottom = size - tiles.index(empty) // size
        if empty_row_from_bottom % 2 == 0:
            return inversions % 2 == 1
        return inversions % 2 == 0

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board of the given size that is not solved."""
        if size < 2:
            raise ValueError(f"Grid size must be at least 2, got {size}.")
        rng = rng or random.Random()
        identity = list(range(size * size))

        for attempt in range(1, MAX_SHUFFLE_ATTEMPTS + 1):
            tiles = GameGenerator.shuffle(identity, rng)
            if tiles == identity:
                logger.debug("Shuffle %d came out solved; retrying", attempt)
                continue
            if not GameGenerator.is_solvable(size, tiles):
                logger.debug("Shuffle %d is unsolvable; retrying", attempt)
                continue
            logger.debug("Accepted %dx%d shuffle after %d attempt(s)", size, size, attempt)
            return Board.from_flat(size, tiles)

        raise GeneratorExhaustedError(size, MAX_SHUFFLE_ATTEMPTS)
