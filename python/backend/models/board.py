"""Board model for the picture slide puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Board:
    """An N×N arrangement of tile identifiers, stored flat in row-major order.

    Identifiers run from ``0`` to ``size * size - 1``; the highest one is the
    empty slot.  The board is solved when every identifier sits at its own
    index.
    """

    size: int
    tiles: tuple[int, ...]
    empty_index: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int] | tuple[int, ...]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 8, 7])
        """
        if size < 2:
            raise ValueError(f"Grid size must be at least 2, got {size}.")
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        tiles = tuple(flat)
        return cls(size=size, tiles=tiles, empty_index=tiles.index(size * size - 1))

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal arrangement (identity order, empty slot last)."""
        return cls.from_flat(size, list(range(size * size)))

    # -- queries --------------------------------------------------------------

    @property
    def empty_tile(self) -> int:
        return self.size * self.size - 1

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def coords(self, position: int) -> tuple[int, int]:
        """Return ``(row, col)`` of a flat *position*."""
        return divmod(position, self.size)

    def contains(self, position: int) -> bool:
        return 0 <= position < self.size * self.size

    def is_adjacent_to_empty(self, position: int) -> bool:
        """Check if *position* is one step from the empty slot along one axis."""
        if not self.contains(position):
            return False
        row, col = self.coords(position)
        er, ec = self.coords(self.empty_index)
        return (abs(row - er) == 1 and col == ec) or (
            abs(col - ec) == 1 and row == er
        )

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return all(tile == i for i, tile in enumerate(self.tiles))

    def is_tile_correct(self, position: int) -> bool:
        """Check if the tile at *position* is in its goal position."""
        return self.tiles[position] == position

    # -- transitions ----------------------------------------------------------

    def slide(self, position: int) -> Board:
        """Return a new board with the tile at *position* moved into the gap.

        Adjacency is the caller's concern; see :meth:`is_adjacent_to_empty`.
        """
        tiles = list(self.tiles)
        tiles[self.empty_index], tiles[position] = (
            tiles[position],
            tiles[self.empty_index],
        )
        return Board(size=self.size, tiles=tuple(tiles), empty_index=position)
