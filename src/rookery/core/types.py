"""Square type and coordinate helpers.

Board layout (row-major, white at the bottom)::

    row 0 -> rank 8 (black back rank)
    row 7 -> rank 1 (white back rank)
    col 0 -> file a, col 7 -> file h

The orientation is fixed for the whole game.
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8


class Square(NamedTuple):
    """A board coordinate as a ``(row, col)`` pair."""

    row: int
    col: int

    def __str__(self) -> str:
        return square_name(self)


def is_on_board(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def offset(sq: Square, d_row: int, d_col: int) -> Square | None:
    """Square reached from *sq* by ``(d_row, d_col)``, or None if off-board."""
    row = sq[0] + d_row
    col = sq[1] + d_col
    if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
        return Square(row, col)
    return None


def square_index(sq: Square) -> int:
    """Flat index 0-63 used by :class:`~rookery.core.board.Board` storage."""
    return sq[0] * BOARD_SIZE + sq[1]


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(6, 4)`` -> ``'e2'``."""
    row, col = sq
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e2'`` -> ``Square(6, 4)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)
