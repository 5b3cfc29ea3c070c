"""Exceptions raised by the rules layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rookery.core.types import Square


class ChessError(Exception):
    """Base class for rule violations reported by :mod:`rookery`."""


class IllegalMoveError(ChessError, ValueError):
    """Raised when a move is not in the legal set for its origin square."""

    def __init__(self, from_sq: Square, to_sq: Square, reason: str = "") -> None:
        self.from_sq = from_sq
        self.to_sq = to_sq
        self.reason = reason
        message = f"Illegal move: {from_sq}{to_sq}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
