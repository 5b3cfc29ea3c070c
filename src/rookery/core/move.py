"""Move value object (coordinate notation)."""

from __future__ import annotations

from dataclasses import dataclass

from rookery.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move.

    Castling is encoded as the king's two-column step; promotion is always
    to a queen, so no extra fields are needed.
    """

    from_sq: Square
    to_sq: Square

    # -- Display ------------------------------------------------------------

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def uci(self) -> str:
        """Long-algebraic coordinate notation, e.g. ``'e2e4'``."""
        return str(self)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse ``'e2e4'``. A trailing ``'q'`` promotion suffix is accepted."""
        if len(text) == 5 and text[4] == "q":
            text = text[:4]
        if len(text) != 4:
            raise ValueError(f"Invalid move notation: {text!r}")
        return cls(parse_square(text[:2]), parse_square(text[2:]))
