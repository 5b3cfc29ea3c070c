"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from rookery.core.enums import Color, PieceType

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

# White pieces are upper case in FEN.
_FEN_CHARS: dict[tuple[Color, PieceType], str] = {
    (color, pt): letter.upper() if color == Color.WHITE else letter
    for pt, letter in _LETTERS.items()
    for color in Color
}
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    ch: key for key, ch in _FEN_CHARS.items()
}

# Indexed in PieceType order, pawn first.
_GLYPHS: dict[Color, str] = {Color.WHITE: "♙♘♗♖♕♔", Color.BLACK: "♟♞♝♜♛♚"}
_UNICODE: dict[tuple[Color, PieceType], str] = {
    (color, pt): glyphs[i]
    for color, glyphs in _GLYPHS.items()
    for i, pt in enumerate(PieceType)
}

# Material values in pawns. The king is never traded, so it counts as zero.
PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    ``has_moved`` only ever goes from False to True; it is flipped by
    :meth:`rookery.core.board.Board.play` and drives castling rights.
    """

    piece_type: PieceType
    color: Color
    has_moved: bool = False

    # -- Serialisation ------------------------------------------------------

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, has_moved: bool = False) -> Piece:
        """Create piece from FEN character, e.g. 'N' -> white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(ptype, color, has_moved)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @property
    def value(self) -> int:
        """Material value in pawns."""
        return PIECE_VALUES[self.piece_type]

    def moved(self) -> Piece:
        """Copy of this piece flagged as having moved."""
        if self.has_moved:
            return self
        return replace(self, has_moved=True)
