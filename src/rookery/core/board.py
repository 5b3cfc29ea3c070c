"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from rookery.core.enums import Color, PieceType
from rookery.core.piece import Piece
from rookery.core.types import ALL_SQUARES, BOARD_SIZE, Square, square_index

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 64-square board.

    Every "mutation" goes through :meth:`replace`, which returns a new
    board and leaves the receiver untouched, so older boards can be kept
    around as history snapshots.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Sequence[Piece | None] | None = None) -> None:
        if squares is None:
            squares = (None,) * (BOARD_SIZE * BOARD_SIZE)
        if len(squares) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"Board needs 64 squares, got {len(squares)}")
        self._squares: tuple[Piece | None, ...] = tuple(squares)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[square_index(sq)]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[square_index(sq)] is None

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, row by row."""
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece is not None:
                yield sq, piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self if piece.color == color]

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None when it is missing."""
        for idx, piece in enumerate(self._squares):
            if (
                piece is not None
                and piece.piece_type == PieceType.KING
                and piece.color == color
            ):
                return ALL_SQUARES[idx]
        return None

    def count(self, color: Color, piece_type: PieceType) -> int:
        return sum(
            1
            for _, piece in self
            if piece.color == color and piece.piece_type == piece_type
        )

    # -- Copy-on-write ------------------------------------------------------

    def replace(self, changes: Mapping[Square, Piece | None]) -> Board:
        """New board with *changes* applied (``None`` clears a square)."""
        squares = list(self._squares)
        for sq, piece in changes.items():
            squares[square_index(sq)] = piece
        return Board(squares)

    def play(self, from_sq: Square, to_sq: Square) -> Board:
        """Board after moving the piece on *from_sq* to *to_sq*.

        Handles the mechanics only: a king stepping two columns brings its
        rook across, a pawn landing on the last row becomes a queen, and
        the moved piece is flagged ``has_moved``. Legality is not checked.
        """
        from_sq = Square(*from_sq)
        to_sq = Square(*to_sq)
        piece = self[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")

        changes: dict[Square, Piece | None] = {from_sq: None}

        if piece.piece_type == PieceType.KING and abs(to_sq.col - from_sq.col) == 2:
            direction = 1 if to_sq.col > from_sq.col else -1
            rook_from = Square(from_sq.row, BOARD_SIZE - 1 if direction > 0 else 0)
            rook = self[rook_from]
            if rook is not None:
                changes[rook_from] = None
                changes[Square(from_sq.row, from_sq.col + direction)] = rook.moved()

        if piece.piece_type == PieceType.PAWN and to_sq.row in (0, BOARD_SIZE - 1):
            changes[to_sq] = Piece(PieceType.QUEEN, piece.color, has_moved=True)
        else:
            changes[to_sq] = piece.moved()

        return self.replace(changes)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, every piece unmoved."""
        squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        for col, pt in enumerate(_BACK_RANK):
            squares[square_index(Square(0, col))] = Piece(pt, Color.BLACK)
            squares[square_index(Square(1, col))] = Piece(PieceType.PAWN, Color.BLACK)
            squares[square_index(Square(6, col))] = Piece(PieceType.PAWN, Color.WHITE)
            squares[square_index(Square(7, col))] = Piece(pt, Color.WHITE)
        return cls(squares)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Piece | None]]) -> Board:
        """Build from an 8x8 nested sequence indexed ``rows[row][col]``."""
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Board rows must form an 8x8 grid")
        return cls([piece for row in rows for piece in row])

    def to_rows(self) -> list[list[Piece | None]]:
        return [
            list(self._squares[row * BOARD_SIZE : (row + 1) * BOARD_SIZE])
            for row in range(BOARD_SIZE)
        ]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self[Square(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
