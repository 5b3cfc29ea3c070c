"""FEN import/export for :class:`GameState`.

The engine tracks castling through each piece's ``has_moved`` flag, so the
castling field is translated into those flags on import and rebuilt from
them on export. The en passant and halfmove fields are accepted for
compatibility and otherwise ignored.
"""

from __future__ import annotations

from rookery.core.board import Board
from rookery.core.enums import Color, PieceType
from rookery.core.piece import Piece
from rookery.core.state import GameState
from rookery.core.types import BOARD_SIZE, Square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_KING_HOME: dict[Color, Square] = {
    Color.WHITE: Square(7, 4),
    Color.BLACK: Square(0, 4),
}
# castling letter -> (color, rook home square)
_ROOK_HOMES: dict[str, tuple[Color, Square]] = {
    "K": (Color.WHITE, Square(7, 7)),
    "Q": (Color.WHITE, Square(7, 0)),
    "k": (Color.BLACK, Square(0, 7)),
    "q": (Color.BLACK, Square(0, 0)),
}
_PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def position_from_fen(fen: str) -> GameState:
    """Parse a FEN string into a :class:`GameState`."""
    parts = fen.split()
    if len(parts) < 4 or len(parts) > 6:
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    board_part, side_part, castling_part, ep_part = parts[:4]

    ranks = board_part.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    if side_part not in ("w", "b"):
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")
    side = Color.WHITE if side_part == "w" else Color.BLACK

    rights: set[str] = set()
    if castling_part != "-":
        for ch in castling_part:
            if ch not in _ROOK_HOMES or ch in rights:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            rights.add(ch)

    if ep_part != "-":
        try:
            parse_square(ep_part)
        except ValueError:
            raise ValueError(f"Invalid FEN en-passant square: {ep_part!r}") from None

    if len(parts) >= 5 and not parts[4].isdigit():
        raise ValueError(f"Invalid FEN halfmove clock: {parts[4]!r}")

    fullmove = 1
    if len(parts) == 6:
        try:
            fullmove = int(parts[5])
        except ValueError:
            raise ValueError(f"Invalid FEN fullmove number: {parts[5]!r}") from None
        if fullmove < 1:
            raise ValueError(f"Invalid FEN fullmove number: {parts[5]!r}")

    rows: list[list[Piece | None]] = []
    for row, rank_str in enumerate(ranks):
        cells: list[Piece | None] = []
        for ch in rank_str:
            if ch.isdigit():
                n = int(ch)
                if n < 1 or n > BOARD_SIZE:
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                cells.extend([None] * n)
            else:
                piece = Piece.from_char(ch)
                cells.append(_with_moved_flag(piece, Square(row, len(cells)), rights))
            if len(cells) > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if len(cells) != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
        rows.append(cells)

    ply = 2 * (fullmove - 1) + (1 if side == Color.BLACK else 0)
    return GameState.from_board(Board.from_rows(rows), side, ply=ply)


def _with_moved_flag(piece: Piece, sq: Square, rights: set[str]) -> Piece:
    """Guess ``has_moved`` from placement and castling rights."""
    color = piece.color
    if piece.piece_type == PieceType.PAWN:
        return Piece(piece.piece_type, color, sq.row != _PAWN_HOME_ROW[color])

    if piece.piece_type == PieceType.KING:
        letters = ("K", "Q") if color == Color.WHITE else ("k", "q")
        unmoved = sq == _KING_HOME[color] and any(ch in rights for ch in letters)
        return Piece(piece.piece_type, color, not unmoved)

    if piece.piece_type == PieceType.ROOK:
        unmoved = any(
            ch in rights and home == (color, sq) for ch, home in _ROOK_HOMES.items()
        )
        return Piece(piece.piece_type, color, not unmoved)

    return piece


def position_to_fen(state: GameState) -> str:
    """Serialise *state* to FEN."""
    board = state.board
    ranks: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        rank_str = ""
        for col in range(BOARD_SIZE):
            piece = board[Square(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    rank_str += str(empty)
                    empty = 0
                rank_str += str(piece)
        if empty:
            rank_str += str(empty)
        ranks.append(rank_str)

    side = "w" if state.side_to_move == Color.WHITE else "b"
    castling = _castling_field(board)
    fullmove = state.ply // 2 + 1
    return f"{'/'.join(ranks)} {side} {castling} - 0 {fullmove}"


def _castling_field(board: Board) -> str:
    letters = ""
    for ch, (color, rook_home) in _ROOK_HOMES.items():
        king = board[_KING_HOME[color]]
        rook = board[rook_home]
        if (
            king is not None
            and king.piece_type == PieceType.KING
            and king.color == color
            and not king.has_moved
            and rook is not None
            and rook.piece_type == PieceType.ROOK
            and rook.color == color
            and not rook.has_moved
        ):
            letters += ch
    return letters or "-"
