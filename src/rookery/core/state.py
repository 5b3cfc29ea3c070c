"""GameState - immutable position snapshot and the move applier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rookery.core.attacks import is_king_attacked
from rookery.core.board import Board
from rookery.core.enums import Color, GameResult, PieceType
from rookery.core.errors import IllegalMoveError
from rookery.core.move import Move
from rookery.core.move_generator import MoveGenerator
from rookery.core.piece import Piece
from rookery.core.rules import Rules
from rookery.core.types import Square


@dataclass(frozen=True, slots=True)
class GameState:
    """Full position: board, side to move and the derived status flags.

    Instances are never mutated. :func:`apply_move` returns a fresh
    snapshot, so keeping a list of earlier states is all an undo feature
    needs. Use :meth:`initial` or :meth:`from_board` rather than the raw
    constructor, which trusts the flags it is given.
    """

    board: Board
    side_to_move: Color = Color.WHITE
    is_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False
    ply: int = 0
    last_move: Move | None = None

    # -- Construction -------------------------------------------------------

    @classmethod
    def initial(cls) -> GameState:
        """Standard starting position, white to move."""
        return cls.from_board(Board.initial())

    @classmethod
    def from_board(
        cls,
        board: Board,
        side_to_move: Color = Color.WHITE,
        ply: int = 0,
        last_move: Move | None = None,
    ) -> GameState:
        """Build a snapshot and compute its check / mate / stalemate flags.

        Raises:
            ValueError: If either side does not have exactly one king, or
                the side that just moved is left in check.
        """
        for color in Color:
            kings = board.count(color, PieceType.KING)
            if kings != 1:
                raise ValueError(f"{color} must have exactly one king, found {kings}")
        if is_king_attacked(board, side_to_move.opposite):
            raise ValueError(
                f"{side_to_move.opposite} is in check with {side_to_move} to move"
            )
        return _derive(board, side_to_move, ply, last_move)

    # -- Query helpers ------------------------------------------------------

    @property
    def result(self) -> GameResult:
        if self.is_checkmate:
            return (
                GameResult.BLACK_WINS
                if self.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if self.is_stalemate:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    @property
    def is_game_over(self) -> bool:
        return self.is_checkmate or self.is_stalemate

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return MoveGenerator(self).generate_legal_moves()

    # -- Plain-data serialisation -------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible representation (lists, strings, bools, ints)."""
        return {
            "board": [
                [_piece_to_dict(piece) for piece in row] for row in self.board.to_rows()
            ],
            "side_to_move": str(self.side_to_move),
            "is_check": self.is_check,
            "is_checkmate": self.is_checkmate,
            "is_stalemate": self.is_stalemate,
            "ply": self.ply,
            "last_move": self.last_move.uci if self.last_move else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameState:
        """Inverse of :meth:`to_dict`. Status flags are recomputed."""
        try:
            rows = [[_piece_from_dict(cell) for cell in row] for row in data["board"]]
            side = Color[data["side_to_move"].upper()]
            ply = int(data.get("ply", 0))
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"Invalid game state data: {exc}") from exc
        last_move = data.get("last_move")
        return cls.from_board(
            Board.from_rows(rows),
            side,
            ply=ply,
            last_move=Move.from_uci(last_move) if last_move else None,
        )


def _derive(
    board: Board,
    side_to_move: Color,
    ply: int,
    last_move: Move | None,
) -> GameState:
    provisional = GameState(board, side_to_move, ply=ply, last_move=last_move)
    in_check = Rules.is_in_check(provisional)
    has_moves = Rules.has_legal_moves(provisional)
    return GameState(
        board,
        side_to_move,
        is_check=in_check,
        is_checkmate=in_check and not has_moves,
        is_stalemate=not in_check and not has_moves,
        ply=ply,
        last_move=last_move,
    )


def _piece_to_dict(piece: Piece | None) -> dict[str, Any] | None:
    if piece is None:
        return None
    return {
        "type": str(piece.piece_type),
        "color": str(piece.color),
        "has_moved": piece.has_moved,
    }


def _piece_from_dict(data: dict[str, Any] | None) -> Piece | None:
    if data is None:
        return None
    return Piece(
        PieceType[data["type"].upper()],
        Color[data["color"].upper()],
        bool(data.get("has_moved", False)),
    )


# -- State transition ---------------------------------------------------------


def apply_move(
    state: GameState,
    from_sq: Square,
    to_sq: Square,
    *,
    validate: bool = True,
) -> GameState:
    """Play *from_sq* -> *to_sq* and return the resulting snapshot.

    The input state is left untouched. Castling moves the rook along with
    the king, and a pawn reaching the last row is promoted to a queen.

    Args:
        validate: When True (default) the move must be one of
            ``MoveGenerator(state).legal_targets(from_sq)`` and the piece
            must belong to the side to move. Pass False only for moves
            already taken from the legal set.

    Raises:
        IllegalMoveError: If validation fails, or the origin is empty.
    """
    from_sq = Square(*from_sq)
    to_sq = Square(*to_sq)
    piece = state.board[from_sq]
    if piece is None:
        raise IllegalMoveError(from_sq, to_sq, "no piece on origin square")

    if validate:
        if piece.color != state.side_to_move:
            raise IllegalMoveError(from_sq, to_sq, f"it is {state.side_to_move}'s turn")
        if to_sq not in MoveGenerator(state).legal_targets(from_sq):
            raise IllegalMoveError(from_sq, to_sq, "destination not reachable")

    board = state.board.play(from_sq, to_sq)
    return _derive(
        board,
        state.side_to_move.opposite,
        state.ply + 1,
        Move(from_sq, to_sq),
    )


def initialize_board() -> Board:
    """Standard starting board, every piece with ``has_moved`` False."""
    return Board.initial()
