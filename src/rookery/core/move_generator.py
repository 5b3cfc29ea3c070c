"""Legal and pseudo-legal move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookery.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    PAWN_DIRECTION,
    PAWN_START_ROW,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_king_attacked,
    is_square_attacked,
)
from rookery.core.enums import Color, PieceType
from rookery.core.move import Move
from rookery.core.piece import Piece
from rookery.core.types import BOARD_SIZE, Square, offset, square_index

if TYPE_CHECKING:
    from rookery.core.state import GameState


class MoveGenerator:
    """Generates moves for a given :class:`GameState`.

    The generator does not care whose turn it is when asked about a single
    square: callers decide whether a piece may move. Legal moves are
    checked by playing each candidate on a scratch board and asking
    whether the mover's own king ends up attacked.
    """

    __slots__ = ("_board", "_side")

    def __init__(self, state: GameState) -> None:
        self._board = state.board
        self._side = state.side_to_move

    # -- Public API ---------------------------------------------------------

    def legal_targets(self, sq: Square) -> list[Square]:
        """Destination squares the piece on *sq* may legally move to."""
        sq = Square(*sq)
        piece = self._board[sq]
        if piece is None:
            return []
        board = self._board
        return [
            to_sq
            for to_sq in self._pseudo_legal(sq, piece)
            if not is_king_attacked(board.play(sq, to_sq), piece.color)
        ]

    def legal_moves_from(self, sq: Square) -> list[Move]:
        sq = Square(*sq)
        return [Move(sq, to_sq) for to_sq in self.legal_targets(sq)]

    def pseudo_legal_targets(self, sq: Square) -> list[Square]:
        """Destinations that fit the movement pattern (may expose the king)."""
        sq = Square(*sq)
        piece = self._board[sq]
        if piece is None:
            return []
        return self._pseudo_legal(sq, piece)

    def generate_legal_moves(self, color: Color | None = None) -> list[Move]:
        """All legal moves for *color* (defaults to the side to move)."""
        if color is None:
            color = self._side
        moves: list[Move] = []
        for sq in self._board.pieces(color):
            moves.extend(self.legal_moves_from(sq))
        return moves

    def count_legal_moves(self, color: Color | None = None) -> int:
        if color is None:
            color = self._side
        return sum(len(self.legal_targets(sq)) for sq in self._board.pieces(color))

    def has_legal_move(self, color: Color | None = None) -> bool:
        """Whether *color* has at least one legal move (stops at the first)."""
        if color is None:
            color = self._side
        board = self._board
        for sq in board.pieces(color):
            piece = board[sq]
            assert piece is not None
            for to_sq in self._pseudo_legal(sq, piece):
                if not is_king_attacked(board.play(sq, to_sq), color):
                    return True
        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return is_king_attacked(self._board, color)

    # -- Piece-specific generators (private) -------------------------------

    def _pseudo_legal(self, sq: Square, piece: Piece) -> list[Square]:
        targets: list[Square] = []
        ptype = piece.piece_type
        idx = square_index(sq)

        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, targets)
        elif ptype == PieceType.KNIGHT:
            self._gen_steps(KNIGHT_TARGETS[idx], piece.color, targets)
        elif ptype == PieceType.BISHOP:
            self._gen_sliding(BISHOP_RAYS[idx], piece.color, targets)
        elif ptype == PieceType.ROOK:
            self._gen_sliding(ROOK_RAYS[idx], piece.color, targets)
        elif ptype == PieceType.QUEEN:
            self._gen_sliding(QUEEN_RAYS[idx], piece.color, targets)
        else:
            self._gen_steps(KING_TARGETS[idx], piece.color, targets)
            if not piece.has_moved:
                self._gen_castling(sq, piece.color, targets)
        return targets

    def _gen_pawn(self, sq: Square, color: Color, targets: list[Square]) -> None:
        board = self._board
        direction = PAWN_DIRECTION[color]

        one_step = offset(sq, direction, 0)
        if one_step is not None and board.is_empty(one_step):
            targets.append(one_step)
            if sq.row == PAWN_START_ROW[color]:
                two_step = offset(sq, 2 * direction, 0)
                if two_step is not None and board.is_empty(two_step):
                    targets.append(two_step)

        for d_col in (-1, 1):
            cap_sq = offset(sq, direction, d_col)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                targets.append(cap_sq)

    def _gen_steps(
        self,
        destinations: tuple[Square, ...],
        color: Color,
        targets: list[Square],
    ) -> None:
        board = self._board
        for to_sq in destinations:
            target = board[to_sq]
            if target is None or target.color != color:
                targets.append(to_sq)

    def _gen_sliding(
        self,
        rays: tuple[tuple[Square, ...], ...],
        color: Color,
        targets: list[Square],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    targets.append(to_sq)
                    continue
                if target.color != color:
                    targets.append(to_sq)
                break

    def _gen_castling(
        self, king_sq: Square, color: Color, targets: list[Square]
    ) -> None:
        board = self._board
        opponent = color.opposite
        if is_square_attacked(board, king_sq, opponent):
            return

        row, col = king_sq
        for direction, rook_col in ((1, BOARD_SIZE - 1), (-1, 0)):
            dest_col = col + 2 * direction
            if not 0 <= dest_col < BOARD_SIZE:
                continue
            if (rook_col - dest_col) * direction < 0:
                continue

            rook = board[Square(row, rook_col)]
            if (
                rook is None
                or rook.piece_type != PieceType.ROOK
                or rook.color != color
                or rook.has_moved
            ):
                continue

            between = range(col + direction, rook_col, direction)
            if any(not board.is_empty(Square(row, c)) for c in between):
                continue

            # The king's own square was checked above; now every square it
            # crosses, destination included.
            path = range(col + direction, dest_col + direction, direction)
            if any(is_square_attacked(board, Square(row, c), opponent) for c in path):
                continue

            targets.append(Square(row, dest_col))


def legal_moves(sq: Square, state: GameState) -> list[Square]:
    """Legal destination squares for the piece on *sq* (empty if none)."""
    return MoveGenerator(state).legal_targets(sq)
