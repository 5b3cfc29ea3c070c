"""Attack detection shared by move generation and check detection.

Everything here scans outward from the target square, so it never needs
to generate moves. That keeps the move generator (which asks "is this
square attacked?" for castling and king safety) and the rules layer
(which asks for legal moves to find mates) from recursing into each other.
"""

from __future__ import annotations

from rookery.core.board import Board
from rookery.core.enums import Color, PieceType
from rookery.core.types import ALL_SQUARES, Square, offset, square_index

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Row step of a pawn push. White starts on row 6 and walks towards row 0.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
BACK_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in ALL_SQUARES:
        moves = [offset(sq, dr, dc) for dr, dc in offsets]
        targets.append(tuple(m for m in moves if m is not None))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            ray: list[Square] = []
            nxt = offset(sq, dr, dc)
            while nxt is not None:
                ray.append(nxt)
                nxt = offset(nxt, dr, dc)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


# -- Predicates -------------------------------------------------------------


def king_adjacent(a: Square, b: Square) -> bool:
    """Whether a king on *a* attacks *b* (Chebyshev distance of one)."""
    return a != b and abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?

    Pawns attack diagonally forward whether or not the square is occupied;
    a pawn push is not an attack.
    """
    # A pawn attacking sq stands one row behind it from its own viewpoint.
    back = -PAWN_DIRECTION[by_color]
    for d_col in (-1, 1):
        origin = offset(sq, back, d_col)
        if origin is None:
            continue
        piece = board[origin]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.PAWN
        ):
            return True

    idx = square_index(sq)
    for origin in KNIGHT_TARGETS[idx]:
        piece = board[origin]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KNIGHT
        ):
            return True

    king_sq = board.find_king(by_color)
    if king_sq is not None and king_adjacent(king_sq, sq):
        return True

    if _ray_hits(board, BISHOP_RAYS[idx], by_color, _DIAGONAL_SLIDERS):
        return True
    return _ray_hits(board, ROOK_RAYS[idx], by_color, _ORTHOGONAL_SLIDERS)


def _ray_hits(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    sliders: tuple[PieceType, ...],
) -> bool:
    for ray in rays:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in sliders:
                return True
            break
    return False


def is_king_attacked(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked? A board without that king is not."""
    king_sq = board.find_king(color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, color.opposite)
