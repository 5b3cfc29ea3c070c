"""Tests for Board."""

import pytest

from rookery.core.board import Board
from rookery.core.enums import Color, PieceType
from rookery.core.piece import Piece
from rookery.core.types import Square, parse_square


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[parse_square("e1")] == Piece(PieceType.KING, Color.WHITE)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[parse_square("e8")] == Piece(PieceType.KING, Color.BLACK)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            ("a1", PieceType.ROOK), ("b1", PieceType.KNIGHT), ("c1", PieceType.BISHOP),
            ("d1", PieceType.QUEEN), ("e1", PieceType.KING), ("f1", PieceType.BISHOP),
            ("g1", PieceType.KNIGHT), ("h1", PieceType.ROOK),
        ]
        for name, pt in expected:
            assert board[parse_square(name)] == Piece(pt, Color.WHITE), name

    def test_pawn_rows(self) -> None:
        board = Board.initial()
        for col in range(8):
            assert board[Square(1, col)] == Piece(PieceType.PAWN, Color.BLACK)
            assert board[Square(6, col)] == Piece(PieceType.PAWN, Color.WHITE)

    def test_nothing_has_moved(self) -> None:
        board = Board.initial()
        assert all(not piece.has_moved for _, piece in board)

    def test_piece_counts(self) -> None:
        board = Board.initial()
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16
        assert board.count(Color.WHITE, PieceType.PAWN) == 8

    def test_middle_is_empty(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board.is_empty(Square(row, col))


class TestBoardQueries:
    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == parse_square("e1")
        assert board.find_king(Color.BLACK) == parse_square("e8")

    def test_find_king_missing(self) -> None:
        assert Board.empty().find_king(Color.WHITE) is None

    def test_wrong_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            Board([None] * 10)

    def test_rows_round_trip(self) -> None:
        board = Board.initial()
        assert Board.from_rows(board.to_rows()) == board

    def test_repr(self) -> None:
        lines = repr(Board.initial()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"


class TestBoardCopyOnWrite:
    def test_replace_leaves_original(self) -> None:
        board = Board.initial()
        e2 = parse_square("e2")
        changed = board.replace({e2: None})
        assert changed.is_empty(e2)
        assert not board.is_empty(e2)
        assert changed != board

    def test_equal_boards_hash_equal(self) -> None:
        assert hash(Board.initial()) == hash(Board.initial())

    def test_play_marks_piece_moved(self) -> None:
        board = Board.initial().play(parse_square("g1"), parse_square("f3"))
        knight = board[parse_square("f3")]
        assert knight == Piece(PieceType.KNIGHT, Color.WHITE, has_moved=True)
        assert board.is_empty(parse_square("g1"))

    def test_play_kingside_castle_moves_rook(self) -> None:
        board = Board.initial().replace(
            {parse_square("f1"): None, parse_square("g1"): None}
        )
        after = board.play(parse_square("e1"), parse_square("g1"))
        assert after[parse_square("g1")].piece_type == PieceType.KING
        rook = after[parse_square("f1")]
        assert rook == Piece(PieceType.ROOK, Color.WHITE, has_moved=True)
        assert after.is_empty(parse_square("h1"))

    def test_play_queenside_castle_moves_rook(self) -> None:
        board = Board.initial().replace(
            {parse_square(n): None for n in ("b8", "c8", "d8")}
        )
        after = board.play(parse_square("e8"), parse_square("c8"))
        assert after[parse_square("c8")].piece_type == PieceType.KING
        assert after[parse_square("d8")] == Piece(
            PieceType.ROOK, Color.BLACK, has_moved=True
        )
        assert after.is_empty(parse_square("a8"))

    def test_play_promotes_to_queen(self) -> None:
        board = Board.empty().replace(
            {parse_square("b7"): Piece(PieceType.PAWN, Color.WHITE, has_moved=True)}
        )
        after = board.play(parse_square("b7"), parse_square("b8"))
        assert after[parse_square("b8")] == Piece(
            PieceType.QUEEN, Color.WHITE, has_moved=True
        )

    def test_play_from_empty_square_raises(self) -> None:
        with pytest.raises(ValueError):
            Board.empty().play(parse_square("e2"), parse_square("e4"))
