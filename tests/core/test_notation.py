"""Tests for FEN parsing and serialization."""

import pytest

from chessrules.core.enums import MovedFlags, PieceKind, Side
from chessrules.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.position import Position
from chessrules.core.types import A7, A8, D5, E2, E4, E8, G2, H1


class TestFromFen:
    def test_starting_position_matches_default(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        fresh = Position()
        assert pos.board == fresh.board
        assert pos.side_to_move == Side.WHITE
        assert pos.moved == MovedFlags.NONE
        assert pos.last_move is None
        assert pos.fifty_move_counter == 50

    def test_missing_castling_letters_set_flags(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1")
        assert not pos.has_moved(MovedFlags.WHITE_KING_ROOK)
        assert pos.has_moved(MovedFlags.WHITE_QUEEN_ROOK)
        assert pos.has_moved(MovedFlags.BLACK_KING_ROOK)
        assert not pos.has_moved(MovedFlags.BLACK_QUEEN_ROOK)
        assert not pos.has_moved(MovedFlags.WHITE_KING | MovedFlags.BLACK_KING)

    def test_no_castling_marks_kings(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert pos.has_moved(MovedFlags.WHITE_KING)
        assert pos.has_moved(MovedFlags.BLACK_KING)

    def test_en_passant_becomes_last_move(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        assert pos.last_move == (D5 + 16, D5)

    def test_black_en_passant(self) -> None:
        pos = position_from_fen(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert pos.last_move == (E2, E4)

    def test_halfmove_clock_consumes_counter(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 12 30", fifty_move_limit=50)
        assert pos.fifty_move_counter == 38
        assert pos.fullmove_number == 30

    def test_clocks_are_optional(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 b -  -")
        assert pos.side_to_move == Side.BLACK
        assert pos.fullmove_number == 1

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8 w - - 0 1",
            "4k3/8/8/8/8/8/8/4K3 x - - 0 1",
            "4k3/8/8/8/8/8/8/4K4 w - - 0 1",
            "4k3/8/8/8/8/8/8/8 w - - 0 1",
            "4k3/8/8/8/8/8/8/3KK3 w - - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w X - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w KK - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w - e3 0 1",
            "4k3/8/8/8/8/8/8/4K3 w - - -1 1",
            "4k3/8/8/8/8/8/8/4K3 w - - 0 0",
            "4k3/8/8/8/8/8/8/4X3 w - - 0 1",
        ],
    )
    def test_rejects_malformed(self, fen: str) -> None:
        with pytest.raises(ValueError):
            position_from_fen(fen)


class TestToFen:
    def test_starting_position(self) -> None:
        assert position_to_fen(Position()) == STARTING_FEN

    def test_after_double_push(self) -> None:
        pos = Position()
        pos.commit_move(E2, E4)
        assert position_to_fen(pos) == (
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )

    def test_halfmove_from_counter(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 7 12")
        assert position_to_fen(pos) == "4k3/8/8/8/8/8/8/4K3 w - - 7 12"

    def test_captured_rook_drops_castling_letter(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/6b1/4K2R b K - 0 1")
        pos.commit_move(G2, H1)
        assert position_to_fen(pos).split()[2] == "-"

    def test_king_move_drops_both_letters(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R b KQkq - 0 1")
        pos.commit_move(E8, E8 - 8)
        assert position_to_fen(pos).split()[2] == "KQ"

    def test_pending_promotion_shows_pawn(self) -> None:
        pos = position_from_fen("7k/P7/8/8/8/8/8/K7 w - - 0 1")
        pos.commit_move(A7, A8)
        assert pos.board.kind_at(A8) == PieceKind.PAWN
        assert position_to_fen(pos).startswith("P6k/")

    def test_round_trip_preserves_en_passant(self) -> None:
        fen = "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1"
        assert position_to_fen(position_from_fen(fen)) == fen
