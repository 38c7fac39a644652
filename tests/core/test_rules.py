"""Tests for Rules: check, mate, stalemate and draw detection."""

from chessrules.config import RulesConfig
from chessrules.core.board import Board
from chessrules.core.board_state import BoardState
from chessrules.core.enums import BoardStateKind, PieceKind, Side
from chessrules.core.legality import LegalityFilter
from chessrules.core.notation import STARTING_FEN, position_from_fen
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.types import A7, A8, D4, E1, E2, E3, E8, F6


class TestAttacks:
    def test_is_attacked(self) -> None:
        board = Board()
        board[D4] = Piece(PieceKind.KNIGHT, Side.BLACK)
        assert Rules.is_attacked(board, E2, Side.BLACK)
        assert not Rules.is_attacked(board, E3, Side.BLACK)
        assert not Rules.is_attacked(board, E2, Side.WHITE)

    def test_is_in_check_defaults_to_side_to_move(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K2r w - - 0 1")
        assert Rules.is_in_check(pos)
        assert not Rules.is_in_check(pos, Side.BLACK)


class TestTerminal:
    def test_checkmate(self) -> None:
        pos = position_from_fen("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        assert Rules.is_checkmate(pos)
        assert not Rules.is_stalemate(pos)

    def test_stalemate(self) -> None:
        pos = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert Rules.is_stalemate(pos)
        assert not Rules.is_checkmate(pos)

    def test_starting_position_is_neither(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert not Rules.is_checkmate(pos)
        assert not Rules.is_stalemate(pos)

    def test_fifty_move_counter(self) -> None:
        assert Rules.is_fifty_move_draw(
            position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 50 40")
        )
        assert not Rules.is_fifty_move_draw(
            position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 49 40")
        )


class TestRepetition:
    def test_pairs_counted_across_all_snapshots(self) -> None:
        a = Board.initial().snapshot()
        b = Board().snapshot()
        other = Board()
        other[E1] = Piece(PieceKind.KING, Side.WHITE)
        c = other.snapshot()
        assert Rules.repeated_pairs([a, b, a, b, c, c]) == 3

    def test_triple_occurrence_is_three_pairs(self) -> None:
        a = Board.initial().snapshot()
        assert Rules.repeated_pairs([a, a, a]) == 3

    def test_no_repeats(self) -> None:
        assert Rules.repeated_pairs([]) == 0
        assert Rules.repeated_pairs([Board().snapshot()]) == 0

    def test_threshold_comes_from_config(self) -> None:
        pos = Position()
        a = Board.initial().snapshot()
        pos.history = [a, a]
        assert not Rules.is_repetition_draw(pos, RulesConfig())
        assert Rules.is_repetition_draw(pos, RulesConfig(repetition_pair_threshold=0))
        pos.history = [a, a, a]
        assert Rules.is_repetition_draw(pos, RulesConfig())


class TestClassify:
    def test_default(self) -> None:
        assert Rules.classify(Position()) == BoardState.default()

    def test_check(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K2r w - - 0 1")
        assert Rules.classify(pos) == BoardState.check(Side.WHITE)

    def test_checkmate(self) -> None:
        pos = position_from_fen("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        result = Rules.classify(pos, LegalityFilter())
        assert result == BoardState.checkmate(Side.BLACK)
        assert result.winner == Side.WHITE

    def test_stalemate(self) -> None:
        pos = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert Rules.classify(pos) == BoardState.draw_by_stalemate()

    def test_fifty_move(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 50 40")
        assert Rules.classify(pos).kind == BoardStateKind.DRAW_BY_FIFTY_MOVE

    def test_checkmate_wins_over_fifty_move(self) -> None:
        pos = position_from_fen("R2k4/8/3K4/8/8/8/8/8 b - - 50 60")
        assert Rules.classify(pos).kind == BoardStateKind.CHECKMATE

    def test_pending_promotion_reports_pawn_side(self) -> None:
        pos = position_from_fen("7k/P7/8/8/8/8/8/K7 w - - 0 1")
        pos.commit_move(A7, A8)
        assert Rules.classify(pos) == BoardState.pending_promotion(Side.WHITE)


class TestLegality:
    def test_pinned_piece_cannot_move(self, legality: LegalityFilter) -> None:
        pos = position_from_fen("4k3/4r3/8/8/8/8/4B3/4K3 w - - 0 1")
        assert legality.legal_moves(pos, E2) == set()

    def test_king_cannot_step_into_check(self, legality: LegalityFilter) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K2r w - - 0 1")
        assert legality.legal_moves(pos, E1) == {E2 - 1, E2, E2 + 1}

    def test_opponent_pieces_have_no_moves(self, legality: LegalityFilter) -> None:
        assert legality.legal_moves(Position(), E8 - 8) == set()

    def test_empty_square_has_no_moves(self, legality: LegalityFilter) -> None:
        assert legality.legal_moves(Position(), F6) == set()

    def test_examined_position_not_mutated(self, legality: LegalityFilter) -> None:
        pos = Position()
        before = pos.board.copy()
        legality.all_legal_moves(pos)
        assert pos.board == before
        assert pos.history == []
