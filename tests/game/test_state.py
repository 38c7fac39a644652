"""Tests for GameState."""

import pytest

from chessrules.config import RulesConfig
from chessrules.core.board_state import BoardState
from chessrules.core.enums import BoardStateKind, MoveFlag, PieceKind, Side
from chessrules.core.errors import InvalidPromotion
from chessrules.core.notation import STARTING_FEN
from chessrules.core.piece import Piece
from chessrules.core.types import A7, A8, B8, D5, E2, E4, E5, G1, G8, H8
from chessrules.game.interfaces import GamePhase
from chessrules.game.state import GameState


class TestGameStateSetup:
    def test_setup_default(self) -> None:
        gs = GameState()
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.result == BoardState.default()
        assert gs.side_to_move == Side.WHITE
        assert gs.ply_count == 0
        assert gs.start_fen == STARTING_FEN

    def test_setup_custom_fen(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        gs = GameState()
        gs.setup(fen)
        assert gs.side_to_move == Side.BLACK
        assert gs.start_fen == fen

    def test_setup_classifies_terminal_fen(self) -> None:
        gs = GameState()
        gs.setup("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert gs.result == BoardState.draw_by_stalemate()
        assert gs.is_game_over
        assert gs.legal_moves(H8) == set()
        assert gs.all_legal_moves() == {}

    def test_setup_resets_history(self) -> None:
        gs = GameState()
        gs.apply_move(E2, E4)
        gs.setup()
        assert gs.ply_count == 0
        assert gs.position.history == []

    def test_config_limit_reaches_position(self) -> None:
        gs = GameState(RulesConfig(fifty_move_limit=10))
        assert gs.position.fifty_move_counter == 10


class TestApplyMove:
    def test_record_contents(self) -> None:
        gs = GameState()
        record = gs.apply_move(E2, E4)
        assert record.move.flag == MoveFlag.DOUBLE_PAWN
        assert record.piece == Piece(PieceKind.PAWN, Side.WHITE)
        assert record.captured is None
        assert not record.was_capture
        assert record.result == BoardState.default()
        assert gs.move_history == [record]

    def test_capture_recorded(self) -> None:
        gs = GameState()
        gs.apply_move(E2, E4)
        gs.apply_move(D5 + 16, D5)
        record = gs.apply_move(E4, D5)
        assert record.captured == Piece(PieceKind.PAWN, Side.BLACK)

    def test_en_passant_capture_recorded(self) -> None:
        gs = GameState()
        gs.setup("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        record = gs.apply_move(E5, D5 + 8)
        assert record.move.flag == MoveFlag.EN_PASSANT
        assert record.captured == Piece(PieceKind.PAWN, Side.BLACK)

    def test_promotion_awaits_choice(self) -> None:
        gs = GameState()
        gs.setup("7k/P7/8/8/8/8/8/K7 w - - 0 1")
        record = gs.apply_move(A7, A8)
        assert record.result == BoardState.pending_promotion(Side.WHITE)
        assert gs.phase == GamePhase.AWAITING_PROMOTION
        assert gs.legal_moves(H8) == set()

    def test_choose_promotion(self) -> None:
        gs = GameState()
        gs.setup("7k/P7/8/8/8/8/8/K7 w - - 0 1")
        gs.apply_move(A7, A8)
        result = gs.choose_promotion(PieceKind.QUEEN)
        assert result == BoardState.check(Side.BLACK)
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.position.board[A8] == Piece(PieceKind.QUEEN, Side.WHITE)

    def test_choose_promotion_without_pending(self) -> None:
        gs = GameState()
        with pytest.raises(InvalidPromotion):
            gs.choose_promotion(PieceKind.QUEEN)
        assert gs.phase == GamePhase.AWAITING_MOVE

    def test_underpromotion_can_stalemate(self) -> None:
        gs = GameState()
        gs.setup("k7/2P5/1K6/4B3/8/8/8/8 w - - 0 1")
        gs.apply_move(A7 + 2, B8 + 1)
        result = gs.choose_promotion(PieceKind.KNIGHT)
        assert result.kind == BoardStateKind.DRAW_BY_STALEMATE
        assert gs.is_game_over


class TestRepetitionClaim:
    def test_claim_rejected_without_repeats(self) -> None:
        gs = GameState()
        gs.apply_move(E2, E4)
        assert not gs.claim_repetition_draw()
        assert gs.phase == GamePhase.AWAITING_MOVE

    def test_claim_accepted(self) -> None:
        gs = GameState()
        shuffle = [(G1, G1 + 15), (G8, G8 - 17), (G1 + 15, G1), (G8 - 17, G8)]
        for origin, target in shuffle + shuffle[:3]:
            gs.apply_move(origin, target)
        assert gs.claim_repetition_draw()
        assert gs.result == BoardState.draw_by_repetition()
        assert gs.is_game_over
