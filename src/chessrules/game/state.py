"""Game state machine — tracks phase transitions and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessrules.config import RulesConfig
from chessrules.core.board_state import BoardState
from chessrules.core.enums import BoardStateKind, MoveFlag, PieceKind, Side
from chessrules.core.errors import InvalidPromotion
from chessrules.core.legality import LegalityFilter
from chessrules.core.move import Move
from chessrules.core.notation import STARTING_FEN, position_from_fen
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.types import Square, check_square
from chessrules.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None
    result: BoardState

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Owns the canonical :class:`Position` plus phase, result and move log.

    This is a pure data/logic class — no I/O, no callbacks.
    """

    config: RulesConfig = field(default_factory=RulesConfig.standard)
    position: Position = field(init=False)
    phase: GamePhase = field(default=GamePhase.AWAITING_MOVE, init=False)
    result: BoardState = field(default_factory=BoardState.default, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)
    _legality: LegalityFilter = field(
        default_factory=LegalityFilter, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.setup()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_fen = fen or STARTING_FEN
        limit = self.config.fifty_move_limit
        if fen is None:
            self.position = Position(fifty_move_limit=limit)
            self._set_result(BoardState.default())
        else:
            self.position = position_from_fen(fen, fifty_move_limit=limit)
            self._set_result(Rules.classify(self.position, self._legality))
        self.move_history.clear()
        _LOGGER.debug("Game set up from %r (%s)", self.start_fen, self.result)

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self, sq: Square) -> set[Square]:
        """Legal targets for *sq*; empty unless a move is awaited."""
        check_square(sq)
        if self.phase != GamePhase.AWAITING_MOVE:
            return set()
        return self._legality.legal_moves(self.position, sq)

    def all_legal_moves(self) -> dict[Square, set[Square]]:
        if self.phase != GamePhase.AWAITING_MOVE:
            return {}
        return self._legality.all_legal_moves(self.position)

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, origin: Square, target: Square) -> MoveRecord:
        """Commit a validated move and return the history record.

        Caller is responsible for legality check.
        """
        board = self.position.board
        piece = board[origin]
        mover = self.position.side_to_move
        planned = self.position.plan_move(origin, target)
        captured: Piece | None = None
        if planned.captured_square is not None:
            captured = board[planned.captured_square]

        move = self.position.commit_move(origin, target)

        if move.flag == MoveFlag.PROMOTION:
            result = BoardState.pending_promotion(mover)
        else:
            result = Rules.classify(self.position, self._legality)
        self._set_result(result)

        record = MoveRecord(move=move, piece=piece, captured=captured, result=result)
        self.move_history.append(record)
        return record

    def choose_promotion(self, kind: PieceKind) -> BoardState:
        """Replace the pending pawn with *kind* and reclassify."""
        if self.phase != GamePhase.AWAITING_PROMOTION:
            raise InvalidPromotion(
                f"No promotion is awaited (phase {self.phase.name})"
            )
        self.position.promote(kind)
        result = Rules.classify(self.position, self._legality)
        self._set_result(result)
        return result

    def claim_repetition_draw(self) -> bool:
        """End the game as a repetition draw if the history allows it."""
        if self.phase != GamePhase.AWAITING_MOVE:
            return False
        if not Rules.is_repetition_draw(self.position, self.config):
            return False
        self._set_result(BoardState.draw_by_repetition())
        return True

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Side:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    # ── Internal ─────────────────────────────────────────────────────────

    def _set_result(self, result: BoardState) -> None:
        self.result = result
        if result.is_terminal:
            self.phase = GamePhase.GAME_OVER
        elif result.kind == BoardStateKind.PENDING_PROMOTION:
            self.phase = GamePhase.AWAITING_PROMOTION
        else:
            self.phase = GamePhase.AWAITING_MOVE
