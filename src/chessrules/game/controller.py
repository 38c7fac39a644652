"""GameController — the public entry point of the rules engine.

Coordinates: GameState, LegalityFilter, Rules.
Emits events via simple callbacks so front ends / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.config import RulesConfig
from chessrules.core.board_state import BoardState
from chessrules.core.enums import PieceKind, Side
from chessrules.core.errors import IllegalMove
from chessrules.core.types import Square, check_square, square_name
from chessrules.game.interfaces import GamePhase, IGameController
from chessrules.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Square, Square, "GameState"], None]  # origin, target, state
PromotionCallback = Callable[[Square, PieceKind, "GameState"], None]
GameOverCallback = Callable[["GameState"], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_promotion: list[PromotionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Owns the canonical game state, validates and commits moves,
    sequences turns and notifies listeners.

    Every rejected call raises before anything is mutated, so a caller that
    catches the error sees exactly the state it had before.
    """

    __slots__ = ("_config", "_state", "events")

    def __init__(self, config: RulesConfig | None = None) -> None:
        self._config = config or RulesConfig.standard()
        self._state = GameState(self._config)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def config(self) -> RulesConfig:
        return self._config

    @property
    def board(self) -> tuple[PieceKind, ...]:
        return self._state.position.board.kinds

    @property
    def board_sides(self) -> tuple[Side, ...]:
        return self._state.position.board.sides

    @property
    def side_to_move(self) -> Side:
        return self._state.side_to_move

    @property
    def last_move(self) -> tuple[Square, Square] | None:
        return self._state.position.last_move

    @property
    def pending_promotion(self) -> Square | None:
        return self._state.position.pending_promotion

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def result(self) -> BoardState:
        return self._state.result

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        state = GameState(self._config)
        if fen is not None:
            state.setup(fen)
        self._state = state
        self._emit_phase(state.phase)

    def legal_moves(self, sq: Square) -> set[Square]:
        return self._state.legal_moves(sq)

    def apply_move(self, origin: Square, target: Square) -> BoardState:
        check_square(origin)
        check_square(target)
        state = self._state

        if state.phase == GamePhase.GAME_OVER:
            raise IllegalMove(f"Game is over ({state.result})")
        if state.phase == GamePhase.AWAITING_PROMOTION:
            raise IllegalMove("A promotion must be chosen before the next move")
        if target not in state.legal_moves(origin):
            _LOGGER.debug(
                "Rejected %s%s for %s",
                square_name(origin),
                square_name(target),
                state.side_to_move,
            )
            raise IllegalMove(
                f"Illegal move: {square_name(origin)}{square_name(target)}"
            )

        record = state.apply_move(origin, target)
        _LOGGER.debug("Committed %s -> %s", record.move, record.result)

        self._emit_move(origin, target)
        self._after_transition()
        return record.result

    def choose_promotion(self, kind: PieceKind) -> BoardState:
        sq = self._state.position.pending_promotion
        result = self._state.choose_promotion(kind)
        assert sq is not None
        _LOGGER.debug(
            "Promoted on %s to %s -> %s", square_name(sq), PieceKind(kind).name, result
        )

        for cb in self.events.on_promotion:
            cb(sq, kind, self._state)
        self._after_transition()
        return result

    def request_draw(self) -> bool:
        if self._state.phase != GamePhase.AWAITING_MOVE:
            return False
        if not self._state.claim_repetition_draw():
            return False
        self._after_transition()
        return True

    # ── Query helpers ────────────────────────────────────────────────────

    def all_legal_moves(self) -> dict[Square, set[Square]]:
        """Legal targets for every movable piece of the side to move."""
        return self._state.all_legal_moves()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _after_transition(self) -> None:
        state = self._state
        self._emit_phase(state.phase)
        if state.is_game_over:
            _LOGGER.info("Game over after %d plies: %s", state.ply_count, state.result)
            for cb in self.events.on_game_over:
                cb(state)

    def _emit_move(self, origin: Square, target: Square) -> None:
        for cb in self.events.on_move:
            cb(origin, target, self._state)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
