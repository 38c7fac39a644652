"""Abstract interfaces for the game layer.

Front ends depend on :class:`IGameController`, not on the concrete
controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.board_state import BoardState
    from chessrules.core.enums import PieceKind
    from chessrules.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    AWAITING_MOVE = auto()
    AWAITING_PROMOTION = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, fen: str | None = None) -> None:
        """Set up a new game (standard start unless *fen* is given)."""

    @abstractmethod
    def legal_moves(self, sq: Square) -> set[Square]:
        """Legal targets for the piece on *sq*."""

    @abstractmethod
    def apply_move(self, origin: Square, target: Square) -> BoardState:
        """Commit a legal move and return the resulting board state."""

    @abstractmethod
    def choose_promotion(self, kind: PieceKind) -> BoardState:
        """Resolve a pending promotion."""

    @abstractmethod
    def request_draw(self) -> bool:
        """Claim a draw by repetition. Returns True if granted."""
