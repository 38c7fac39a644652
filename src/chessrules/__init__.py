"""chessrules — an authoritative, side-effect-free chess rules engine."""

from chessrules.config import RulesConfig
from chessrules.core import (
    BoardState,
    BoardStateKind,
    ChessRulesError,
    IllegalMove,
    IndexOutOfRange,
    InternalConsistencyError,
    InvalidPromotion,
    PieceKind,
    Side,
    Square,
)
from chessrules.game import GameController, GamePhase

__version__ = "0.1.0"

__all__ = [
    "BoardState",
    "BoardStateKind",
    "ChessRulesError",
    "GameController",
    "GamePhase",
    "IllegalMove",
    "IndexOutOfRange",
    "InternalConsistencyError",
    "InvalidPromotion",
    "PieceKind",
    "RulesConfig",
    "Side",
    "Square",
    "__version__",
]
