"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import LegalityFilter, Rules, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    for target in LegalityFilter().legal_moves(pos, 12):
        print(target)
"""

from chessrules.core.board import Board, Snapshot
from chessrules.core.board_state import BoardState
from chessrules.core.enums import (
    BoardStateKind,
    Direction,
    MovedFlags,
    MoveFlag,
    PieceKind,
    Side,
)
from chessrules.core.errors import (
    ChessRulesError,
    IllegalMove,
    IndexOutOfRange,
    InternalConsistencyError,
    InvalidPromotion,
)
from chessrules.core.legality import LegalityFilter
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.piece import EMPTY, Piece
from chessrules.core.position import PROMOTION_KINDS, Position
from chessrules.core.rules import Rules
from chessrules.core.types import (
    Square,
    check_square,
    file_of,
    in_bounds,
    make_square,
    on_left_file,
    on_right_file,
    rank_of,
    square_name,
    step,
)

__all__ = [
    # Enums / flags
    "BoardStateKind",
    "Direction",
    "MoveFlag",
    "MovedFlags",
    "PieceKind",
    "Side",
    # Errors
    "ChessRulesError",
    "IllegalMove",
    "IndexOutOfRange",
    "InternalConsistencyError",
    "InvalidPromotion",
    # Types / helpers
    "Square",
    "check_square",
    "file_of",
    "in_bounds",
    "make_square",
    "on_left_file",
    "on_right_file",
    "rank_of",
    "square_name",
    "step",
    # Domain objects
    "Board",
    "BoardState",
    "EMPTY",
    "LegalityFilter",
    "Move",
    "MoveGenerator",
    "PROMOTION_KINDS",
    "Piece",
    "Position",
    "Rules",
    "Snapshot",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
