"""High-level chess rules: check, checkmate, stalemate, draw detection."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import TYPE_CHECKING

from chessrules.core.board_state import BoardState
from chessrules.core.enums import Side
from chessrules.core.legality import LegalityFilter
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.config import RulesConfig
    from chessrules.core.board import Board, Snapshot
    from chessrules.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Product policy:
    # - The fifty-move counter is decided automatically at classification.
    # - Repetition is claim-based (``is_repetition_draw``) and counts
    #   pairwise-equal snapshots across the whole history.

    @staticmethod
    def is_attacked(board: Board, sq: Square, by_side: Side) -> bool:
        return MoveGenerator(board).is_square_attacked(sq, by_side)

    @staticmethod
    def is_in_check(position: Position, side: Side | None = None) -> bool:
        side = position.side_to_move if side is None else side
        return MoveGenerator(position.board).is_in_check(side)

    @staticmethod
    def is_checkmate(
        position: Position, legality: LegalityFilter | None = None
    ) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not (legality or LegalityFilter()).has_legal_move(position)

    @staticmethod
    def is_stalemate(
        position: Position, legality: LegalityFilter | None = None
    ) -> bool:
        if Rules.is_in_check(position):
            return False
        return not (legality or LegalityFilter()).has_legal_move(position)

    @staticmethod
    def is_fifty_move_draw(position: Position) -> bool:
        return position.fifty_move_counter <= 0

    @staticmethod
    def repeated_pairs(history: Sequence[Snapshot]) -> int:
        """Number of index pairs ``i < j`` with identical snapshots."""
        return sum(n * (n - 1) // 2 for n in Counter(history).values())

    @staticmethod
    def is_repetition_draw(position: Position, config: RulesConfig) -> bool:
        pairs = Rules.repeated_pairs(position.history)
        return pairs > config.repetition_pair_threshold

    @staticmethod
    def classify(
        position: Position, legality: LegalityFilter | None = None
    ) -> BoardState:
        """Classify *position* from the side to move's point of view."""
        legality = legality or LegalityFilter()
        side = position.side_to_move

        if Rules.is_in_check(position):
            if not legality.has_legal_move(position):
                return BoardState.checkmate(side)
            return BoardState.check(side)

        if Rules.is_fifty_move_draw(position):
            return BoardState.draw_by_fifty_move()

        if not legality.has_legal_move(position):
            return BoardState.draw_by_stalemate()

        if position.pending_promotion is not None:
            pawn_side = position.board.side_at(position.pending_promotion)
            return BoardState.pending_promotion(pawn_side)

        return BoardState.default()
