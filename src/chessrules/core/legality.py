"""Self-check filtering of pseudo-legal moves."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.board import Board
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Square, check_square

if TYPE_CHECKING:
    from chessrules.core.position import Position


class LegalityFilter:
    """Turns pseudo-legal targets into strictly legal ones.

    Each candidate is played on a private scratch board that is overwritten
    from the real board before every simulation, so the position being
    examined is never mutated.
    """

    __slots__ = ("_scratch",)

    def __init__(self) -> None:
        self._scratch = Board()

    def legal_moves(self, position: Position, sq: Square) -> set[Square]:
        """Legal targets for the piece on *sq*.

        Empty if *sq* is vacant or holds a piece of the side not to move.
        """
        check_square(sq)
        side = position.board.side_at(sq)
        if side != position.side_to_move:
            return set()

        gen = MoveGenerator.for_position(position)
        return {
            target
            for target in gen.pseudo_legal_moves(sq, filter_self_check=True)
            if not self.leaves_king_attacked(position, sq, target)
        }

    def leaves_king_attacked(
        self, position: Position, origin: Square, target: Square
    ) -> bool:
        """Would moving *origin* → *target* leave the mover's king attacked?"""
        side = position.board.side_at(origin)
        after = position.simulate_move(origin, target, into=self._scratch)
        return MoveGenerator(after).is_in_check(side)

    def all_legal_moves(self, position: Position) -> dict[Square, set[Square]]:
        """Legal targets for every piece of the side to move that has any."""
        result: dict[Square, set[Square]] = {}
        for sq in position.board.squares_of(position.side_to_move):
            targets = self.legal_moves(position, sq)
            if targets:
                result[sq] = targets
        return result

    def has_legal_move(self, position: Position) -> bool:
        """Whether the side to move has at least one legal move."""
        for sq in position.board.squares_of(position.side_to_move):
            if self.legal_moves(position, sq):
                return True
        return False
