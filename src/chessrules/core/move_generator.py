"""Pseudo-legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Direction, MovedFlags, PieceKind, Side
from chessrules.core.types import (
    ALL_DIRECTIONS,
    DIAGONAL,
    E1,
    E8,
    ORTHOGONAL,
    Square,
    file_of,
    in_bounds,
    make_square,
    rank_of,
    step,
)

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

_KING_HOME: dict[Side, Square] = {Side.WHITE: E1, Side.BLACK: E8}
_KING_FLAG: dict[Side, MovedFlags] = {
    Side.WHITE: MovedFlags.WHITE_KING,
    Side.BLACK: MovedFlags.BLACK_KING,
}
_KING_ROOK_FLAG: dict[Side, MovedFlags] = {
    Side.WHITE: MovedFlags.WHITE_KING_ROOK,
    Side.BLACK: MovedFlags.BLACK_KING_ROOK,
}
_QUEEN_ROOK_FLAG: dict[Side, MovedFlags] = {
    Side.WHITE: MovedFlags.WHITE_QUEEN_ROOK,
    Side.BLACK: MovedFlags.BLACK_QUEEN_ROOK,
}
_PAWN_FORWARD: dict[Side, int] = {Side.WHITE: 8, Side.BLACK: -8}
_PAWN_START_RANK: dict[Side, int] = {Side.WHITE: 1, Side.BLACK: 6}


# -- Precomputed lookup tables ---------------------------------------------


def _build_knight_targets() -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        moves: list[Square] = []
        for df, dr in KNIGHT_OFFSETS:
            af = file_idx + df
            ar = rank_idx + dr
            if 0 <= af < 8 and 0 <= ar < 8:
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays() -> tuple[dict[Direction, tuple[Square, ...]], ...]:
    rays_per_square: list[dict[Direction, tuple[Square, ...]]] = []
    for sq in range(64):
        square_rays: dict[Direction, tuple[Square, ...]] = {}
        for direction in ALL_DIRECTIONS:
            ray: list[Square] = []
            for n in range(1, 8):
                target, blocked = step(direction, sq, n)
                if blocked:
                    break
                ray.append(target)
            square_rays[direction] = tuple(ray)
        rays_per_square.append(square_rays)
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_knight_targets()
_RAYS = _build_rays()
_KING_TARGETS: tuple[tuple[Square, ...], ...] = tuple(
    tuple(_RAYS[sq][d][0] for d in ALL_DIRECTIONS if _RAYS[sq][d]) for sq in range(64)
)


class MoveGenerator:
    """Generates pseudo-legal target squares on a :class:`Board`.

    ``filter_self_check=True`` is the mode used by the legality filter; it is
    the only mode that generates castling. ``filter_self_check=False`` is the
    attack-scan mode and never consults castling rights or legality, which
    keeps the check detection below from recursing.
    """

    __slots__ = ("_board", "_last_move", "_moved")

    def __init__(
        self,
        board: Board,
        last_move: tuple[Square, Square] | None = None,
        moved: MovedFlags = MovedFlags.NONE,
    ) -> None:
        self._board = board
        self._last_move = last_move
        self._moved = moved

    @classmethod
    def for_position(cls, position: Position) -> MoveGenerator:
        return cls(position.board, position.last_move, position.moved)

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(
        self, sq: Square, filter_self_check: bool = True
    ) -> set[Square]:
        """Targets for the piece on *sq* by movement pattern and occupancy."""
        board = self._board
        kind = board.kind_at(sq)
        side = board.side_at(sq)
        targets: set[Square] = set()

        if kind == PieceKind.EMPTY:
            return targets
        if kind == PieceKind.PAWN:
            self._gen_pawn(sq, side, targets)
        elif kind == PieceKind.KNIGHT:
            self._gen_stepping(sq, side, _KNIGHT_TARGETS[sq], targets)
        elif kind == PieceKind.BISHOP:
            self._gen_sliding(sq, side, DIAGONAL, targets)
        elif kind == PieceKind.ROOK:
            self._gen_sliding(sq, side, ORTHOGONAL, targets)
        elif kind == PieceKind.QUEEN:
            self._gen_sliding(sq, side, ALL_DIRECTIONS, targets)
        elif kind == PieceKind.KING:
            self._gen_stepping(sq, side, _KING_TARGETS[sq], targets)
            if filter_self_check:
                self._gen_castling(sq, side, targets)
        return targets

    # -- Attack detection (public) -----------------------------------------

    def attacked_squares(self, sq: Square) -> set[Square]:
        """Squares the piece on *sq* attacks.

        Same as the unfiltered pseudo-legal set, except that pawns attack
        both forward diagonals whatever stands there and never attack with
        a push.
        """
        board = self._board
        if board.kind_at(sq) != PieceKind.PAWN:
            return self.pseudo_legal_moves(sq, filter_self_check=False)
        return set(self._pawn_diagonals(sq, board.side_at(sq)))

    def is_square_attacked(self, sq: Square, by_side: Side) -> bool:
        """Is *sq* attacked by any piece of *by_side*?"""
        board = self._board
        for origin in board.squares_of(by_side):
            if sq in self.attacked_squares(origin):
                return True
        return False

    def is_in_check(self, side: Side) -> bool:
        """Is *side*'s king attacked by the opponent?"""
        king_sq = self._board.king_square(side)
        return self.is_square_attacked(king_sq, side.opposite)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_sliding(
        self,
        sq: Square,
        side: Side,
        directions: tuple[Direction, ...],
        targets: set[Square],
    ) -> None:
        board = self._board
        rays = _RAYS[sq]
        for direction in directions:
            for to_sq in rays[direction]:
                occupant = board.side_at(to_sq)
                if occupant == Side.NEUTRAL:
                    targets.add(to_sq)
                    continue
                if occupant != side:
                    targets.add(to_sq)
                break

    def _gen_stepping(
        self,
        sq: Square,
        side: Side,
        table: tuple[Square, ...],
        targets: set[Square],
    ) -> None:
        board = self._board
        for to_sq in table:
            if board.side_at(to_sq) != side:
                targets.add(to_sq)

    def _pawn_diagonals(self, sq: Square, side: Side) -> list[Square]:
        ahead = sq + _PAWN_FORWARD[side]
        if not in_bounds(ahead):
            return []
        diagonals: list[Square] = []
        if file_of(sq) > 0:
            diagonals.append(ahead - 1)
        if file_of(sq) < 7:
            diagonals.append(ahead + 1)
        return diagonals

    def _gen_pawn(self, sq: Square, side: Side, targets: set[Square]) -> None:
        board = self._board
        forward = _PAWN_FORWARD[side]

        one_step = sq + forward
        if in_bounds(one_step) and board.is_empty(one_step):
            targets.add(one_step)
            two_step = one_step + forward
            if rank_of(sq) == _PAWN_START_RANK[side] and board.is_empty(two_step):
                targets.add(two_step)

        enemy = side.opposite
        for cap_sq in self._pawn_diagonals(sq, side):
            if board.side_at(cap_sq) == enemy:
                targets.add(cap_sq)

        ep_sq = self._en_passant_target(sq, side)
        if ep_sq is not None:
            targets.add(ep_sq)

    def _en_passant_target(self, sq: Square, side: Side) -> Square | None:
        """Square behind an enemy pawn that just double-stepped beside *sq*."""
        if self._last_move is None:
            return None
        board = self._board
        last_origin, last_target = self._last_move
        if (
            board.kind_at(last_target) != PieceKind.PAWN
            or board.side_at(last_target) != side.opposite
        ):
            return None
        if abs(last_target - last_origin) != 16:
            return None
        if file_of(last_origin) != file_of(last_target):
            return None
        if rank_of(last_target) != rank_of(sq):
            return None
        if abs(file_of(last_target) - file_of(sq)) != 1:
            return None
        return (last_origin + last_target) // 2

    def _gen_castling(self, king_sq: Square, side: Side, targets: set[Square]) -> None:
        home = _KING_HOME.get(side)
        if king_sq != home or self._moved & _KING_FLAG[side]:
            return

        opponent = side.opposite
        if self.is_square_attacked(king_sq, opponent):
            return

        board = self._board
        if not self._moved & _KING_ROOK_FLAG[side] and self._rook_at(home + 3, side):
            f_sq = home + 1
            g_sq = home + 2
            if (
                board.is_empty(f_sq)
                and board.is_empty(g_sq)
                and not self.is_square_attacked(f_sq, opponent)
                and not self.is_square_attacked(g_sq, opponent)
            ):
                targets.add(g_sq)

        if not self._moved & _QUEEN_ROOK_FLAG[side] and self._rook_at(home - 4, side):
            d_sq = home - 1
            c_sq = home - 2
            b_sq = home - 3
            if (
                board.is_empty(d_sq)
                and board.is_empty(c_sq)
                and board.is_empty(b_sq)
                and not self.is_square_attacked(d_sq, opponent)
                and not self.is_square_attacked(c_sq, opponent)
            ):
                targets.add(c_sq)

    def _rook_at(self, sq: Square, side: Side) -> bool:
        board = self._board
        return board.kind_at(sq) == PieceKind.ROOK and board.side_at(sq) == side
