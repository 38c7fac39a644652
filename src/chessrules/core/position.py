"""Position — complete rules state (board + metadata) with simulate/commit."""

from __future__ import annotations

from chessrules.core.board import Board, Snapshot
from chessrules.core.enums import MovedFlags, MoveFlag, PieceKind, Side
from chessrules.core.errors import InvalidPromotion
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1,
    A8,
    E1,
    E8,
    H1,
    H8,
    Square,
    file_of,
    make_square,
    rank_of,
)

DEFAULT_FIFTY_MOVE_LIMIT = 50

PROMOTION_KINDS: frozenset[PieceKind] = frozenset(
    {PieceKind.QUEEN, PieceKind.ROOK, PieceKind.BISHOP, PieceKind.KNIGHT}
)

# Start squares whose departure permanently removes a castling option.
_TRACKED_SQUARES: dict[Square, MovedFlags] = {
    A1: MovedFlags.WHITE_QUEEN_ROOK,
    H1: MovedFlags.WHITE_KING_ROOK,
    A8: MovedFlags.BLACK_QUEEN_ROOK,
    H8: MovedFlags.BLACK_KING_ROOK,
    E1: MovedFlags.WHITE_KING,
    E8: MovedFlags.BLACK_KING,
}

_ROOK_CORNERS: dict[Square, MovedFlags] = {
    sq: flag for sq, flag in _TRACKED_SQUARES.items() if sq not in (E1, E8)
}

_LAST_RANK: dict[Side, int] = {Side.WHITE: 7, Side.BLACK: 0}


class Position:
    """Full rules state: board, side to move, moved flags, last move,
    fifty-move counter, snapshot history and pending promotion.

    :meth:`simulate_move` produces a hypothetical board and never touches
    this object; :meth:`commit_move` performs the full transition.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "moved",
        "last_move",
        "fifty_move_limit",
        "fifty_move_counter",
        "fullmove_number",
        "history",
        "pending_promotion",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Side = Side.WHITE,
        moved: MovedFlags = MovedFlags.NONE,
        last_move: tuple[Square, Square] | None = None,
        fifty_move_limit: int = DEFAULT_FIFTY_MOVE_LIMIT,
        fifty_move_counter: int | None = None,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.moved = moved
        self.last_move = last_move
        self.fifty_move_limit = fifty_move_limit
        self.fifty_move_counter = (
            fifty_move_limit if fifty_move_counter is None else fifty_move_counter
        )
        self.fullmove_number = fullmove_number
        self.history: list[Snapshot] = []
        self.pending_promotion: Square | None = None

    # ── Planning ─────────────────────────────────────────────────────────

    def plan_move(self, origin: Square, target: Square) -> Move:
        """Describe what moving *origin* → *target* does, without mutating.

        No legality check is made; callers validate against legal moves.
        """
        board = self.board
        kind = board.kind_at(origin)
        side = board.side_at(origin)
        captured: Square | None = None if board.is_empty(target) else target

        if kind == PieceKind.KING and abs(target - origin) == 2:
            rank = rank_of(origin)
            if target > origin:
                return Move(
                    origin,
                    target,
                    MoveFlag.CASTLE_KINGSIDE,
                    rook_origin=make_square(7, rank),
                    rook_target=origin + 1,
                )
            return Move(
                origin,
                target,
                MoveFlag.CASTLE_QUEENSIDE,
                rook_origin=make_square(0, rank),
                rook_target=origin - 1,
            )

        if kind == PieceKind.PAWN:
            if rank_of(target) == _LAST_RANK.get(side):
                return Move(origin, target, MoveFlag.PROMOTION, captured)
            if captured is None and file_of(target) != file_of(origin):
                # Diagonal step onto an empty square: the victim sits beside us.
                victim = make_square(file_of(target), rank_of(origin))
                return Move(origin, target, MoveFlag.EN_PASSANT, victim)
            if abs(target - origin) == 16:
                return Move(origin, target, MoveFlag.DOUBLE_PAWN)

        return Move(origin, target, MoveFlag.NORMAL, captured)

    @staticmethod
    def apply_to(board: Board, move: Move) -> None:
        """Perform every relocation/removal of *move* on *board*."""
        board.move_piece(move.origin, move.target)
        if move.flag == MoveFlag.EN_PASSANT and move.captured_square is not None:
            board.remove(move.captured_square)
        if move.rook_origin is not None and move.rook_target is not None:
            board.move_piece(move.rook_origin, move.rook_target)

    # ── Core move operations ─────────────────────────────────────────────

    def simulate_move(
        self, origin: Square, target: Square, into: Board | None = None
    ) -> Board:
        """Return the board after *origin* → *target*, leaving ``self`` intact.

        When *into* is given it is overwritten and reused as scratch space.
        Counters, history, turn and flags are never touched.
        """
        move = self.plan_move(origin, target)
        scratch = into if into is not None else Board()
        scratch.copy_from(self.board)
        self.apply_to(scratch, move)
        return scratch

    def commit_move(self, origin: Square, target: Square) -> Move:
        """Apply *origin* → *target* with all bookkeeping and flip the turn.

        Caller is responsible for legality check.
        """
        move = self.plan_move(origin, target)
        is_pawn_move = self.board.kind_at(origin) == PieceKind.PAWN
        mover = self.side_to_move

        self.apply_to(self.board, move)

        self.moved |= _TRACKED_SQUARES.get(origin, MovedFlags.NONE)
        if move.rook_origin is not None:
            self.moved |= _TRACKED_SQUARES.get(move.rook_origin, MovedFlags.NONE)
        if move.captured_square is not None:
            self.moved |= _ROOK_CORNERS.get(move.captured_square, MovedFlags.NONE)

        if move.is_capture or is_pawn_move:
            self.fifty_move_counter = self.fifty_move_limit
        else:
            self.fifty_move_counter = max(self.fifty_move_counter - 1, 0)

        self.history.append(self.board.snapshot())
        self.last_move = (origin, target)

        if move.flag == MoveFlag.PROMOTION:
            self.pending_promotion = target

        if mover == Side.BLACK:
            self.fullmove_number += 1
        self.side_to_move = mover.opposite
        return move

    def promote(self, kind: PieceKind) -> Square:
        """Replace the pending pawn with *kind*; returns the promotion square."""
        sq = self.pending_promotion
        if sq is None:
            raise InvalidPromotion("No promotion is pending")
        if kind not in PROMOTION_KINDS:
            raise InvalidPromotion(f"Cannot promote to {kind!r}")
        self.board[sq] = Piece(kind, self.board.side_at(sq))
        self.pending_promotion = None
        return sq

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy, history included."""
        pos = Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            moved=self.moved,
            last_move=self.last_move,
            fifty_move_limit=self.fifty_move_limit,
            fifty_move_counter=self.fifty_move_counter,
            fullmove_number=self.fullmove_number,
        )
        pos.history = self.history.copy()
        pos.pending_promotion = self.pending_promotion
        return pos

    def has_moved(self, flag: MovedFlags) -> bool:
        return bool(self.moved & flag)
