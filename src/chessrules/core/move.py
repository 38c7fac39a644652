"""Move value object: a committed or simulated relocation plan."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import MoveFlag
from chessrules.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable plan of everything a move does to the board.

    Built from the pre-move position by :meth:`Position.plan_move`, so that
    side effects (en-passant removal, castling rook slide) are known before
    anything is mutated.
    """

    origin: Square
    target: Square
    flag: MoveFlag = MoveFlag.NORMAL
    captured_square: Square | None = None
    rook_origin: Square | None = None
    rook_target: Square | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured_square is not None

    @property
    def is_castling(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.origin)}{square_name(self.target)}"
