"""BoardState — classification of a position after a move."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import BoardStateKind, Side

_SIDED: frozenset[BoardStateKind] = frozenset(
    {
        BoardStateKind.CHECK,
        BoardStateKind.CHECKMATE,
        BoardStateKind.PENDING_PROMOTION,
    }
)
_TERMINAL: frozenset[BoardStateKind] = frozenset(
    {
        BoardStateKind.CHECKMATE,
        BoardStateKind.DRAW_BY_FIFTY_MOVE,
        BoardStateKind.DRAW_BY_STALEMATE,
        BoardStateKind.DRAW_BY_REPETITION,
    }
)
_DRAWS: frozenset[BoardStateKind] = frozenset(
    {
        BoardStateKind.DRAW_BY_FIFTY_MOVE,
        BoardStateKind.DRAW_BY_STALEMATE,
        BoardStateKind.DRAW_BY_REPETITION,
    }
)


@dataclass(frozen=True, slots=True)
class BoardState:
    """Tagged result: a :class:`BoardStateKind` plus the side it concerns.

    ``CHECK`` / ``CHECKMATE`` carry the side whose king is attacked,
    ``PENDING_PROMOTION`` the side whose pawn awaits a piece. Every other
    variant carries ``Side.NEUTRAL``. Use the named constructors.
    """

    kind: BoardStateKind
    side: Side = Side.NEUTRAL

    def __post_init__(self) -> None:
        if (self.kind in _SIDED) == (self.side == Side.NEUTRAL):
            raise ValueError(f"Invalid board state: {self.kind.name}/{self.side.name}")

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def default(cls) -> BoardState:
        return cls(BoardStateKind.DEFAULT)

    @classmethod
    def check(cls, side: Side) -> BoardState:
        return cls(BoardStateKind.CHECK, side)

    @classmethod
    def checkmate(cls, side: Side) -> BoardState:
        return cls(BoardStateKind.CHECKMATE, side)

    @classmethod
    def draw_by_fifty_move(cls) -> BoardState:
        return cls(BoardStateKind.DRAW_BY_FIFTY_MOVE)

    @classmethod
    def draw_by_stalemate(cls) -> BoardState:
        return cls(BoardStateKind.DRAW_BY_STALEMATE)

    @classmethod
    def draw_by_repetition(cls) -> BoardState:
        return cls(BoardStateKind.DRAW_BY_REPETITION)

    @classmethod
    def pending_promotion(cls, side: Side) -> BoardState:
        return cls(BoardStateKind.PENDING_PROMOTION, side)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_terminal(self) -> bool:
        return self.kind in _TERMINAL

    @property
    def is_draw(self) -> bool:
        return self.kind in _DRAWS

    @property
    def winner(self) -> Side | None:
        """The mating side for ``CHECKMATE``, otherwise ``None``."""
        if self.kind == BoardStateKind.CHECKMATE:
            return self.side.opposite
        return None

    def __str__(self) -> str:
        name = self.kind.name.lower()
        if self.side == Side.NEUTRAL:
            return name
        return f"{name}({self.side!s})"
