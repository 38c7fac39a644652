"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from typing import TypeAlias

from chessrules.core.enums import PieceKind, Side
from chessrules.core.errors import InternalConsistencyError
from chessrules.core.piece import EMPTY, Piece
from chessrules.core.types import Square, make_square

# (kinds, sides) pair captured after each committed move.
Snapshot: TypeAlias = tuple[tuple[PieceKind, ...], tuple[Side, ...]]

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 64-square board stored as parallel kind/side arrays.

    King squares are cached on every write so lookups never scan the board.
    """

    __slots__ = ("_kinds", "_sides", "_king_squares")

    def __init__(self) -> None:
        self._kinds: list[PieceKind] = [PieceKind.EMPTY] * 64
        self._sides: list[Side] = [Side.NEUTRAL] * 64
        # [side] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None, None]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece:
        kind = self._kinds[sq]
        if kind == PieceKind.EMPTY:
            return EMPTY
        return Piece(kind, self._sides[sq])

    def __setitem__(self, sq: Square, piece: Piece) -> None:
        old_kind = self._kinds[sq]
        if old_kind == PieceKind.KING:
            old_side = int(self._sides[sq])
            if self._king_squares[old_side] == sq:
                self._king_squares[old_side] = None

        self._kinds[sq] = piece.kind
        self._sides[sq] = piece.side

        if piece.kind == PieceKind.KING:
            self._king_squares[int(piece.side)] = sq

    def kind_at(self, sq: Square) -> PieceKind:
        return self._kinds[sq]

    def side_at(self, sq: Square) -> Side:
        return self._sides[sq]

    def is_empty(self, sq: Square) -> bool:
        return self._kinds[sq] == PieceKind.EMPTY

    # -- Query helpers ------------------------------------------------------

    @property
    def kinds(self) -> tuple[PieceKind, ...]:
        """Read-only view of the piece kind on every square."""
        return tuple(self._kinds)

    @property
    def sides(self) -> tuple[Side, ...]:
        """Read-only view of the owning side of every square."""
        return tuple(self._sides)

    def snapshot(self) -> Snapshot:
        return (tuple(self._kinds), tuple(self._sides))

    def squares_of(self, side: Side) -> list[Square]:
        """All squares occupied by *side*."""
        sides = self._sides
        return [sq for sq in range(64) if sides[sq] == side]

    def pieces(self, side: Side, kind: PieceKind) -> list[Square]:
        """Squares occupied by *side*'s *kind*."""
        kinds = self._kinds
        sides = self._sides
        return [sq for sq in range(64) if kinds[sq] == kind and sides[sq] == side]

    def king_square(self, side: Side) -> Square:
        """Return the cached king square for *side*."""
        if side == Side.NEUTRAL:
            raise InternalConsistencyError("Neutral side has no king")
        sq = self._king_squares[int(side)]
        if sq is None:
            raise InternalConsistencyError(f"No {side.name} king on board")
        return sq

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, origin: Square, target: Square) -> None:
        """Relocate the occupant of *origin* onto *target*, emptying *origin*."""
        self[target] = self[origin]
        self[origin] = EMPTY

    def remove(self, sq: Square) -> None:
        self[sq] = EMPTY

    def copy(self) -> Board:
        b = Board()
        b.copy_from(self)
        return b

    def copy_from(self, other: Board) -> None:
        """Overwrite this board in place with the contents of *other*."""
        self._kinds[:] = other._kinds
        self._sides[:] = other._sides
        self._king_squares[:] = other._king_squares

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[make_square(f, 1)] = Piece(PieceKind.PAWN, Side.WHITE)
            b[make_square(f, 6)] = Piece(PieceKind.PAWN, Side.BLACK)

        for f, kind in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(kind, Side.WHITE)
            b[make_square(f, 7)] = Piece(kind, Side.BLACK)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._kinds == other._kinds and self._sides == other._sides

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = [str(self[make_square(file, rank)]) for file in range(8)]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
