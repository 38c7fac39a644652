"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Side(IntEnum):
    """Owner of a square. ``NEUTRAL`` only ever pairs with an empty square."""

    WHITE = 0
    BLACK = 1
    NEUTRAL = 2

    @property
    def opposite(self) -> Side:
        if self == Side.NEUTRAL:
            return Side.NEUTRAL
        return Side(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece kinds, ``EMPTY`` marks a vacant square."""

    KING = 0
    QUEEN = 1
    ROOK = 2
    BISHOP = 3
    KNIGHT = 4
    PAWN = 5
    EMPTY = 6


class Direction(IntEnum):
    """The eight ray/step directions, as seen from White's side."""

    N = 0
    S = 1
    E = 2
    W = 3
    NE = 4
    NW = 5
    SE = 6
    SW = 7


class MoveFlag(IntEnum):
    """Special move classification."""

    NORMAL = 0
    DOUBLE_PAWN = 1
    EN_PASSANT = 2
    CASTLE_KINGSIDE = 3
    CASTLE_QUEENSIDE = 4
    PROMOTION = 5


class MovedFlags(IntFlag):
    """Has-moved bits for the pieces that gate castling.

    Bits are only ever added: once a king or rook leaves its start square
    (or a rook is captured there) the flag stays set for the rest of the game.
    """

    NONE = 0
    WHITE_KING_ROOK = auto()
    WHITE_QUEEN_ROOK = auto()
    BLACK_KING_ROOK = auto()
    BLACK_QUEEN_ROOK = auto()
    WHITE_KING = auto()
    BLACK_KING = auto()

    WHITE_ALL = WHITE_KING_ROOK | WHITE_QUEEN_ROOK | WHITE_KING
    BLACK_ALL = BLACK_KING_ROOK | BLACK_QUEEN_ROOK | BLACK_KING


class BoardStateKind(IntEnum):
    """Tag of a :class:`~chessrules.core.board_state.BoardState`."""

    DEFAULT = 0
    CHECK = 1
    CHECKMATE = 2
    DRAW_BY_FIFTY_MOVE = 3
    DRAW_BY_STALEMATE = 4
    DRAW_BY_REPETITION = 5
    PENDING_PROMOTION = 6
