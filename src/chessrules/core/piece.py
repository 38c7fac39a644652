"""Piece value object.

:attr:`Piece.symbol` is a display helper for front ends; the engine itself
only reads kinds, sides and FEN characters.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceKind, Side

# FEN character ↔ (Side, PieceKind)
_CHAR_MAP: dict[str, tuple[Side, PieceKind]] = {
    "P": (Side.WHITE, PieceKind.PAWN),
    "N": (Side.WHITE, PieceKind.KNIGHT),
    "B": (Side.WHITE, PieceKind.BISHOP),
    "R": (Side.WHITE, PieceKind.ROOK),
    "Q": (Side.WHITE, PieceKind.QUEEN),
    "K": (Side.WHITE, PieceKind.KING),
    "p": (Side.BLACK, PieceKind.PAWN),
    "n": (Side.BLACK, PieceKind.KNIGHT),
    "b": (Side.BLACK, PieceKind.BISHOP),
    "r": (Side.BLACK, PieceKind.ROOK),
    "q": (Side.BLACK, PieceKind.QUEEN),
    "k": (Side.BLACK, PieceKind.KING),
}

_UNICODE: dict[tuple[Side, PieceKind], str] = {
    (Side.WHITE, PieceKind.PAWN): "♙",
    (Side.WHITE, PieceKind.KNIGHT): "♘",
    (Side.WHITE, PieceKind.BISHOP): "♗",
    (Side.WHITE, PieceKind.ROOK): "♖",
    (Side.WHITE, PieceKind.QUEEN): "♕",
    (Side.WHITE, PieceKind.KING): "♔",
    (Side.BLACK, PieceKind.PAWN): "♟",
    (Side.BLACK, PieceKind.KNIGHT): "♞",
    (Side.BLACK, PieceKind.BISHOP): "♝",
    (Side.BLACK, PieceKind.ROOK): "♜",
    (Side.BLACK, PieceKind.QUEEN): "♛",
    (Side.BLACK, PieceKind.KING): "♚",
}

_FEN_CHARS: dict[tuple[Side, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable (kind, side) pair.

    Either both fields are real or the piece is :data:`EMPTY`
    (``PieceKind.EMPTY`` with ``Side.NEUTRAL``); mixed pairs are rejected.
    """

    kind: PieceKind
    side: Side

    def __post_init__(self) -> None:
        if (self.kind == PieceKind.EMPTY) != (self.side == Side.NEUTRAL):
            raise ValueError(f"Mismatched piece: {self.kind.name}/{self.side.name}")

    @property
    def is_empty(self) -> bool:
        return self.kind == PieceKind.EMPTY

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black, '.' = empty)."""
        if self.is_empty:
            return "."
        return _FEN_CHARS[(self.side, self.kind)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            side, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, side)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞ (a space for an empty square)."""
        if self.is_empty:
            return " "
        return _UNICODE[(self.side, self.kind)]


EMPTY = Piece(PieceKind.EMPTY, Side.NEUTRAL)
