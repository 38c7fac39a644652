"""FEN parsing and serialization for position setup."""

from __future__ import annotations

import logging

from chessrules.core.board import Board
from chessrules.core.enums import MovedFlags, PieceKind, Side
from chessrules.core.piece import Piece
from chessrules.core.position import DEFAULT_FIFTY_MOVE_LIMIT, Position
from chessrules.core.types import Square, make_square, parse_square, rank_of, square_name

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# Castling letter → flags that must be set when the letter is absent.
_CASTLING_LETTERS: dict[str, MovedFlags] = {
    "K": MovedFlags.WHITE_KING_ROOK,
    "Q": MovedFlags.WHITE_QUEEN_ROOK,
    "k": MovedFlags.BLACK_KING_ROOK,
    "q": MovedFlags.BLACK_QUEEN_ROOK,
}
_KING_FLAGS: dict[Side, MovedFlags] = {
    Side.WHITE: MovedFlags.WHITE_KING,
    Side.BLACK: MovedFlags.BLACK_KING,
}


def position_from_fen(fen: str, fifty_move_limit: int = DEFAULT_FIFTY_MOVE_LIMIT) -> Position:
    """Parse a FEN string into a :class:`Position`.

    The castling field becomes has-moved flags, the en-passant field becomes
    the double pawn advance that produced it, and the halfmove clock is
    subtracted from *fifty_move_limit*.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                skip = int(ch)
                if not (1 <= skip <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += skip
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    for side in (Side.WHITE, Side.BLACK):
        if len(board.pieces(side, PieceKind.KING)) != 1:
            raise ValueError(f"FEN must contain exactly one {side.name} king: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side_to_move = Side.WHITE
    elif side_part == "b":
        side_to_move = Side.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    moved = MovedFlags.NONE
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            if ch not in _CASTLING_LETTERS or ch in seen:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
    present = set() if castling_part == "-" else set(castling_part)
    for letter, flag in _CASTLING_LETTERS.items():
        if letter not in present:
            moved |= flag
    if not present & {"K", "Q"}:
        moved |= MovedFlags.WHITE_KING
    if not present & {"k", "q"}:
        moved |= MovedFlags.BLACK_KING

    # 4. En passant
    last_move: tuple[Square, Square] | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_ep_rank = 5 if side_to_move == Side.WHITE else 2
        if rank_of(ep) != expected_ep_rank:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        if side_to_move == Side.WHITE:
            last_move = (ep + 8, ep - 8)
        else:
            last_move = (ep - 8, ep + 8)

    # 5–6. Clocks (optional)
    halfmove = 0
    if len(parts) > 4:
        halfmove = int(parts[4])
        if halfmove < 0:
            raise ValueError(f"Invalid FEN halfmove clock: {parts[4]!r}")

    fullmove = 1
    if len(parts) > 5:
        fullmove = int(parts[5])
        if fullmove < 1:
            raise ValueError(f"Invalid FEN fullmove number: {parts[5]!r}")

    _LOGGER.debug("Loaded position from FEN %r", fen)
    return Position(
        board=board,
        side_to_move=side_to_move,
        moved=moved,
        last_move=last_move,
        fifty_move_limit=fifty_move_limit,
        fifty_move_counter=max(fifty_move_limit - halfmove, 0),
        fullmove_number=fullmove,
    )


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.board[make_square(file, rank)]
            if piece.is_empty:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.side_to_move == Side.WHITE else "b"

    # 3. Castling
    castling_str = ""
    for letter, flag in _CASTLING_LETTERS.items():
        king_flag = _KING_FLAGS[Side.WHITE if letter.isupper() else Side.BLACK]
        if not pos.moved & (flag | king_flag):
            castling_str += letter
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = "-"
    if pos.last_move is not None:
        origin, target = pos.last_move
        if pos.board.kind_at(target) == PieceKind.PAWN and abs(target - origin) == 16:
            ep_str = square_name((origin + target) // 2)

    halfmove = pos.fifty_move_limit - pos.fifty_move_counter
    return f"{board_str} {side_str} {castling_str} {ep_str} {halfmove} {pos.fullmove_number}"
