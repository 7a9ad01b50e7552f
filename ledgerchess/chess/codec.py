"""
Board codec: packs the 64 squares of a Board into one 256-bit integer, and back.

Layout
---
* square index = row * 8 + col, the square's field starts at bit index * 4
* bits 0-2 of a field: piece type code (1 = pawn ... 6 = king, 0 = empty square)
* bit 3 of a field: color (0 = white, 1 = black), only set when the square is occupied

The layout is the stable wire format read by anything outside this service, so it must not change.
The side to move is NOT part of the value; `decode` tags the board with the turn it is given.
"""

import re

from ledgerchess.chess.board import Board
from ledgerchess.chess.pieces import Piece
from ledgerchess.chess.square import ALL_SQUARES, Square
from ledgerchess.core.exceptions import BoardEncodingError
from ledgerchess.core.shared_types import Color, PieceType

FIELD_BITS = 4
TYPE_MASK = 0b0111
COLOR_BIT = 0b1000
FIELD_MASK = TYPE_MASK | COLOR_BIT

BOARD_STATE_BITS = FIELD_BITS * len(ALL_SQUARES)
MAX_BOARD_STATE = (1 << BOARD_STATE_BITS) - 1
HEX_DIGITS = BOARD_STATE_BITS // 4

_VALID_TYPE_CODES = frozenset(int(piece_type) for piece_type in PieceType)
_HEX_DIGITS_PATTERN = re.compile(rf"[0-9a-fA-F]{{1,{HEX_DIGITS}}}")


def encode(board: Board) -> int:
    """Pack every occupied square of the board. Empty squares keep an all-zero field."""
    value = 0
    for square, piece in board.position.items():
        value |= _encode_piece(square, piece) << (square.index * FIELD_BITS)
    return value


def decode(value: int, turn: Color = Color.WHITE) -> Board:
    """Rebuild the board from a packed value. Raises BoardEncodingError for anything `encode` could not have produced."""
    _check_range(value)
    try:
        side_to_move = Color(turn)
    except ValueError as exc:
        raise BoardEncodingError(f"Invalid turn color code {turn!r}.") from exc

    position: dict[Square, Piece] = {}
    for square in ALL_SQUARES:
        piece = _decode_field(square, _field(value, square))
        if piece is not None:
            position[square] = piece
    return Board(position, side_to_move)


def field_at(value: int, square: Square) -> int:
    """Raw 4-bit field of a single square."""
    _check_range(value)
    if not square.is_within_bounds():
        raise BoardEncodingError(f"Square {square} is not on the board.")
    return _field(value, square)


def to_hex(value: int) -> str:
    """Fixed width (64 digits), lowercase, no prefix."""
    _check_range(value)
    return f"{value:0{HEX_DIGITS}x}"


def from_hex(text: str) -> int:
    """Inverse of `to_hex`. An optional 0x prefix is accepted."""
    digits = text[2:] if text[:2].lower() == "0x" else text
    # int(..., 16) alone would also take signs, whitespace and underscores
    if _HEX_DIGITS_PATTERN.fullmatch(digits) is None:
        raise BoardEncodingError(
            f"Board state must be 1 to {HEX_DIGITS} hex digits, got {text!r}."
        )
    value = int(digits, 16)
    _check_range(value)
    return value


# --- helpers ---
def _check_range(value: int) -> None:
    # bool is an int subclass, but True is never a board
    if isinstance(value, bool) or not isinstance(value, int):
        raise BoardEncodingError(
            f"Board state must be an integer, got {type(value).__name__}."
        )
    if not 0 <= value <= MAX_BOARD_STATE:
        raise BoardEncodingError(
            f"Board state does not fit in {BOARD_STATE_BITS} unsigned bits."
        )


def _field(value: int, square: Square) -> int:
    return (value >> (square.index * FIELD_BITS)) & FIELD_MASK


def _encode_piece(square: Square, piece: Piece) -> int:
    if not square.is_within_bounds():
        raise BoardEncodingError(f"Square {square} is not on the board.")
    if piece.type not in _VALID_TYPE_CODES:
        raise BoardEncodingError(f"Unknown piece type {piece.type!r} on {square}.")
    if piece.color not in (Color.WHITE, Color.BLACK):
        raise BoardEncodingError(f"Unknown piece color {piece.color!r} on {square}.")
    color_bit = COLOR_BIT if piece.color == Color.BLACK else 0
    return int(piece.type) | color_bit


def _decode_field(square: Square, field: int) -> Piece | None:
    type_code = field & TYPE_MASK
    if type_code == 0:
        if field & COLOR_BIT:
            raise BoardEncodingError(
                f"Empty square {square.to_algebraic()} carries a color bit."
            )
        return None
    if type_code not in _VALID_TYPE_CODES:
        raise BoardEncodingError(
            f"Invalid piece type code {type_code} on {square.to_algebraic()}."
        )
    color = Color.BLACK if field & COLOR_BIT else Color.WHITE
    return Piece(PieceType(type_code), color)
