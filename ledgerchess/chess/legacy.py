"""
Superseded per-square board layout, kept for migrating old records.

Before the packed `board_state` existed, a game stored one record per square:
(color, row, col, piece_type) with color 1 = white / 2 = black, and (0, row, col, 0) for an empty square.
The packed layout in codec.py is the only live format; nothing here is written to the ledger.
"""

from typing import Iterable

from ledgerchess.chess.board import Board
from ledgerchess.chess.codec import encode
from ledgerchess.chess.pieces import Piece
from ledgerchess.chess.square import ALL_SQUARES, Square
from ledgerchess.core.exceptions import BoardEncodingError
from ledgerchess.core.shared_types import NO_COLOR, Color, PieceType

SquareRecord = tuple[int, int, int, int]


def square_records(board: Board) -> list[SquareRecord]:
    """All 64 squares in row-major order, empty squares included."""
    records: list[SquareRecord] = []
    for square in ALL_SQUARES:
        piece = board.piece(square)
        if piece is None:
            records.append((NO_COLOR, square.row, square.col, 0))
        else:
            records.append((int(piece.color), square.row, square.col, int(piece.type)))
    return records


def board_from_square_records(
    records: Iterable[SquareRecord], turn: Color = Color.WHITE
) -> Board:
    """Rebuild a board from old per-square records. Missing squares are treated as empty."""
    position: dict[Square, Piece] = {}
    seen: set[Square] = set()
    for color, row, col, piece_type in records:
        square = Square(row, col)
        if not square.is_within_bounds():
            raise BoardEncodingError(f"Record for ({row}, {col}) is off the board.")
        if square in seen:
            raise BoardEncodingError(
                f"Two records for square {square.to_algebraic()}."
            )
        seen.add(square)

        # An empty square may come as (0, r, c, 0) or with a stale color left behind.
        if piece_type == 0:
            continue
        try:
            position[square] = Piece(PieceType(piece_type), Color(color))
        except ValueError as exc:
            raise BoardEncodingError(
                f"Cannot interpret record {(color, row, col, piece_type)!r}."
            ) from exc
    return Board(position, turn)


def migrate_square_records(records: Iterable[SquareRecord]) -> int:
    """Convert an old per-square board straight into the packed board_state."""
    return encode(board_from_square_records(records))
