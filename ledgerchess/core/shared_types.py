"""
Type definitions used across layers

The integer values are the codes stored in the ledger and returned to callers, so they must never be renumbered.
"""

from enum import IntEnum


class Status(IntEnum):
    PENDING = 0
    CONTINUING = 1
    STALEMATE = 2
    VICTORY = 3
    # Only ever returned by a move attempt. Never written to a game record.
    ILLEGAL_MOVE = 4


PERSISTED_STATUSES: frozenset[Status] = frozenset(
    {Status.PENDING, Status.CONTINUING, Status.STALEMATE, Status.VICTORY}
)
TERMINAL_STATUSES: frozenset[Status] = frozenset({Status.STALEMATE, Status.VICTORY})


class Color(IntEnum):
    WHITE = 1
    BLACK = 2


# Code found in `victor` before anyone has won, and in `turn_color` of a record that was never created.
NO_COLOR = 0


class PieceType(IntEnum):
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
