"""
Boundary layer data model(s).

These objects are what the ledger stores and what the services read and write.
(Decouples the storage specific representation (SQL rows, in-memory dicts) from the services that run the games.)
"""

from dataclasses import dataclass
from typing import NamedTuple

from ledgerchess.core.shared_types import NO_COLOR, Status

# Type aliases to make GameRecord easier to read
Address = str
GameId = int

# Callers are identified by opaque address strings. An unset player slot holds the zero address.
ZERO_ADDRESS: Address = "0x" + "0" * 40


@dataclass
class GameRecord:
    """
    Everything the ledger knows about one game.

    The defaults double as the record returned for a game number that was never created,
    so a reader cannot tell "missing" apart from "all zero" (same as reading an unset key from the ledger).
    """

    player_one: Address = ZERO_ADDRESS
    player_two: Address = ZERO_ADDRESS
    status: int = Status.PENDING
    victor: int = NO_COLOR
    turn_color: int = NO_COLOR
    board_state: int = 0


class GameInfo(NamedTuple):
    """Read-only summary returned by `game_by_number`."""

    player_one: Address
    player_two: Address
    status: int
    victor: int
