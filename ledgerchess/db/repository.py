"""Protocol for the key-value ledger (implemented in memory and with SQLAlchemy)"""

from contextlib import AbstractContextManager
from typing import Protocol

from ledgerchess.core.models import GameId, GameRecord


class Ledger(Protocol):
    """
    Persistence layer orchestration
    ----

    Holds three things: the game counter, the pending game slot (0 = nothing pending) and the game records by number.
    Reads of anything never written return zero values, never an error.

    Writes must happen inside `transaction()`: all writes of one block take effect together, or none do when the block raises.
    """

    def total_games(self) -> int:
        """Number of games ever created (= the highest game number in use)."""
        ...

    def set_total_games(self, value: int) -> None: ...

    def pending_game(self) -> GameId:
        """Game number waiting for a second player, or 0."""
        ...

    def set_pending_game(self, game_id: GameId) -> None: ...

    def get_game(self, game_id: GameId) -> GameRecord:
        """Record stored under the game number, or an all-default record."""
        ...

    def put_game(self, game_id: GameId, game: GameRecord) -> None:
        """Store (create or overwrite) the record for the game number."""
        ...

    def transaction(self) -> AbstractContextManager[None]:
        """All-or-nothing scope for the writes of one mutating call."""
        ...
