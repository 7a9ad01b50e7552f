"""Ledger kept in process memory. Used by tests and for running without a database."""

import logging
from contextlib import contextmanager
from dataclasses import replace
from typing import Generator

from ledgerchess.core.models import GameId, GameRecord

logger = logging.getLogger(__name__)


class InMemoryLedger:
    """
    Data stored in plain dictionaries.

    Stored records are never changed in place (put_game() replaces them), so a transaction only has to remember
    the records it overwrites. If the block raises, those are put back together with the two counters.
    """

    def __init__(self) -> None:
        self._total_games = 0
        self._pending_game: GameId = 0
        self._games: dict[GameId, GameRecord] = {}
        # game number -> record before the open transaction first overwrote it (None: did not exist)
        self._undo: dict[GameId, GameRecord | None] | None = None

    def total_games(self) -> int:
        return self._total_games

    def set_total_games(self, value: int) -> None:
        self._total_games = value

    def pending_game(self) -> GameId:
        return self._pending_game

    def set_pending_game(self, game_id: GameId) -> None:
        self._pending_game = game_id

    def get_game(self, game_id: GameId) -> GameRecord:
        """Hand out a copy, so callers only change the ledger through put_game()."""
        stored = self._games.get(game_id)
        return replace(stored) if stored is not None else GameRecord()

    def put_game(self, game_id: GameId, game: GameRecord) -> None:
        if self._undo is not None and game_id not in self._undo:
            self._undo[game_id] = self._games.get(game_id)
        self._games[game_id] = replace(game)

    @contextmanager
    def transaction(self) -> Generator[None, None, None]:
        counters = (self._total_games, self._pending_game)
        outer_undo = self._undo
        self._undo = {}
        try:
            yield
        except BaseException:
            self._total_games, self._pending_game = counters
            for game_id, previous in self._undo.items():
                if previous is None:
                    self._games.pop(game_id, None)
                else:
                    self._games[game_id] = previous
            logger.warning("Transaction aborted, ledger restored to its previous state")
            raise
        else:
            # a nested block that succeeded still belongs to the enclosing one
            if outer_undo is not None:
                for game_id, previous in self._undo.items():
                    outer_undo.setdefault(game_id, previous)
        finally:
            self._undo = outer_undo

    def clear(self) -> None:
        """Forget everything (useful in between tests)"""
        self._total_games = 0
        self._pending_game = 0
        self._games.clear()
        self._undo = None
