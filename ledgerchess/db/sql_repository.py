"""Implementation of the Ledger using SQLAlchemy"""

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import select
from sqlalchemy.orm import Session

from ledgerchess.chess.codec import from_hex, to_hex
from ledgerchess.core.exceptions import BoardEncodingError, LedgerError
from ledgerchess.core.models import GameId, GameRecord
from ledgerchess.core.shared_types import PERSISTED_STATUSES, Status
from ledgerchess.db.schema import (
    MAX_STORED_GAME_ID,
    PENDING_GAME_KEY,
    TOTAL_GAMES_KEY,
    DBGame,
    DBLedgerSlot,
)

logger = logging.getLogger(__name__)


class SQLLedger:
    """
    Data stored using SQL / methods implemented using SQLAlchemy

    Writes are only flushed to the session. `transaction()` commits them all at once, or rolls all of them back.
    """

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def total_games(self) -> int:
        return self._get_slot(TOTAL_GAMES_KEY)

    def set_total_games(self, value: int) -> None:
        self._set_slot(TOTAL_GAMES_KEY, value)

    def pending_game(self) -> GameId:
        return self._get_slot(PENDING_GAME_KEY)

    def set_pending_game(self, game_id: GameId) -> None:
        self._set_slot(PENDING_GAME_KEY, game_id)

    def get_game(self, game_id: GameId) -> GameRecord:
        """Get game by number. A game that was never stored reads as the default record."""
        game_db = self._fetch_game(game_id)
        if game_db is None:
            return GameRecord()
        return self._to_model(game_db)

    def put_game(self, game_id: GameId, game: GameRecord) -> None:
        game_db = self._fetch_game(game_id)
        if game_db is None:
            game_db = DBGame(id=game_id)
            self.db.add(game_db)
        game_db.player_one = game.player_one
        game_db.player_two = game.player_two
        game_db.status = int(game.status)
        game_db.victor = int(game.victor)
        game_db.turn_color = int(game.turn_color)
        game_db.board_state = to_hex(game.board_state)
        self.db.flush()

    @contextmanager
    def transaction(self) -> Generator[None, None, None]:
        try:
            yield
            self.db.commit()
        except BaseException:
            self.db.rollback()
            logger.warning("Transaction aborted, all ledger writes rolled back")
            raise

    # -- Internal helpers --
    def _get_slot(self, key: str) -> int:
        slot = self.db.get(DBLedgerSlot, key)
        return slot.value if slot is not None else 0

    def _set_slot(self, key: str, value: int) -> None:
        slot = self.db.get(DBLedgerSlot, key)
        if slot is None:
            self.db.add(DBLedgerSlot(key=key, value=value))
        else:
            slot.value = value
        self.db.flush()

    def _fetch_game(self, game_id: GameId) -> DBGame | None:
        if not 0 <= game_id <= MAX_STORED_GAME_ID:
            return None
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGame) -> GameRecord:
        """Convert SQLAlchemy model to data transfer model."""
        try:
            board_state = from_hex(game_db.board_state)
        except BoardEncodingError as exc:
            raise LedgerError(
                f"Stored board of game {game_db.id} is corrupt: {exc}"
            ) from exc
        if game_db.status not in PERSISTED_STATUSES:
            raise LedgerError(f"Stored game {game_db.id} has unknown status {game_db.status}.")
        return GameRecord(
            player_one=game_db.player_one,
            player_two=game_db.player_two,
            status=Status(game_db.status),
            victor=game_db.victor,
            turn_color=game_db.turn_color,
            board_state=board_state,
        )
