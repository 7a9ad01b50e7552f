"""Game numbers and the single pending game: creating games and pairing players."""

import logging

from ledgerchess.chess.codec import encode
from ledgerchess.chess.rules import RulesEngine
from ledgerchess.core.models import Address, GameId, GameRecord
from ledgerchess.core.shared_types import NO_COLOR, Status
from ledgerchess.db.repository import Ledger

logger = logging.getLogger(__name__)

NO_PENDING_GAME: GameId = 0


class GameRegistry:
    """Owns the game counter and the pending game slot."""

    def __init__(self, ledger: Ledger, rules: RulesEngine) -> None:
        self.ledger = ledger
        self.rules = rules

    def create_or_join(self, caller: Address) -> GameId:
        """
        Either creates a new game or joins the pending one. Returns the game number.
        ----

        * nothing pending --> new game with the caller as player one (white), which becomes the pending game
        * a game is pending --> the caller becomes player two (black) and the game starts

        NOTE: nothing stops a caller from joining the game they created themselves.
        """
        with self.ledger.transaction():
            pending_game = self.ledger.pending_game()
            if pending_game == NO_PENDING_GAME:
                game_id = self._next_game_number()
                self._create_game(game_id, caller)
                self.ledger.set_pending_game(game_id)
                return game_id

            self._join_game(pending_game, caller)
            return pending_game

    # -- Internal helpers --
    def _next_game_number(self) -> GameId:
        game_id = self.ledger.total_games() + 1
        self.ledger.set_total_games(game_id)
        return game_id

    def _create_game(self, game_id: GameId, caller: Address) -> None:
        board = self.rules.starting_board()
        record = GameRecord(
            player_one=caller,
            status=Status.PENDING,
            victor=NO_COLOR,
            turn_color=board.turn,
            board_state=encode(board),
        )
        self.ledger.put_game(game_id, record)
        logger.info("Game %d created by %s, waiting for a second player", game_id, caller)

    def _join_game(self, game_id: GameId, caller: Address) -> None:
        record = self.ledger.get_game(game_id)
        # join as player two
        record.player_two = caller
        record.status = Status.CONTINUING
        self.ledger.put_game(game_id, record)
        # empty out the pending slot
        self.ledger.set_pending_game(NO_PENDING_GAME)
        logger.info("%s joined game %d, game started", caller, game_id)
