"""
Read accessors over the stored games. None of these write to the ledger.

Asking for a game number that was never created gives zero values (zero addresses, status 0, empty board),
exactly like reading an unset key. Game number 0 itself never exists.
"""

from ledgerchess.chess.codec import decode
from ledgerchess.chess.legacy import SquareRecord, square_records
from ledgerchess.core.models import Address, GameId, GameInfo
from ledgerchess.db.repository import Ledger
from ledgerchess.services.session import current_player


class GameQueries:
    def __init__(self, ledger: Ledger) -> None:
        self.ledger = ledger

    def total_games(self) -> int:
        return self.ledger.total_games()

    def game_by_number(self, game_id: GameId) -> GameInfo:
        record = self.ledger.get_game(game_id)
        return GameInfo(
            player_one=record.player_one,
            player_two=record.player_two,
            status=int(record.status),
            victor=int(record.victor),
        )

    def board_state_by_game_number(self, game_id: GameId) -> int:
        return self.ledger.get_game(game_id).board_state

    def get_turn_color(self, game_id: GameId) -> int:
        return int(self.ledger.get_game(game_id).turn_color)

    def get_current_player(self, game_id: GameId) -> Address:
        return current_player(self.ledger.get_game(game_id))

    def game_pieces_by_game_number(self, game_id: GameId) -> list[SquareRecord]:
        """The board as the old per-square records (color, row, col, piece_type), derived from the packed board."""
        board_state = self.ledger.get_game(game_id).board_state
        return square_records(decode(board_state))
