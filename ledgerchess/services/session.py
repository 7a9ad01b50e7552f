"""
The session state machine: everything that happens around a single move.

PENDING --(join)--> CONTINUING --(legal move)--> CONTINUING
                               --(mate)--------> VICTORY    (terminal)
                               --(stalemate)---> STALEMATE  (terminal)

Rejected moves come back as Status.ILLEGAL_MOVE and never touch the ledger.
"""

import logging

from ledgerchess.chess.codec import decode, encode
from ledgerchess.chess.rules import Continuing, Illegal, RulesEngine, Stalemate, Victory
from ledgerchess.chess.square import Square
from ledgerchess.core.models import Address, GameId, GameRecord
from ledgerchess.core.shared_types import TERMINAL_STATUSES, Color, Status
from ledgerchess.db.repository import Ledger

logger = logging.getLogger(__name__)


def current_player(record: GameRecord) -> Address:
    """The player whose turn it is. Player one always has the white pieces."""
    return record.player_one if record.turn_color == Color.WHITE else record.player_two


class SessionStateMachine:
    """Orchestrates one move: authorization, legality (delegated to the rules engine), status transition, persistence."""

    def __init__(self, ledger: Ledger, rules: RulesEngine) -> None:
        self.ledger = ledger
        self.rules = rules

    def play_move(
        self,
        caller: Address,
        game_id: GameId,
        from_row: int,
        from_col: int,
        to_row: int,
        to_col: int,
    ) -> Status:
        """
        Attempt a move for the caller in the given game.
        -----

        1. only the player whose turn it is may move
        2. only a game in progress accepts moves
        3. the rules engine decides legality and the outcome
        4. store the new board / turn, or the final result

        The board is only decoded once the caller and status checks pass. A wrong caller or a game that is not in progress
        gets ILLEGAL_MOVE even when the stored board is corrupt. Past the checks, a board that cannot be decoded raises
        BoardEncodingError, which aborts the transaction (nothing is written).
        """
        with self.ledger.transaction():
            record = self.ledger.get_game(game_id)

            if caller != current_player(record):
                logger.info("Game %d: rejected move by %s, not their turn", game_id, caller)
                return Status.ILLEGAL_MOVE

            if record.status != Status.CONTINUING:
                logger.info(
                    "Game %d: rejected move, %s",
                    game_id,
                    "game is over" if record.status in TERMINAL_STATUSES else "game has not started",
                )
                return Status.ILLEGAL_MOVE

            board = decode(record.board_state, record.turn_color)
            from_square = Square(from_row, from_col)
            to_square = Square(to_row, to_col)

            match self.rules.play(board, from_square, to_square):
                case Continuing(board=new_board):
                    record.board_state = encode(new_board)
                    # the engine's side to move replaces the stored one: the stored field stays the only source of truth
                    record.turn_color = new_board.turn
                    outcome = Status.CONTINUING
                case Victory(winner=winner):
                    record.victor = winner
                    record.status = Status.VICTORY
                    outcome = Status.VICTORY
                case Stalemate():
                    record.status = Status.STALEMATE
                    outcome = Status.STALEMATE
                case Illegal(reason=reason):
                    logger.info("Game %d: rules engine rejected move: %s", game_id, reason)
                    return Status.ILLEGAL_MOVE
                case unexpected:
                    logger.warning(
                        "Game %d: unrecognized rules engine result %r", game_id, unexpected
                    )
                    return Status.ILLEGAL_MOVE

            self.ledger.put_game(game_id, record)
            logger.info(
                "Game %d: %s played %s%s, status %s",
                game_id,
                caller,
                from_square.to_algebraic(),
                to_square.to_algebraic(),
                outcome.name,
            )
            return outcome

