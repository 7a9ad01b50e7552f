"""Unit tests for ledgerchess/services/queries.py"""

import pytest

from ledgerchess.chess.board import Board
from ledgerchess.chess.codec import encode
from ledgerchess.chess.legacy import square_records
from ledgerchess.chess.rules import PythonChessRules
from ledgerchess.core.exceptions import BoardEncodingError
from ledgerchess.core.models import ZERO_ADDRESS, GameInfo
from ledgerchess.core.shared_types import Color, Status
from ledgerchess.db.memory import InMemoryLedger
from ledgerchess.services.queries import GameQueries
from ledgerchess.services.registry import GameRegistry
from ledgerchess.services.session import SessionStateMachine

ALICE = "0x" + "a" * 40
BOB = "0x" + "b" * 40


@pytest.mark.parametrize("game_id", [0, 1, 42, (1 << 256) - 1])
def test_unknown_games_read_as_zero(memory_ledger: InMemoryLedger, game_id: int) -> None:
    queries = GameQueries(memory_ledger)
    assert queries.total_games() == 0
    assert queries.game_by_number(game_id) == GameInfo(ZERO_ADDRESS, ZERO_ADDRESS, 0, 0)
    assert queries.board_state_by_game_number(game_id) == 0
    assert queries.get_turn_color(game_id) == 0
    assert queries.get_current_player(game_id) == ZERO_ADDRESS


def test_game_by_number_returns_plain_ints(
    memory_ledger: InMemoryLedger, rules: PythonChessRules
) -> None:
    registry = GameRegistry(memory_ledger, rules)
    registry.create_or_join(ALICE)
    queries = GameQueries(memory_ledger)

    info = queries.game_by_number(1)
    assert info == GameInfo(ALICE, ZERO_ADDRESS, 0, 0)
    assert type(info.status) is int
    assert type(info.victor) is int

    registry.create_or_join(BOB)
    assert queries.game_by_number(1) == GameInfo(ALICE, BOB, 1, 0)
    assert queries.total_games() == 1


def test_current_player_follows_the_moves(
    memory_ledger: InMemoryLedger, rules: PythonChessRules
) -> None:
    registry = GameRegistry(memory_ledger, rules)
    registry.create_or_join(ALICE)
    registry.create_or_join(BOB)
    queries = GameQueries(memory_ledger)
    machine = SessionStateMachine(memory_ledger, rules)

    assert queries.get_turn_color(1) == Color.WHITE
    assert queries.get_current_player(1) == ALICE

    assert machine.play_move(ALICE, 1, 1, 4, 3, 4) == Status.CONTINUING
    assert queries.get_turn_color(1) == Color.BLACK
    assert queries.get_current_player(1) == BOB

    assert machine.play_move(BOB, 1, 6, 4, 4, 4) == Status.CONTINUING
    assert queries.get_turn_color(1) == Color.WHITE
    assert queries.get_current_player(1) == ALICE


def test_board_state(memory_ledger: InMemoryLedger, rules: PythonChessRules) -> None:
    GameRegistry(memory_ledger, rules).create_or_join(ALICE)
    queries = GameQueries(memory_ledger)
    assert queries.board_state_by_game_number(1) == encode(Board.starting_position())


def test_pieces_view(memory_ledger: InMemoryLedger, rules: PythonChessRules) -> None:
    GameRegistry(memory_ledger, rules).create_or_join(ALICE)
    queries = GameQueries(memory_ledger)

    pieces = queries.game_pieces_by_game_number(1)
    assert pieces == square_records(Board.starting_position())
    assert len(pieces) == 64
    assert pieces[0] == (Color.WHITE, 0, 0, 4)  # white rook on a1
    assert pieces[60] == (Color.BLACK, 7, 4, 6)  # black king on e8
    assert pieces[27] == (0, 3, 3, 0)  # d4 is empty


def test_pieces_view_of_unknown_game(memory_ledger: InMemoryLedger) -> None:
    pieces = GameQueries(memory_ledger).game_pieces_by_game_number(5)
    assert pieces == [(0, row, col, 0) for row in range(8) for col in range(8)]


def test_queries_do_not_write(memory_ledger: InMemoryLedger) -> None:
    queries = GameQueries(memory_ledger)
    queries.game_by_number(3)
    queries.get_current_player(3)
    queries.game_pieces_by_game_number(3)
    assert memory_ledger.total_games() == 0
    assert memory_ledger.pending_game() == 0


def test_pieces_view_of_corrupt_board(memory_ledger: InMemoryLedger) -> None:
    record = memory_ledger.get_game(1)
    record.board_state = 0b1000  # color bit on an empty a1
    memory_ledger.put_game(1, record)
    with pytest.raises(BoardEncodingError):
        GameQueries(memory_ledger).game_pieces_by_game_number(1)
