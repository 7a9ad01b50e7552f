"""Unit tests for ledgerchess/chess/board.py"""

from typing import Callable, Literal

import pytest

from ledgerchess.chess.board import EMPTY_PLACEMENT, STARTING_PLACEMENT, Board
from ledgerchess.chess.pieces import PIECE_TO_FEN, Piece
from ledgerchess.chess.square import Square
from ledgerchess.core.shared_types import Color, PieceType

PieceColors = Literal[Color.WHITE, Color.BLACK]


@pytest.fixture
def board_with_single_piece() -> Callable[[PieceType, PieceColors, str], Board]:
    """Call the inner function that will be returned with the desired piece type, color, and square"""

    def _create_board(
        piece_type: PieceType,
        color: PieceColors,
        square_name: str = "d4",
    ) -> Board:
        fen_char = PIECE_TO_FEN[piece_type]
        fen_char = fen_char.upper() if color == Color.WHITE else fen_char.lower()

        file_idx = ord(square_name[0]) - ord("a")
        rank_idx = 8 - int(square_name[1])

        fen_rows = ["8"] * 8
        before = str(file_idx) if file_idx else ""
        after = str(7 - file_idx) if file_idx < 7 else ""
        fen_rows[rank_idx] = f"{before}{fen_char}{after}"
        return Board.from_fen("/".join(fen_rows))

    return _create_board


def test_starting_position() -> None:
    board = Board.starting_position()
    assert board.turn == Color.WHITE
    assert len(board.position) == 32
    assert board.piece(Square.from_algebraic("a1")) == Piece(PieceType.ROOK, Color.WHITE)
    assert board.piece(Square.from_algebraic("d1")) == Piece(PieceType.QUEEN, Color.WHITE)
    assert board.piece(Square.from_algebraic("e1")) == Piece(PieceType.KING, Color.WHITE)
    assert board.piece(Square.from_algebraic("e8")) == Piece(PieceType.KING, Color.BLACK)
    assert board.piece(Square.from_algebraic("h7")) == Piece(PieceType.PAWN, Color.BLACK)
    assert board.piece(Square.from_algebraic("e4")) is None


def test_empty_board_from_fen() -> None:
    board = Board.from_fen(EMPTY_PLACEMENT)
    assert board.position == {}
    assert board.to_fen() == EMPTY_PLACEMENT


@pytest.mark.parametrize(
    "placement",
    [
        STARTING_PLACEMENT,
        EMPTY_PLACEMENT,
        "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR",
        "k7/8/1K6/2Q5/8/8/8/8",
        "7k/8/8/8/8/8/8/K7",
    ],
)
def test_fen_round_trip(placement: str) -> None:
    assert Board.from_fen(placement).to_fen() == placement


@pytest.mark.parametrize("piece_type", list(PieceType))
@pytest.mark.parametrize("color", [Color.WHITE, Color.BLACK])
@pytest.mark.parametrize("square_name", ["a1", "d4", "h8", "h1", "a8"])
def test_single_piece(
    board_with_single_piece: Callable[[PieceType, PieceColors, str], Board],
    piece_type: PieceType,
    color: PieceColors,
    square_name: str,
) -> None:
    board = board_with_single_piece(piece_type, color, square_name)
    assert board.position == {Square.from_algebraic(square_name): Piece(piece_type, color)}


def test_turn_is_part_of_equality() -> None:
    """Same pieces but another side to move is another board."""
    assert Board.from_fen(STARTING_PLACEMENT, Color.WHITE) != Board.from_fen(
        STARTING_PLACEMENT, Color.BLACK
    )
