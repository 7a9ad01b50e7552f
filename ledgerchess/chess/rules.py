"""
Adapter around the external chess rules engine (python-chess).

The rest of the application only knows the `RulesEngine` protocol and the `MoveResult` variants below.
Legality, check, checkmate and stalemate detection are entirely the engine's business.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

import chess

from ledgerchess.chess.board import Board
from ledgerchess.chess.pieces import Piece
from ledgerchess.chess.square import BOARD_SIZE, Square
from ledgerchess.core.shared_types import Color, PieceType

logger = logging.getLogger(__name__)


# --- MOVE RESULTS ---
@dataclass(frozen=True)
class Continuing:
    """Legal move, game goes on. `board.turn` is the side to move next."""

    board: Board


@dataclass(frozen=True)
class Victory:
    winner: Color


@dataclass(frozen=True)
class Stalemate:
    pass


@dataclass(frozen=True)
class Illegal:
    reason: str = ""


MoveResult = Continuing | Victory | Stalemate | Illegal


class RulesEngine(Protocol):
    """Just the parts of a chess engine the session state machine needs"""

    def starting_board(self) -> Board:
        """The standard starting position, white to move."""
        ...

    def play(self, board: Board, from_square: Square, to_square: Square) -> MoveResult:
        """Apply the move for `board.turn` and classify the outcome."""
        ...


# --- PYTHON-CHESS IMPLEMENTATION ---
_TO_ENGINE_COLOR: dict[Color, chess.Color] = {
    Color.WHITE: chess.WHITE,
    Color.BLACK: chess.BLACK,
}
_FROM_ENGINE_COLOR: dict[chess.Color, Color] = {
    value: key for key, value in _TO_ENGINE_COLOR.items()
}
LAST_ROWS = (0, BOARD_SIZE - 1)


class PythonChessRules:
    """
    Rules engine backed by python-chess.

    NOTE: the stored board does not know about castling rights or en passant targets,
    so every position is handed to the engine without them. Castling and en passant captures are therefore never legal.
    A pawn reaching the last rank always promotes to a queen (a move only names two squares).
    """

    def starting_board(self) -> Board:
        return Board.starting_position()

    def play(self, board: Board, from_square: Square, to_square: Square) -> MoveResult:
        if not (from_square.is_within_bounds() and to_square.is_within_bounds()):
            return Illegal("square off the board")

        position = to_engine_board(board)
        if position.king(chess.WHITE) is None or position.king(chess.BLACK) is None:
            return Illegal("position is missing a king")

        move = self._build_move(position, from_square, to_square)
        if not position.is_legal(move):
            return Illegal(f"{move.uci()} is not a legal move")

        mover = board.turn
        position.push(move)
        logger.debug("Engine applied %s, resulting placement %s", move.uci(), position.board_fen())

        if position.is_checkmate():
            return Victory(mover)
        if position.is_stalemate():
            return Stalemate()
        return Continuing(from_engine_board(position))

    def _build_move(
        self, position: chess.Board, from_square: Square, to_square: Square
    ) -> chess.Move:
        promotion = None
        if (
            position.piece_type_at(from_square.index) == chess.PAWN
            and to_square.row in LAST_ROWS
        ):
            promotion = chess.QUEEN
        return chess.Move(from_square.index, to_square.index, promotion=promotion)


# --- CONVERSIONS ---
# Square.index and python-chess square numbers agree: a1 = 0, b1 = 1, ..., h8 = 63.
# PieceType codes agree with python-chess piece types as well: pawn = 1, ..., king = 6.
def to_engine_board(board: Board) -> chess.Board:
    """Engine position with the board's pieces and turn, no castling rights, no en passant target."""
    position = chess.Board(None)
    for square, piece in board.position.items():
        position.set_piece_at(
            square.index, chess.Piece(int(piece.type), _TO_ENGINE_COLOR[piece.color])
        )
    position.turn = _TO_ENGINE_COLOR[board.turn]
    position.castling_rights = chess.BB_EMPTY
    position.ep_square = None
    return position


def from_engine_board(position: chess.Board) -> Board:
    """Keeps the pieces and the side to move. Everything else the engine tracks is dropped."""
    return Board(
        position={
            Square.from_index(index): Piece(
                PieceType(piece.piece_type), _FROM_ENGINE_COLOR[piece.color]
            )
            for index, piece in position.piece_map().items()
        },
        turn=_FROM_ENGINE_COLOR[position.turn],
    )
