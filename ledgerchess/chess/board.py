"""The logical board: which piece stands on which square, and whose turn it is."""

from dataclasses import dataclass, field
from typing import Self

from ledgerchess.chess.pieces import Piece
from ledgerchess.chess.square import BOARD_SIZE, Square
from ledgerchess.core.shared_types import Color

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_PLACEMENT = "/".join(["8"] * BOARD_SIZE)


@dataclass
class Board:
    """
    Only occupied squares are present in `position`, so a square holds at most one piece by construction.

    NOTE: castling rights and the en passant target are not part of the board. The rules engine has to do without them.
    """

    position: dict[Square, Piece] = field(default_factory=dict)
    turn: Color = Color.WHITE

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_PLACEMENT, Color.WHITE)

    @classmethod
    def from_fen(cls, placement: str, turn: Color = Color.WHITE) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank (row 7), starting with the rook on a8
        * ranks are separated by slashes, from the 8th down to the 1st
        * a number denotes that many consecutive empty squares
        * capital letters are white pieces
        """
        position: dict[Square, Piece] = {}
        for rank_idx, fen_one_rank in enumerate(placement.split("/")):
            # FEN string is read from top rank (row 7) to bottom rank (row 0)
            row = BOARD_SIZE - 1 - rank_idx
            col = 0
            for character in fen_one_rank:
                if character.isdigit():
                    col += int(character)
                else:
                    position[Square(row, col)] = Piece.from_fen(character)
                    col += 1
        return cls(position, turn)

    def to_fen(self) -> str:
        """Piece placement only. Ranks are separated by slashes."""
        return "/".join(
            self._row_to_fen(row) for row in range(BOARD_SIZE - 1, -1, -1)
        )

    def _row_to_fen(self, row: int) -> str:
        fen_characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_SIZE):
            piece = self.piece(Square(row, col))
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Piece | None:
        return self.position.get(square)
