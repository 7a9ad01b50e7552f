"""Requests and Response models"""

from pydantic import BaseModel, field_validator

from ledgerchess.core.exceptions import InvalidRequestError

# Game numbers are unsigned ledger keys
MAX_GAME_ID = (1 << 256) - 1


def _validate_game_id(value: int) -> int:
    if not 0 <= value <= MAX_GAME_ID:
        raise InvalidRequestError(f"Game number {value} is not an unsigned 256-bit integer.")
    return value


# --- REQUEST MODELS ---
class GetGameRequest(BaseModel):
    game_id: int

    @field_validator("game_id")
    @classmethod
    def validate_game_id(cls, value: int) -> int:
        return _validate_game_id(value)


class MoveRequest(BaseModel):
    """
    Squares are given as (row, col), row 0 being White's back rank and col 0 the a-file.
    Coordinates off the board are accepted here: the move is simply rejected as illegal.
    """

    game_id: int
    from_row: int
    from_col: int
    to_row: int
    to_col: int

    @field_validator("game_id")
    @classmethod
    def validate_game_id(cls, value: int) -> int:
        return _validate_game_id(value)


class MoveBody(BaseModel):
    """Body of a move request when the game number is already part of the URL."""

    from_row: int
    from_col: int
    to_row: int
    to_col: int


# --- RESPONSE MODELS ---
class TotalGamesResponse(BaseModel):
    total_games: int


class CreateOrJoinResponse(BaseModel):
    game_id: int
    status: int
    status_name: str


class GameResponse(BaseModel):
    game_id: int
    player_one: str
    player_two: str
    status: int
    victor: int
    turn_color: int
    current_player: str


class BoardStateResponse(BaseModel):
    game_id: int
    # 64 hex digits: the packed board as stored, readable by any off-system viewer
    board_state: str


class TurnResponse(BaseModel):
    game_id: int
    turn_color: int
    current_player: str


class PiecesResponse(BaseModel):
    game_id: int
    # (color, row, col, piece_type) for all 64 squares
    pieces: list[tuple[int, int, int, int]]


class MoveResponse(BaseModel):
    game_id: int
    status: int
    status_name: str
