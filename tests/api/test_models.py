import pytest
from pydantic import ValidationError

from ledgerchess.api.models import MAX_GAME_ID, GetGameRequest, MoveBody, MoveRequest
from ledgerchess.core.exceptions import InvalidRequestError


# -- Validation - GetGameRequest --
@pytest.mark.parametrize("game_id", [0, 1, 42, MAX_GAME_ID])
def test_valid_game_id(game_id: int) -> None:
    """Any unsigned 256-bit number is a valid game number, even one that was never created."""
    assert GetGameRequest(game_id=game_id).game_id == game_id


@pytest.mark.parametrize("game_id", [-1, MAX_GAME_ID + 1])
def test_invalid_game_id(game_id: int) -> None:
    """Game numbers outside the unsigned 256-bit range are rejected."""
    with pytest.raises(ValidationError) as exc_info:
        _ = GetGameRequest(game_id=game_id)
    assert "256-bit" in str(exc_info.value)


def test_game_id_must_be_a_number() -> None:
    with pytest.raises(ValidationError):
        _ = GetGameRequest(game_id="first")


def test_validator_error_type() -> None:
    """The validator raises the domain error, pydantic reports it as a ValueError."""
    assert issubclass(InvalidRequestError, ValueError)


# -- Validation - MoveRequest --
def test_valid_move_request() -> None:
    request = MoveRequest(game_id=1, from_row=1, from_col=4, to_row=3, to_col=4)
    assert (request.from_row, request.from_col, request.to_row, request.to_col) == (1, 4, 3, 4)


def test_off_board_coordinates_are_accepted() -> None:
    """Leaving the board is a rejected move, not a malformed request."""
    request = MoveRequest(game_id=1, from_row=-1, from_col=9, to_row=100, to_col=0)
    assert request.from_row == -1
    assert request.to_row == 100


def test_move_request_with_invalid_game_id() -> None:
    with pytest.raises(ValidationError):
        _ = MoveRequest(game_id=-5, from_row=1, from_col=4, to_row=3, to_col=4)


def test_move_body_requires_all_squares() -> None:
    with pytest.raises(ValidationError):
        _ = MoveBody(from_row=1, from_col=4, to_row=3)
