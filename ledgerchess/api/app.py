"""
Thin FastAPI server: resolves the caller from the request and hands everything else to the ChessService.

The caller's address is read from the X-Caller header. Resolving / authenticating it is up to whatever sits in front of this app.

Endpoints:
- GET  /healthz                -> liveness
- GET  /games/count            -> total number of games created
- POST /games                  -> create a game, or join the pending one
- GET  /games/{game_id}        -> players, status, victor, turn
- GET  /games/{game_id}/board  -> packed board state (64 hex digits)
- GET  /games/{game_id}/turn   -> color to move and the player who must move
- GET  /games/{game_id}/pieces -> per-square view (color, row, col, piece_type)
- POST /games/{game_id}/moves  -> play a move, answers with the resulting status code
"""

import logging
from typing import Annotated, Generator

from fastapi import APIRouter, Depends, FastAPI, Header, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from ledgerchess.api.models import (
    BoardStateResponse,
    CreateOrJoinResponse,
    GameResponse,
    GetGameRequest,
    MoveBody,
    MoveRequest,
    MoveResponse,
    PiecesResponse,
    TotalGamesResponse,
    TurnResponse,
)
from ledgerchess.chess.rules import PythonChessRules
from ledgerchess.core.config import Settings, load_settings
from ledgerchess.core.exceptions import GameError, InvalidRequestError
from ledgerchess.core.logging_setup import configure_logging
from ledgerchess.db.database import build_engine, build_session_factory, session_scope
from ledgerchess.db.sql_repository import SQLLedger
from ledgerchess.services.chess_service import ChessService

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"

Caller = Annotated[str, Header(alias="X-Caller", min_length=1)]


# -----------------------
# Dependencies
# -----------------------
def get_db(request: Request) -> Generator[Session, None, None]:
    yield from session_scope(request.app.state.session_factory)


def get_chess_service(db: Annotated[Session, Depends(get_db)]) -> ChessService:
    return ChessService(SQLLedger(db), PythonChessRules())


Service = Annotated[ChessService, Depends(get_chess_service)]


# -----------------------
# Endpoints
# -----------------------
router = APIRouter()


@router.get("/healthz")
def healthz() -> dict[str, bool]:
    return {"ok": True}


@router.get("/games/count", response_model=TotalGamesResponse)
def total_games(service: Service) -> TotalGamesResponse:
    return service.total_games()


@router.post("/games", response_model=CreateOrJoinResponse)
def create_or_join(caller: Caller, service: Service) -> CreateOrJoinResponse:
    return service.create_or_join(caller)


@router.get("/games/{game_id}", response_model=GameResponse)
def game_by_number(game_id: int, service: Service) -> GameResponse:
    return service.get_game(GetGameRequest(game_id=game_id))


@router.get("/games/{game_id}/board", response_model=BoardStateResponse)
def board_state_by_game_number(game_id: int, service: Service) -> BoardStateResponse:
    return service.get_board_state(GetGameRequest(game_id=game_id))


@router.get("/games/{game_id}/turn", response_model=TurnResponse)
def turn(game_id: int, service: Service) -> TurnResponse:
    return service.get_turn(GetGameRequest(game_id=game_id))


@router.get("/games/{game_id}/pieces", response_model=PiecesResponse)
def game_pieces_by_game_number(game_id: int, service: Service) -> PiecesResponse:
    return service.get_pieces(GetGameRequest(game_id=game_id))


@router.post("/games/{game_id}/moves", response_model=MoveResponse)
def play_move(
    game_id: int, body: MoveBody, caller: Caller, service: Service
) -> MoveResponse:
    request = MoveRequest(game_id=game_id, **body.model_dump())
    return service.make_move(caller, request)


# -----------------------
# Error handling
# -----------------------
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"status": "bad_request", "message": str(exc)},
    )


async def game_error_handler(request: Request, exc: GameError) -> JSONResponse:
    if isinstance(exc, InvalidRequestError):
        return JSONResponse(
            status_code=422,
            content={"status": "bad_request", "message": str(exc)},
        )

    # encoding and storage faults: the transaction was rolled back, nothing changed
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"status": "error", "message": str(exc)},
    )


# -----------------------
# App setup
# -----------------------
def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="ledgerchess", version=API_VERSION)
    app.state.session_factory = build_session_factory(build_engine(settings))
    app.include_router(router)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(GameError, game_error_handler)
    return app


# Optional: run via `python -m ledgerchess.api.app`
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="127.0.0.1", port=8000)
