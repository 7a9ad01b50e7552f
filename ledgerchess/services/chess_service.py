"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

from ledgerchess.api.models import (
    BoardStateResponse,
    CreateOrJoinResponse,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    MoveResponse,
    PiecesResponse,
    TotalGamesResponse,
    TurnResponse,
)
from ledgerchess.chess.codec import to_hex
from ledgerchess.chess.rules import RulesEngine
from ledgerchess.core.models import Address
from ledgerchess.core.shared_types import Status
from ledgerchess.db.repository import Ledger
from ledgerchess.services.queries import GameQueries
from ledgerchess.services.registry import GameRegistry
from ledgerchess.services.session import SessionStateMachine


class ChessService:
    """Orchestration of layers for chess games. The caller address is resolved by the transport and passed in."""

    def __init__(self, ledger: Ledger, rules: RulesEngine) -> None:
        self.registry = GameRegistry(ledger, rules)
        self.sessions = SessionStateMachine(ledger, rules)
        self.queries = GameQueries(ledger)

    # -- API routes logic ---
    def create_or_join(self, caller: Address) -> CreateOrJoinResponse:
        """Start a new game, or join the one waiting for a second player."""
        game_id = self.registry.create_or_join(caller)
        status = Status(self.queries.game_by_number(game_id).status)
        return CreateOrJoinResponse(
            game_id=game_id, status=int(status), status_name=status.name
        )

    def make_move(self, caller: Address, request: MoveRequest) -> MoveResponse:
        """Make a move attempt. Rejections are reported through the status, not raised."""
        outcome = self.sessions.play_move(
            caller,
            request.game_id,
            request.from_row,
            request.from_col,
            request.to_row,
            request.to_col,
        )
        return MoveResponse(
            game_id=request.game_id, status=int(outcome), status_name=outcome.name
        )

    def total_games(self) -> TotalGamesResponse:
        return TotalGamesResponse(total_games=self.queries.total_games())

    def get_game(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        info = self.queries.game_by_number(request.game_id)
        return GameResponse(
            game_id=request.game_id,
            player_one=info.player_one,
            player_two=info.player_two,
            status=info.status,
            victor=info.victor,
            turn_color=self.queries.get_turn_color(request.game_id),
            current_player=self.queries.get_current_player(request.game_id),
        )

    def get_board_state(self, request: GetGameRequest) -> BoardStateResponse:
        board_state = self.queries.board_state_by_game_number(request.game_id)
        return BoardStateResponse(game_id=request.game_id, board_state=to_hex(board_state))

    def get_turn(self, request: GetGameRequest) -> TurnResponse:
        return TurnResponse(
            game_id=request.game_id,
            turn_color=self.queries.get_turn_color(request.game_id),
            current_player=self.queries.get_current_player(request.game_id),
        )

    def get_pieces(self, request: GetGameRequest) -> PiecesResponse:
        return PiecesResponse(
            game_id=request.game_id,
            pieces=self.queries.game_pieces_by_game_number(request.game_id),
        )
