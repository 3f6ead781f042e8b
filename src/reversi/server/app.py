import asyncio
from fastapi import Depends, FastAPI, HTTPException, Response, status
from typing import Optional
from uuid import uuid4

from reversi.config import get_auto_pass
from reversi.othello.board import color_name
from reversi.othello.game import Game, MoveOutcome, Status
from reversi.server.models import CreateGameRequest, GameSnapshot, MoveRequest


class Match:
    def __init__(self, game: Game) -> None:
        self.game = game

        # Held for the whole move transition, so moves on one match never interleave.
        self.lock = asyncio.Lock()


class ServerState:
    def __init__(self) -> None:
        self.auto_pass = get_auto_pass()
        self.matches: dict[str, Match] = {}

    def create_match(self, auto_pass: Optional[bool] = None) -> str:
        if auto_pass is None:
            auto_pass = self.auto_pass

        game_id = str(uuid4())
        self.matches[game_id] = Match(Game(auto_pass=auto_pass))
        return game_id

    def get_match(self, game_id: str) -> Match:
        try:
            return self.matches[game_id]
        except KeyError:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Game {game_id} not found",
            )

    def delete_match(self, game_id: str) -> None:
        self.get_match(game_id)
        del self.matches[game_id]


def get_server_state() -> ServerState:
    """Dependency that provides the server state"""
    return server_state


app = FastAPI()
server_state = ServerState()


@app.post("/api/games")
async def create_game(
    payload: Optional[CreateGameRequest] = None,
    state: ServerState = Depends(get_server_state),
) -> GameSnapshot:
    auto_pass = None if payload is None else payload.auto_pass
    game_id = state.create_match(auto_pass)

    print(f"Created game {game_id}")
    return GameSnapshot.from_game(game_id, state.matches[game_id].game)


@app.get("/api/games/{game_id}")
async def get_game(
    game_id: str,
    state: ServerState = Depends(get_server_state),
) -> GameSnapshot:
    match = state.get_match(game_id)
    return GameSnapshot.from_game(game_id, match.game)


@app.post("/api/games/{game_id}/move")
async def do_move(
    game_id: str,
    payload: MoveRequest,
    state: ServerState = Depends(get_server_state),
) -> GameSnapshot:
    match = state.get_match(game_id)

    async with match.lock:
        outcome = match.game.play(payload.to_position())
        snapshot = GameSnapshot.from_game(game_id, match.game, outcome)

    if outcome == MoveOutcome.OK and snapshot.status == Status.TERMINAL.value:
        counts = snapshot.counts
        score = f"{counts.black}-{counts.white}"
        print(f"Game {game_id} ended: {snapshot.result} ({score})")

    return snapshot


@app.delete("/api/games/{game_id}")
async def delete_game(
    game_id: str,
    state: ServerState = Depends(get_server_state),
) -> Response:
    match = state.get_match(game_id)

    if not match.game.is_over():
        turn = color_name(match.game.state.turn)
        print(f"Dropped unfinished game {game_id} with {turn} to move")

    state.delete_match(game_id)
    return Response()
