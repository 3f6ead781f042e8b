import requests
from pydantic import BaseModel
from requests import Response
from typing import Any, Optional

from reversi.config import get_server_url
from reversi.othello.position import Position
from reversi.server.models import CreateGameRequest, GameSnapshot, MoveRequest


class APIClient:
    """
    API Client for the game server.

    The client does not remember which game it is playing.
    The caller should store the game ID and pass it to each call.
    """

    def __init__(self, server_url: Optional[str] = None) -> None:
        if server_url is None:
            server_url = get_server_url()

        self.server_url = server_url.rstrip("/")

    def _request(
        self, method: str, path: str, json: Optional[BaseModel] = None
    ) -> Response:
        kwargs: dict[str, Any] = {}

        if json is not None:
            kwargs["json"] = json.model_dump()

        response = requests.request(method, f"{self.server_url}{path}", **kwargs)
        response.raise_for_status()

        return response

    def create_game(self, auto_pass: Optional[bool] = None) -> GameSnapshot:
        payload = CreateGameRequest(auto_pass=auto_pass)
        response = self._request("POST", "/api/games", json=payload)
        return GameSnapshot.model_validate_json(response.text)

    def get_game(self, game_id: str) -> GameSnapshot:
        response = self._request("GET", f"/api/games/{game_id}")
        return GameSnapshot.model_validate_json(response.text)

    def do_move(self, game_id: str, position: Position) -> GameSnapshot:
        payload = MoveRequest(row=position.row, col=position.col)
        response = self._request("POST", f"/api/games/{game_id}/move", json=payload)
        return GameSnapshot.model_validate_json(response.text)

    def delete_game(self, game_id: str) -> None:
        self._request("DELETE", f"/api/games/{game_id}")
