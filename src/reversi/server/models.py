from __future__ import annotations

from pydantic import BaseModel, Field
from typing import Optional

from reversi.othello.board import color_name
from reversi.othello.game import Game, MoveOutcome
from reversi.othello.position import Position


class SerializedPosition(BaseModel):
    row: int = Field(ge=0, le=7)
    col: int = Field(ge=0, le=7)

    def to_position(self) -> Position:
        return Position(self.row, self.col)

    @classmethod
    def from_position(cls, position: Position) -> SerializedPosition:
        return cls(row=position.row, col=position.col)


class MoveRequest(SerializedPosition):
    pass


class Counts(BaseModel):
    black: int
    white: int


class GameSnapshot(BaseModel):
    id: str
    board: list[list[str]]
    turn: str
    legal_moves: list[SerializedPosition]
    counts: Counts
    status: str
    result: Optional[str]
    moves: str
    outcome: Optional[str] = None

    @classmethod
    def from_game(
        cls, game_id: str, game: Game, outcome: Optional[MoveOutcome] = None
    ) -> GameSnapshot:
        state = game.state

        return cls(
            id=game_id,
            board=[[color_name(cell) for cell in row] for row in state.board.rows()],
            turn=color_name(state.turn),
            legal_moves=[
                SerializedPosition.from_position(move) for move in sorted(state.moves)
            ],
            counts=Counts(black=state.black_count, white=state.white_count),
            status=state.status.value,
            result=None if state.result is None else state.result.value,
            moves=game.transcript(),
            outcome=None if outcome is None else outcome.value,
        )


class CreateGameRequest(BaseModel):
    auto_pass: Optional[bool] = None
