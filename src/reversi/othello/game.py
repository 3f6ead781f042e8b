from __future__ import annotations

from copy import copy
from enum import Enum
from typing import Optional

from reversi.othello.board import BLACK, WHITE, Board, Cell, opponent
from reversi.othello.position import Position
from reversi.othello.rules import (
    GameAlreadyOver,
    IllegalMove,
    InvalidMove,
    SquareOccupied,
    apply_move,
    is_game_end,
    legal_moves,
)


class Status(Enum):
    IN_PROGRESS = "in_progress"
    TERMINAL = "terminal"


class Result(Enum):
    BLACK_WINS = "black_wins"
    WHITE_WINS = "white_wins"
    DRAW = "draw"


class MoveOutcome(Enum):
    OK = "ok"
    GAME_OVER = "game_over"
    SQUARE_OCCUPIED = "square_occupied"
    ILLEGAL = "illegal"


class GameState:
    """
    Immutable snapshot of a match: the board, the player to move and everything that
    follows from those two. Derived fields are computed from the board on creation,
    so counts and legal moves can never drift from the board contents.

    With `auto_pass` enabled, a player without legal moves is skipped as long as the
    opponent can still move. Without it, the turn always goes to the opponent.
    """

    def __init__(self, board: Board, turn: Cell, *, auto_pass: bool = False) -> None:
        assert turn in [BLACK, WHITE]

        self.board = board.copy()
        self.turn = turn
        self.auto_pass = auto_pass

        self.moves = legal_moves(self.board, self.turn)
        self.black_count = self.board.count(BLACK)
        self.white_count = self.board.count(WHITE)

        if is_game_end(self.board):
            self.status = Status.TERMINAL
            self.result: Optional[Result] = self._compute_result()
        else:
            self.status = Status.IN_PROGRESS
            self.result = None

    @classmethod
    def start(cls, *, auto_pass: bool = False) -> GameState:
        return GameState(Board.start(), BLACK, auto_pass=auto_pass)

    def __repr__(self) -> str:
        return f"GameState({self.board!r}, {self.turn!r})"

    def _compute_result(self) -> Result:
        if self.black_count > self.white_count:
            return Result.BLACK_WINS
        if self.white_count > self.black_count:
            return Result.WHITE_WINS
        return Result.DRAW

    def is_terminal(self) -> bool:
        return self.status == Status.TERMINAL

    def count(self, color: Cell) -> int:
        assert color in [BLACK, WHITE]

        if color == WHITE:
            return self.white_count
        return self.black_count

    def winner(self) -> Optional[Cell]:
        if self.result == Result.BLACK_WINS:
            return BLACK
        if self.result == Result.WHITE_WINS:
            return WHITE
        return None

    def is_valid_move(self, position: Position) -> bool:
        return not self.is_terminal() and position in self.moves

    def do_move(self, position: Position) -> GameState:
        if self.is_terminal():
            raise GameAlreadyOver("The game has already ended")

        if self.board.get_square(position) != Cell.EMPTY:
            raise SquareOccupied(f"{position.to_field()} is already taken")

        if position not in self.moves:
            raise IllegalMove(f"{position.to_field()} is not a legal move")

        board = apply_move(self.board, self.turn, position)
        child = GameState(board, opponent(self.turn), auto_pass=self.auto_pass)

        if self.auto_pass and not child.is_terminal() and not child.moves:
            child = GameState(board, self.turn, auto_pass=self.auto_pass)

        return child

    def as_tuple(self) -> tuple[Board, Cell]:
        return (self.board, self.turn)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            raise TypeError(f"Cannot compare GameState with {type(other)}")

        return self.as_tuple() == other.as_tuple()


class Game:
    """
    Owns the current GameState of one match and the moves played so far.

    Rejected moves leave the game untouched and are reported through the returned
    MoveOutcome rather than raised.
    """

    def __init__(self, *, auto_pass: bool = False) -> None:
        self.state = GameState.start(auto_pass=auto_pass)
        self.moves: list[Position] = []

    @classmethod
    def from_moves(cls, moves: list[Position], *, auto_pass: bool = False) -> Game:
        game = Game(auto_pass=auto_pass)
        state = game.state

        for move in moves:
            state = state.do_move(move)

        game.state = state
        game.moves = copy(moves)
        return game

    @classmethod
    def from_transcript(cls, transcript: str, *, auto_pass: bool = False) -> Game:
        moves = Position.fields_to_positions(transcript.split())
        return cls.from_moves(moves, auto_pass=auto_pass)

    def transcript(self) -> str:
        return Position.positions_to_fields(self.moves)

    def play(self, position: Position) -> MoveOutcome:
        try:
            self.state = self.state.do_move(position)
        except GameAlreadyOver:
            return MoveOutcome.GAME_OVER
        except SquareOccupied:
            return MoveOutcome.SQUARE_OCCUPIED
        except InvalidMove:
            return MoveOutcome.ILLEGAL

        self.moves.append(position)
        return MoveOutcome.OK

    def is_over(self) -> bool:
        return self.state.is_terminal()
