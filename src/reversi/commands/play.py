from reversi.othello.board import color_name
from reversi.othello.game import Game, GameState, MoveOutcome, Result
from reversi.othello.position import Position

RESULT_TEXT = {
    Result.BLACK_WINS: "Black wins!",
    Result.WHITE_WINS: "White wins!",
    Result.DRAW: "It's a draw!",
}

OUTCOME_TEXT = {
    MoveOutcome.GAME_OVER: "The game is over.",
    MoveOutcome.SQUARE_OCCUPIED: "That square is already taken.",
    MoveOutcome.ILLEGAL: "That move does not flip any discs.",
}

QUIT_WORDS = ["q", "quit", "exit"]


def print_summary(state: GameState) -> None:
    state.board.show(state.moves)
    print(f"Black: {state.black_count}  White: {state.white_count}")

    if state.result is not None:
        print(RESULT_TEXT[state.result])
    else:
        moves = Position.positions_to_fields(sorted(state.moves))
        print(f"{color_name(state.turn).capitalize()} to move: {moves}")


class TerminalGame:
    def __init__(self, auto_pass: bool) -> None:
        self.game = Game(auto_pass=auto_pass)

    def read_move(self) -> Position | None:
        while True:
            try:
                field = input("> ").strip()
            except EOFError:
                return None

            if field.lower() in QUIT_WORDS:
                return None

            try:
                return Position.from_field(field)
            except ValueError as e:
                print(e)

    def __call__(self) -> None:
        while True:
            state = self.game.state
            print_summary(state)

            if state.is_terminal():
                break

            if not state.moves:
                # Without auto pass nobody can continue from here.
                print(f"{color_name(state.turn).capitalize()} has no legal moves.")
                break

            move = self.read_move()
            if move is None:
                break

            outcome = self.game.play(move)
            if outcome != MoveOutcome.OK:
                print(OUTCOME_TEXT[outcome])

        print(f"Moves: {self.game.transcript()}")
