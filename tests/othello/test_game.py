import pytest

from reversi.othello.board import BLACK, WHITE, Board
from reversi.othello.game import Game, GameState, MoveOutcome, Result, Status
from reversi.othello.position import Position
from reversi.othello.rules import GameAlreadyOver, IllegalMove, SquareOccupied

# Black fills the last empty square, White wins on count.
BOARD_ONE_EMPTY = Board.from_string(
    """
    .OXOOOOO
    OOOOOOOO
    OOOOOOOO
    OOOOOOOO
    OOOOOOOO
    OOOOOOOO
    OOOOOOOO
    OOOOOOOO
    """
)

# After Black plays c1, White cannot move but Black still can on c8.
BOARD_WHITE_GETS_STUCK = Board.from_string(
    """
    XO......
    ........
    ........
    ........
    ........
    ........
    ........
    XO......
    """
)

BOARD_NO_MOVES_DRAW = Board.from_string(
    """
    XXXXXXXX
    ........
    ........
    ........
    ........
    ........
    ........
    OOOOOOOO
    """
)


def test_start_state() -> None:
    state = GameState.start()

    assert state.board == Board.start()
    assert state.turn == BLACK
    assert state.moves == {
        Position(2, 3),
        Position(3, 2),
        Position(4, 5),
        Position(5, 4),
    }
    assert state.black_count == 2
    assert state.white_count == 2
    assert state.status == Status.IN_PROGRESS
    assert state.result is None
    assert state.winner() is None


def test_do_move_flips_and_counts() -> None:
    child = GameState.start().do_move(Position(2, 3))

    assert child.board.get_square(Position(3, 3)) == BLACK
    assert child.black_count == 4
    assert child.white_count == 1
    assert child.count(BLACK) == 4
    assert child.count(WHITE) == 1
    assert child.turn == WHITE
    assert child.moves == {Position(2, 2), Position(2, 4), Position(4, 2)}
    assert not child.is_terminal()


def test_do_move_does_not_change_parent() -> None:
    state = GameState.start()
    state.do_move(Position(2, 3))

    assert state == GameState.start()
    assert state.black_count == 2


@pytest.mark.parametrize(
    ["position", "error"],
    [
        pytest.param(Position(3, 3), SquareOccupied, id="occupied"),
        pytest.param(Position(0, 0), IllegalMove, id="no-flips"),
        pytest.param(Position(2, 4), IllegalMove, id="legal-for-opponent-only"),
    ],
)
def test_do_move_rejected(position: Position, error: type[Exception]) -> None:
    with pytest.raises(error):
        GameState.start().do_move(position)


def test_turn_alternation() -> None:
    state = GameState.start()

    for field in ["d3", "c5", "f6", "f5", "e6", "e3"]:
        child = state.do_move(Position.from_field(field))
        assert child.turn != state.turn
        state = child


def test_board_full_is_terminal() -> None:
    state = GameState(BOARD_ONE_EMPTY, BLACK)
    assert state.status == Status.IN_PROGRESS
    assert state.moves == {Position(0, 0)}

    child = state.do_move(Position(0, 0))

    assert child.board.is_full()
    assert child.status == Status.TERMINAL
    assert child.black_count == 3
    assert child.white_count == 61
    assert child.result == Result.WHITE_WINS
    assert child.winner() == WHITE


def test_terminal_state_rejects_moves() -> None:
    child = GameState(BOARD_ONE_EMPTY, BLACK).do_move(Position(0, 0))

    with pytest.raises(GameAlreadyOver):
        child.do_move(Position(0, 0))


def test_no_moves_for_either_player_is_terminal() -> None:
    state = GameState(BOARD_NO_MOVES_DRAW, BLACK)

    assert state.board.count_empties() == 48
    assert state.moves == set()
    assert state.status == Status.TERMINAL
    assert state.result == Result.DRAW
    assert state.winner() is None
    assert not state.is_valid_move(Position(3, 3))


def test_no_moves_black_wins() -> None:
    board = Board.from_string("X.......\n" + "........\n" * 7)
    state = GameState(board, WHITE)

    assert state.is_terminal()
    assert state.result == Result.BLACK_WINS
    assert state.winner() == BLACK


def test_stuck_player_keeps_turn_without_auto_pass() -> None:
    state = GameState(BOARD_WHITE_GETS_STUCK, BLACK)
    child = state.do_move(Position(0, 2))

    assert child.turn == WHITE
    assert child.moves == set()
    assert child.status == Status.IN_PROGRESS


def test_stuck_player_is_skipped_with_auto_pass() -> None:
    state = GameState(BOARD_WHITE_GETS_STUCK, BLACK, auto_pass=True)
    child = state.do_move(Position(0, 2))

    assert child.turn == BLACK
    assert child.moves == {Position(7, 2)}
    assert child.status == Status.IN_PROGRESS

    final = child.do_move(Position(7, 2))
    assert final.is_terminal()
    assert final.black_count == 6
    assert final.white_count == 0
    assert final.result == Result.BLACK_WINS


def test_game_play_ok() -> None:
    game = Game()
    outcome = game.play(Position(2, 3))

    assert outcome == MoveOutcome.OK
    assert game.state.turn == WHITE
    assert game.moves == [Position(2, 3)]
    assert game.transcript() == "d3"


@pytest.mark.parametrize(
    ["position", "expected"],
    [
        pytest.param(Position(3, 3), MoveOutcome.SQUARE_OCCUPIED, id="occupied"),
        pytest.param(Position(0, 0), MoveOutcome.ILLEGAL, id="no-flips"),
    ],
)
def test_game_play_rejected(position: Position, expected: MoveOutcome) -> None:
    game = Game()
    before = game.state

    assert game.play(position) == expected
    assert game.state is before
    assert game.state.turn == BLACK
    assert game.state.black_count == 2
    assert game.state.white_count == 2
    assert game.moves == []


def test_game_play_after_end() -> None:
    game = Game.from_transcript("d3")
    game.state = GameState(BOARD_NO_MOVES_DRAW, BLACK)
    before = game.state

    assert game.is_over()
    assert game.play(Position(3, 3)) == MoveOutcome.GAME_OVER
    assert game.state is before
    assert game.transcript() == "d3"


def test_from_transcript() -> None:
    game = Game.from_transcript("d3 c5 f6 f5 e6 e3")

    assert game.transcript() == "d3 c5 f6 f5 e6 e3"
    assert len(game.moves) == 6
    assert game.state.turn == BLACK
    assert game.state.board.count_discs() == 10


def test_from_transcript_empty() -> None:
    game = Game.from_transcript("")
    assert game.state == GameState.start()
    assert game.moves == []


def test_from_transcript_invalid_move() -> None:
    with pytest.raises(IllegalMove):
        Game.from_transcript("d3 a1")


def test_from_transcript_invalid_field() -> None:
    with pytest.raises(ValueError):
        Game.from_transcript("d3 z9")
