from __future__ import annotations

from reversi.othello.board import EMPTY, PLAYERS, Board, Cell, opponent
from reversi.othello.position import DIRECTIONS, Position


class InvalidMove(Exception):
    pass


class GameAlreadyOver(InvalidMove):
    pass


class SquareOccupied(InvalidMove):
    pass


class IllegalMove(InvalidMove):
    pass


def get_ray_flips(
    board: Board, player: Cell, position: Position, direction: tuple[int, int]
) -> list[Position]:
    """
    Walks from `position` along `direction` over opponent discs. Returns the walked
    discs if the run is closed by a disc of `player`, otherwise an empty list.
    """
    opp = opponent(player)
    run: list[Position] = []

    current = position.step(direction)
    while current is not None and board.get_square(current) == opp:
        run.append(current)
        current = current.step(direction)

    if current is None or board.get_square(current) != player:
        return []

    return run


def get_flips(board: Board, player: Cell, position: Position) -> set[Position]:
    if board.get_square(position) != EMPTY:
        return set()

    flips: set[Position] = set()
    for direction in DIRECTIONS:
        flips.update(get_ray_flips(board, player, position, direction))
    return flips


def is_legal(board: Board, player: Cell, position: Position) -> bool:
    if board.get_square(position) != EMPTY:
        return False

    return any(
        get_ray_flips(board, player, position, direction) for direction in DIRECTIONS
    )


def legal_moves(board: Board, player: Cell) -> set[Position]:
    return {
        position
        for position in board.positions(EMPTY)
        if is_legal(board, player, position)
    }


def has_moves(board: Board, player: Cell) -> bool:
    return any(is_legal(board, player, position) for position in board.positions(EMPTY))


def apply_move(board: Board, player: Cell, position: Position) -> Board:
    """
    Returns a copy of `board` with a disc of `player` on `position` and all captured
    discs flipped. Raises InvalidMove for moves that are not legal.
    """
    if board.get_square(position) != EMPTY:
        raise SquareOccupied(f"{position.to_field()} is already taken")

    flips = get_flips(board, player, position)

    if not flips:
        raise IllegalMove(f"{position.to_field()} does not flip any discs")

    child = board.copy()
    for flipped in flips:
        child.set_square(flipped, player)
    child.set_square(position, player)
    return child


def is_game_end(board: Board) -> bool:
    if board.is_full():
        return True

    return not any(has_moves(board, player) for player in PLAYERS)
