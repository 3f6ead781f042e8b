from __future__ import annotations

from enum import IntEnum
from typing import Iterator

from reversi.othello.position import BOARD_SIZE, Position


class Cell(IntEnum):
    BLACK = -1
    EMPTY = 0
    WHITE = 1


BLACK = Cell.BLACK
WHITE = Cell.WHITE
EMPTY = Cell.EMPTY

PLAYERS = (BLACK, WHITE)

CELL_NAMES = {BLACK: "black", WHITE: "white", EMPTY: "empty"}

DIAGRAM_CHARS = {
    "X": BLACK,
    "B": BLACK,
    "O": WHITE,
    "W": WHITE,
    ".": EMPTY,
    "-": EMPTY,
}


def opponent(color: Cell) -> Cell:
    assert color in PLAYERS
    return WHITE if color == BLACK else BLACK


def color_name(color: Cell) -> str:
    return CELL_NAMES[color]


class Board:
    """
    Cell contents of an 8x8 board, stored row-major.

    A Board knows nothing about the rules. It is treated as a value: rule code copies
    it and sets squares on the copy, and never changes a board it did not create.
    """

    def __init__(self, squares: list[Cell]) -> None:
        if len(squares) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"Expected 64 squares, got {len(squares)}")

        self.__squares = [Cell(square) for square in squares]

    @classmethod
    def empty(cls) -> Board:
        return Board([EMPTY] * BOARD_SIZE * BOARD_SIZE)

    @classmethod
    def start(cls) -> Board:
        board = Board.empty()
        board.set_square(Position(3, 3), WHITE)
        board.set_square(Position(3, 4), BLACK)
        board.set_square(Position(4, 3), BLACK)
        board.set_square(Position(4, 4), WHITE)
        return board

    @classmethod
    def from_string(cls, diagram: str) -> Board:
        """
        Parses a diagram with one line per row, such as the output of `to_string()`.
        Whitespace within a line is ignored. Black is `X` or `B`, white is `O` or `W`
        and empty is `.` or `-`.
        """
        rows = [
            "".join(line.split()) for line in diagram.strip().splitlines() if line.strip()
        ]

        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")

        squares: list[Cell] = []
        for row in rows:
            if len(row) != BOARD_SIZE:
                raise ValueError(f'Row "{row}" does not have {BOARD_SIZE} squares')

            for char in row.upper():
                try:
                    squares.append(DIAGRAM_CHARS[char])
                except KeyError as e:
                    raise ValueError(f'Invalid square "{char}"') from e

        return Board(squares)

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def get_square(self, position: Position) -> Cell:
        return self.__squares[position.to_index()]

    def set_square(self, position: Position, cell: Cell) -> None:
        self.__squares[position.to_index()] = cell

    def copy(self) -> Board:
        return Board(list(self.__squares))

    def count(self, cell: Cell) -> int:
        return self.__squares.count(cell)

    def count_discs(self) -> int:
        return BOARD_SIZE * BOARD_SIZE - self.count_empties()

    def count_empties(self) -> int:
        return self.count(EMPTY)

    def is_full(self) -> bool:
        return self.count_empties() == 0

    def positions(self, cell: Cell) -> Iterator[Position]:
        for index, square in enumerate(self.__squares):
            if square == cell:
                yield Position.from_index(index)

    def rows(self) -> list[list[Cell]]:
        return [
            self.__squares[row * BOARD_SIZE : (row + 1) * BOARD_SIZE]
            for row in range(BOARD_SIZE)
        ]

    def to_string(self) -> str:
        chars = {BLACK: "X", WHITE: "O", EMPTY: "."}
        return "\n".join("".join(chars[cell] for cell in row) for row in self.rows())

    def show(self, moves: set[Position] | None = None) -> None:
        if moves is None:
            moves = set()

        print("+-a-b-c-d-e-f-g-h-+")
        for row in range(BOARD_SIZE):
            print("{} ".format(row + 1), end="")

            for col in range(BOARD_SIZE):
                position = Position(row, col)
                square = self.get_square(position)

                if square == BLACK:
                    print("○ ", end="")
                elif square == WHITE:
                    print("● ", end="")
                elif position in moves:
                    print("· ", end="")
                else:
                    print("  ", end="")
            print("|")
        print("+-----------------+")

    def as_tuple(self) -> tuple[Cell, ...]:
        return tuple(self.__squares)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.as_tuple() == other.as_tuple()
