from __future__ import annotations

from typing import Iterable, Optional

BOARD_SIZE = 8

# (row, col) offsets, shared by move validation and flipping.
DIRECTIONS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class Position:
    """
    A square on the board, identified by row and column.

    Rows and columns are numbered 0 to 7 from the top left. In field notation the
    column is a letter and the row a digit, so `Position(2, 3)` is `d3`.
    """

    def __init__(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise ValueError(f"Position ({row}, {col}) is off the board")

        self.row = row
        self.col = col

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    @classmethod
    def all(cls) -> list[Position]:
        return [
            Position(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
        ]

    @classmethod
    def from_index(cls, index: int) -> Position:
        if index not in range(BOARD_SIZE * BOARD_SIZE):
            raise ValueError(f"Invalid index {index}")
        return Position(index // BOARD_SIZE, index % BOARD_SIZE)

    def to_index(self) -> int:
        return self.row * BOARD_SIZE + self.col

    @classmethod
    def from_field(cls, field: str) -> Position:
        if len(field) != 2:
            raise ValueError(f'Invalid field length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        col = ord(field[0]) - ord("a")
        row = ord(field[1]) - ord("1")
        return Position(row, col)

    def to_field(self) -> str:
        return "abcdefgh"[self.col] + "12345678"[self.row]

    @classmethod
    def fields_to_positions(cls, fields: Iterable[str]) -> list[Position]:
        return [cls.from_field(field) for field in fields]

    @classmethod
    def positions_to_fields(cls, positions: Iterable[Position]) -> str:
        return " ".join(position.to_field() for position in positions)

    def step(self, direction: tuple[int, int]) -> Optional[Position]:
        """Returns the neighbour in `direction`, or None when it is off the board."""
        d_row, d_col = direction
        row = self.row + d_row
        col = self.col + d_col

        if not self.in_bounds(row, col):
            return None
        return Position(row, col)

    def __repr__(self) -> str:
        return f"Position({self.row}, {self.col})"

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            raise TypeError(f"Cannot compare Position with {type(other)}")

        return self.as_tuple() == other.as_tuple()

    def __lt__(self, other: Position) -> bool:
        return self.as_tuple() < other.as_tuple()
