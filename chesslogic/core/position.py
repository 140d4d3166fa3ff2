"""Board coordinates and step offsets.

Row 0 is rank 8 and column 0 is file a, so White pawns move towards
row 0 (``Direction.NORTH``).
"""

from __future__ import annotations

from dataclasses import dataclass

FILES = "abcdefgh"


@dataclass(frozen=True)
class Direction:
    row_delta: int
    column_delta: int

    def __add__(self, other: Direction) -> Direction:
        return Direction(self.row_delta + other.row_delta, self.column_delta + other.column_delta)

    def __mul__(self, scalar: int) -> Direction:
        return Direction(self.row_delta * scalar, self.column_delta * scalar)

    __rmul__ = __mul__


Direction.NORTH = Direction(-1, 0)
Direction.SOUTH = Direction(1, 0)
Direction.EAST = Direction(0, 1)
Direction.WEST = Direction(0, -1)
Direction.NORTH_EAST = Direction(-1, 1)
Direction.NORTH_WEST = Direction(-1, -1)
Direction.SOUTH_EAST = Direction(1, 1)
Direction.SOUTH_WEST = Direction(1, -1)

ORTHOGONALS = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)
DIAGONALS = (Direction.NORTH_EAST, Direction.NORTH_WEST, Direction.SOUTH_EAST, Direction.SOUTH_WEST)
ALL_DIRECTIONS = ORTHOGONALS + DIAGONALS

_VERTICAL = (Direction.NORTH, Direction.SOUTH)
_HORIZONTAL = (Direction.EAST, Direction.WEST)
KNIGHT_JUMPS = tuple(2 * v + h for v in _VERTICAL for h in _HORIZONTAL) + tuple(
    2 * h + v for h in _HORIZONTAL for v in _VERTICAL
)


@dataclass(frozen=True)
class Position:
    row: int
    column: int

    def __add__(self, direction: Direction) -> Position:
        return Position(self.row + direction.row_delta, self.column + direction.column_delta)

    def is_valid(self) -> bool:
        return 0 <= self.row < 8 and 0 <= self.column < 8

    @property
    def index(self) -> int:
        """Cell index into the 64-square board array (a8 = 0, h1 = 63)."""
        return self.row * 8 + self.column

    @property
    def name(self) -> str:
        """Algebraic square name, e.g. 'e4'."""
        return f"{FILES[self.column]}{8 - self.row}"

    def is_light(self) -> bool:
        return (self.row + self.column) % 2 == 0

    @staticmethod
    def from_index(index: int) -> Position:
        return Position(index // 8, index % 8)

    @staticmethod
    def from_name(name: str) -> Position:
        """Parse an algebraic square name. Raises ValueError on bad input."""
        if len(name) != 2 or name[0].lower() not in FILES or name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return Position(8 - int(name[1]), FILES.index(name[0].lower()))

    def __repr__(self) -> str:
        return f"Position({self.name})" if self.is_valid() else f"Position({self.row}, {self.column})"


ALL_POSITIONS = tuple(Position.from_index(i) for i in range(64))
