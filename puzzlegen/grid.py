"""Square grid addressing shared by the maze and sliding-tile puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, NamedTuple, Tuple, Union

from .errors import PreconditionError


class Direction(Enum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def dx(self) -> int:
        return _OFFSETS[self][0]

    @property
    def dy(self) -> int:
        return _OFFSETS[self][1]

    @property
    def wall(self) -> str:
        """Name of the cell wall facing this direction."""
        return _WALLS[self]

    @property
    def bit(self) -> int:
        return _BITS[self]

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as exc:
            raise PreconditionError(f"Unknown direction: {value!r}") from exc


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}
_WALLS = {
    Direction.UP: "top",
    Direction.RIGHT: "right",
    Direction.DOWN: "bottom",
    Direction.LEFT: "left",
}
_BITS = {
    Direction.UP: 0b0001,
    Direction.RIGHT: 0b0010,
    Direction.DOWN: 0b0100,
    Direction.LEFT: 0b1000,
}
_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}


class Position(NamedTuple):
    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        return Position(self.x + direction.dx, self.y + direction.dy)


@dataclass(frozen=True)
class GridModel:
    """An ``size x size`` addressable space with neighbour enumeration."""

    size: int

    def __post_init__(self) -> None:
        if self.size < 1:
            raise PreconditionError(f"Grid size must be at least 1, got {self.size}")

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def in_bounds(self, pos: Tuple[int, int]) -> bool:
        x, y = pos
        return 0 <= x < self.size and 0 <= y < self.size

    def neighbors(self, pos: Tuple[int, int]) -> List[Tuple[Direction, Position]]:
        """Return the in-bounds neighbours of ``pos`` tagged with their direction.

        All four directions are always enumerated, in declaration order, and
        then filtered, so a seeded random choice over the result is
        reproducible.
        """

        origin = Position(*pos)
        candidates = [(direction, origin.step(direction)) for direction in Direction]
        return [(direction, nxt) for direction, nxt in candidates if self.in_bounds(nxt)]

    def positions(self) -> Iterator[Position]:
        for y in range(self.size):
            for x in range(self.size):
                yield Position(x, y)

    def index_of(self, pos: Tuple[int, int]) -> int:
        if not self.in_bounds(pos):
            raise PreconditionError(f"Position {tuple(pos)} is outside a {self.size}x{self.size} grid")
        x, y = pos
        return y * self.size + x

    def position_of(self, index: int) -> Position:
        if not 0 <= index < self.cell_count:
            raise PreconditionError(f"Index {index} is outside a {self.size}x{self.size} grid")
        y, x = divmod(index, self.size)
        return Position(x, y)

    def is_adjacent(self, a: Tuple[int, int], b: Tuple[int, int]) -> bool:
        (ax, ay), (bx, by) = a, b
        return abs(ax - bx) + abs(ay - by) == 1


__all__ = ["Direction", "Position", "GridModel"]
