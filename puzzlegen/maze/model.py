"""Cell and wall-graph model for rectangular-cell mazes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import List, Sequence, Set, Tuple

import numpy as np

from ..errors import PreconditionError
from ..grid import Direction, GridModel, Position

ALL_WALLS = sum(direction.bit for direction in Direction)


@dataclass
class MazeCell:
    x: int
    y: int
    top: bool = True
    right: bool = True
    bottom: bool = True
    left: bool = True
    # Generation bookkeeping; cleared once the maze is complete.
    visited: bool = False

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    def has_wall(self, direction: Direction) -> bool:
        return getattr(self, direction.wall)

    def set_wall(self, direction: Direction, present: bool) -> None:
        setattr(self, direction.wall, present)

    @property
    def mask(self) -> int:
        return sum(direction.bit for direction in Direction if self.has_wall(direction))

    @classmethod
    def from_mask(cls, x: int, y: int, mask: int) -> "MazeCell":
        if not 0 <= mask <= ALL_WALLS:
            raise PreconditionError(f"Invalid wall mask {mask} for cell ({x}, {y})")
        cell = cls(x, y)
        for direction in Direction:
            cell.set_wall(direction, bool(mask & direction.bit))
        return cell


class Maze:
    """A ``size x size`` grid of cells where an open wall is a graph edge."""

    def __init__(self, size: int) -> None:
        self.grid = GridModel(size)
        self.size = size
        self.cells: List[List[MazeCell]] = [
            [MazeCell(x, y) for x in range(size)] for y in range(size)
        ]

    @property
    def start(self) -> Position:
        return Position(0, 0)

    @property
    def goal(self) -> Position:
        return Position(self.size - 1, self.size - 1)

    def cell(self, pos: Tuple[int, int]) -> MazeCell:
        x, y = pos
        if not self.grid.in_bounds(pos):
            raise IndexError(f"Cell ({x}, {y}) is outside a {self.size}x{self.size} maze")
        return self.cells[y][x]

    def carve(self, pos: Tuple[int, int], direction: Direction) -> Position:
        """Open the wall between ``pos`` and its neighbour in ``direction``."""

        origin = Position(*pos)
        neighbor = origin.step(direction)
        if not self.grid.in_bounds(neighbor):
            raise ValueError(f"Cannot carve {direction.value} from {tuple(origin)}: outside the maze")
        self.cell(origin).set_wall(direction, False)
        self.cell(neighbor).set_wall(direction.opposite(), False)
        return neighbor

    def open_directions(self, pos: Tuple[int, int]) -> List[Direction]:
        cell = self.cell(pos)
        return [direction for direction in Direction if not cell.has_wall(direction)]

    def reset_visited(self) -> None:
        for row in self.cells:
            for cell in row:
                cell.visited = False

    # ------------------------------------------------------------------

    def wall_array(self) -> np.ndarray:
        """Boolean array of shape ``(size, size, 4)`` indexed ``[y, x, direction]``."""

        return np.array(
            [[[cell.has_wall(direction) for direction in Direction] for cell in row] for row in self.cells],
            dtype=bool,
        )

    def edge_count(self) -> int:
        # Boundary walls are never opened, so every open flag belongs to a
        # shared wall and is seen once from each side.
        return int(np.count_nonzero(~self.wall_array())) // 2

    def reachable_from(self, pos: Tuple[int, int]) -> Set[Position]:
        origin = Position(*pos)
        seen = {origin}
        queue: deque[Position] = deque([origin])
        while queue:
            current = queue.popleft()
            for direction in self.open_directions(current):
                nxt = current.step(direction)
                if self.grid.in_bounds(nxt) and nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return seen

    def has_closed_boundary(self) -> bool:
        for pos in self.grid.positions():
            cell = self.cell(pos)
            for direction in Direction:
                if not self.grid.in_bounds(pos.step(direction)) and not cell.has_wall(direction):
                    return False
        return True

    def is_symmetric(self) -> bool:
        for pos in self.grid.positions():
            cell = self.cell(pos)
            for direction, nxt in self.grid.neighbors(pos):
                if cell.has_wall(direction) != self.cell(nxt).has_wall(direction.opposite()):
                    return False
        return True

    def is_perfect(self) -> bool:
        """True when the open walls form a spanning tree of the grid.

        A connected graph on ``n`` nodes with ``n - 1`` edges has no cycles.
        """

        return (
            self.has_closed_boundary()
            and self.is_symmetric()
            and self.edge_count() == self.grid.cell_count - 1
            and len(self.reachable_from(self.start)) == self.grid.cell_count
        )

    # ------------------------------------------------------------------

    def to_masks(self) -> List[List[int]]:
        return [[cell.mask for cell in row] for row in self.cells]

    @classmethod
    def from_masks(cls, masks: Sequence[Sequence[int]]) -> "Maze":
        size = len(masks)
        if size < 1 or any(len(row) != size for row in masks):
            raise PreconditionError("Maze wall masks must form a non-empty square grid")
        maze = cls(size)
        maze.cells = [
            [MazeCell.from_mask(x, y, int(mask)) for x, mask in enumerate(row)]
            for y, row in enumerate(masks)
        ]
        # Moves rely on both invariants to keep the player inside the grid.
        if not maze.has_closed_boundary():
            raise PreconditionError("Maze wall masks open a wall on the outer boundary")
        if not maze.is_symmetric():
            raise PreconditionError("Maze wall masks disagree across a shared wall")
        return maze


__all__ = ["ALL_WALLS", "MazeCell", "Maze"]
