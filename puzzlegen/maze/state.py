"""Player traversal over a generated maze."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Union

from ..grid import Direction, Position
from ..moves import MoveResult
from .model import Maze


@dataclass(frozen=True)
class MazeState:
    """Player position inside a maze plus the trail of cells already left.

    The maze itself is shared between states and never modified by moves.
    """

    maze: Maze = field(compare=False, repr=False)
    position: Position
    trail: FrozenSet[Position] = frozenset()

    @classmethod
    def start(cls, maze: Maze) -> "MazeState":
        return cls(maze=maze, position=maze.start)

    def attempt_move(self, direction: Union[Direction, str]) -> MoveResult["MazeState"]:
        direction = Direction.parse(direction)
        if self.maze.cell(self.position).has_wall(direction):
            return MoveResult(accepted=False, state=self)
        # Boundary walls are never carved, so an open wall always leads in-bounds.
        moved = replace(
            self,
            position=self.position.step(direction),
            trail=self.trail | {self.position},
        )
        return MoveResult(accepted=True, state=moved)

    def is_solved(self) -> bool:
        return self.position == self.maze.goal

    def hint_cells(self) -> FrozenSet[Position]:
        return self.trail


__all__ = ["MazeState"]
