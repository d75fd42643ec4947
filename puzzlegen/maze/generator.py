"""Perfect-maze generator built on an iterative recursive backtracker."""

from __future__ import annotations

import argparse
import logging
import random
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from ..base import AbstractPuzzleGenerator, PathLike
from ..errors import InvariantBreachError, PreconditionError
from ..grid import Position
from .model import Maze

logger = logging.getLogger(__name__)

MIN_MAZE_SIZE = 1
DEFAULT_MAZE_SIZE = 8


def generate_maze(size: int, rng: random.Random) -> Maze:
    """Carve a spanning tree over a ``size x size`` grid.

    Depth-first backtracking from ``(0, 0)``: the top of the stack extends
    into a uniformly chosen unvisited neighbour, or is popped when it has
    none. Every cell is visited before the stack empties, and each carve
    joins a new cell to the tree, so the result has exactly ``size**2 - 1``
    open walls. ``visited`` flags are cleared before returning.
    """

    if size < MIN_MAZE_SIZE:
        raise PreconditionError(f"Maze size must be at least {MIN_MAZE_SIZE}, got {size}")

    maze = Maze(size)
    start = maze.start
    maze.cell(start).visited = True
    stack: List[Position] = [start]

    while stack:
        current = stack[-1]
        candidates = [
            (direction, nxt)
            for direction, nxt in maze.grid.neighbors(current)
            if not maze.cell(nxt).visited
        ]
        if candidates:
            direction, nxt = rng.choice(candidates)
            maze.carve(current, direction)
            maze.cell(nxt).visited = True
            stack.append(nxt)
        else:
            stack.pop()

    maze.reset_visited()
    return maze


@dataclass
class MazePuzzleRecord:
    id: str
    size: int
    walls: List[List[int]]
    start: Tuple[int, int]
    goal: Tuple[int, int]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "size": self.size,
            "walls": self.walls,
            "start": list(self.start),
            "goal": list(self.goal),
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "MazePuzzleRecord":
        return cls(
            id=str(payload["id"]),
            size=int(payload["size"]),
            walls=[list(map(int, row)) for row in payload["walls"]],
            start=Position(*map(int, payload["start"])),
            goal=Position(*map(int, payload["goal"])),
        )

    def to_maze(self) -> Maze:
        maze = Maze.from_masks(self.walls)
        if maze.size != self.size:
            raise ValueError(f"Record {self.id} declares size {self.size} but stores a {maze.size}x{maze.size} grid")
        return maze


class MazeGenerator(AbstractPuzzleGenerator[MazePuzzleRecord]):
    """Generate perfect mazes navigated from the top-left to the bottom-right cell."""

    def __init__(
        self,
        output_dir: PathLike = "data/maze",
        *,
        size: int = DEFAULT_MAZE_SIZE,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(output_dir, seed=seed)
        if size < MIN_MAZE_SIZE:
            raise PreconditionError(f"Maze size must be at least {MIN_MAZE_SIZE}, got {size}")
        self.size = size

    def create_puzzle(self, *, puzzle_id: Optional[str] = None) -> MazePuzzleRecord:
        puzzle_uuid = puzzle_id or str(uuid.uuid4())
        maze = generate_maze(self.size, self._rng)
        if not maze.is_perfect():
            logger.error("Maze %s (size %d) is not a spanning tree", puzzle_uuid, self.size)
            raise InvariantBreachError("Failed to generate a perfect maze")
        logger.debug("Generated maze %s with %d passages", puzzle_uuid, maze.edge_count())

        return MazePuzzleRecord(
            id=puzzle_uuid,
            size=self.size,
            walls=maze.to_masks(),
            start=maze.start,
            goal=maze.goal,
        )


__all__ = [
    "MazeGenerator",
    "MazePuzzleRecord",
    "generate_maze",
    "MIN_MAZE_SIZE",
    "DEFAULT_MAZE_SIZE",
]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate perfect maze puzzles")
    parser.add_argument("count", type=int, help="Number of puzzles to generate")
    parser.add_argument("--output-dir", type=Path, default=Path("data/maze"), help="Where to save metadata")
    parser.add_argument("--size", type=int, default=DEFAULT_MAZE_SIZE, help="Cells per side")
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    generator = MazeGenerator(
        output_dir=args.output_dir,
        size=args.size,
        seed=args.seed,
    )
    generator.generate_dataset(args.count, metadata_path=generator.metadata_path)


if __name__ == "__main__":
    main()
