"""Procedural grid-puzzle generation toolkit."""

__all__ = [
    "AbstractPuzzleGenerator",
    "AbstractPuzzleEvaluator",
    "PuzzleError",
    "PreconditionError",
    "InvariantBreachError",
    "Direction",
    "Position",
    "GridModel",
    "MoveResult",
    "attempt_move",
    "is_solved",
    "Maze",
    "MazeCell",
    "MazeState",
    "MazeGenerator",
    "MazeEvaluator",
    "MazePuzzleRecord",
    "MazeEvaluationResult",
    "generate_maze",
    "BLANK",
    "TileGrid",
    "SliderGenerator",
    "SliderEvaluator",
    "SliderPuzzleRecord",
    "SliderEvaluationResult",
    "generate_shuffled_tiles",
    "is_solvable",
]

from .base import AbstractPuzzleGenerator, AbstractPuzzleEvaluator
from .errors import PuzzleError, PreconditionError, InvariantBreachError
from .grid import Direction, Position, GridModel
from .moves import MoveResult, attempt_move, is_solved
from .maze import (
    Maze,
    MazeCell,
    MazeState,
    MazeGenerator,
    MazeEvaluator,
    MazePuzzleRecord,
    MazeEvaluationResult,
    generate_maze,
)
from .slider import (
    BLANK,
    TileGrid,
    SliderGenerator,
    SliderEvaluator,
    SliderPuzzleRecord,
    SliderEvaluationResult,
    generate_shuffled_tiles,
    is_solvable,
)
