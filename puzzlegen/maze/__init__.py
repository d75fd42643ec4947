"""Maze puzzle generation, traversal and evaluation package."""

__all__ = [
    "Maze",
    "MazeCell",
    "MazeState",
    "MazeGenerator",
    "MazeEvaluator",
    "MazePuzzleRecord",
    "MazeEvaluationResult",
    "generate_maze",
]

from .model import Maze, MazeCell
from .state import MazeState
from .generator import MazeGenerator, MazePuzzleRecord, generate_maze
from .evaluator import MazeEvaluator, MazeEvaluationResult
