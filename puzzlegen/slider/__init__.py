"""Sliding-tile puzzle generation, solvability and evaluation package."""

__all__ = [
    "BLANK",
    "TileGrid",
    "SliderGenerator",
    "SliderEvaluator",
    "SliderPuzzleRecord",
    "SliderEvaluationResult",
    "generate_shuffled_tiles",
    "is_solvable",
]

from .solvability import BLANK, is_solvable
from .state import TileGrid
from .generator import SliderGenerator, SliderPuzzleRecord, generate_shuffled_tiles
from .evaluator import SliderEvaluator, SliderEvaluationResult
