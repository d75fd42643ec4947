"""Replay recorded player moves against a stored maze."""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from ..base import AbstractPuzzleEvaluator
from ..grid import Direction
from ..moves import attempt_move
from .generator import MazePuzzleRecord
from .state import MazeState


@dataclass
class MazeEvaluationResult:
    puzzle_id: str
    solved: bool
    accepted_moves: int
    rejected_moves: int
    final_position: Tuple[int, int]
    trail: List[Tuple[int, int]]
    message: str

    def to_dict(self) -> dict:
        return {
            "puzzle_id": self.puzzle_id,
            "solved": self.solved,
            "accepted_moves": self.accepted_moves,
            "rejected_moves": self.rejected_moves,
            "final_position": list(self.final_position),
            "trail": [list(cell) for cell in self.trail],
            "message": self.message,
        }


class MazeEvaluator(AbstractPuzzleEvaluator[MazePuzzleRecord]):
    """Evaluate a move list by walking it through the maze from the start cell."""

    record_type = MazePuzzleRecord

    def evaluate(
        self,
        puzzle_id: str,
        moves: Sequence[Union[Direction, str]],
        *,
        stop_at_goal: bool = True,
    ) -> MazeEvaluationResult:
        record = self.get_record(puzzle_id)
        state = MazeState.start(record.to_maze())

        accepted = rejected = 0
        for move in moves:
            if stop_at_goal and state.is_solved():
                break
            result = attempt_move(state, move)
            if result.accepted:
                accepted += 1
            else:
                rejected += 1
            state = result.state

        solved = state.is_solved()
        if solved and rejected:
            message = f"Reached the goal in {accepted} moves ({rejected} blocked by walls)."
        elif solved:
            message = f"Reached the goal in {accepted} moves."
        elif not moves:
            message = "No moves supplied."
        else:
            message = "Moves do not reach the goal."

        return MazeEvaluationResult(
            puzzle_id=puzzle_id,
            solved=solved,
            accepted_moves=accepted,
            rejected_moves=rejected,
            final_position=tuple(state.position),
            trail=sorted(tuple(cell) for cell in state.hint_cells()),
            message=message,
        )


__all__ = ["MazeEvaluator", "MazeEvaluationResult"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate maze move sequences")
    parser.add_argument("metadata", type=Path, help="Path to maze puzzles metadata JSON")
    parser.add_argument("puzzle_id", type=str, help="Identifier of the puzzle to evaluate")
    parser.add_argument("moves", nargs="*", help="Moves to replay (up, right, down, left)")
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Replay every move even after the goal has been reached",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    evaluator = MazeEvaluator(args.metadata)
    result = evaluator.evaluate(args.puzzle_id, args.moves, stop_at_goal=not args.keep_going)
    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    main()
