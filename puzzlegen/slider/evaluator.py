"""Replay recorded slides against a stored sliding-tile puzzle."""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from ..base import AbstractPuzzleEvaluator
from ..moves import attempt_move
from .generator import SliderPuzzleRecord


@dataclass
class SliderEvaluationResult:
    puzzle_id: str
    solved: bool
    accepted_moves: int
    rejected_moves: int
    final_tiles: List[int]
    message: str

    def to_dict(self) -> dict:
        return {
            "puzzle_id": self.puzzle_id,
            "solved": self.solved,
            "accepted_moves": self.accepted_moves,
            "rejected_moves": self.rejected_moves,
            "final_tiles": list(self.final_tiles),
            "message": self.message,
        }


class SliderEvaluator(AbstractPuzzleEvaluator[SliderPuzzleRecord]):
    """Evaluate a list of tile indices slid, in order, into the blank."""

    record_type = SliderPuzzleRecord

    def evaluate(
        self,
        puzzle_id: str,
        moves: Sequence[int],
        *,
        stop_when_solved: bool = True,
    ) -> SliderEvaluationResult:
        record = self.get_record(puzzle_id)
        board = record.to_tile_grid()

        accepted = rejected = 0
        for tile_index in moves:
            if stop_when_solved and board.is_solved():
                break
            result = attempt_move(board, int(tile_index))
            if result.accepted:
                accepted += 1
            else:
                rejected += 1
            board = result.state

        solved = board.is_solved()
        if solved:
            message = f"Puzzle solved in {accepted} moves."
        elif rejected:
            message = f"Puzzle not solved; {rejected} slides were not adjacent to the blank."
        else:
            message = "Puzzle not solved."

        return SliderEvaluationResult(
            puzzle_id=puzzle_id,
            solved=solved,
            accepted_moves=accepted,
            rejected_moves=rejected,
            final_tiles=list(board.tiles),
            message=message,
        )


__all__ = ["SliderEvaluator", "SliderEvaluationResult"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate sliding puzzle move sequences")
    parser.add_argument("metadata", type=Path, help="Path to slider puzzles metadata JSON")
    parser.add_argument("puzzle_id", type=str, help="Identifier of the puzzle to evaluate")
    parser.add_argument("moves", nargs="*", type=int, help="Row-major indices of the tiles to slide")
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Replay every move even after the board is solved",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    evaluator = SliderEvaluator(args.metadata)
    result = evaluator.evaluate(args.puzzle_id, args.moves, stop_when_solved=not args.keep_going)
    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    main()
