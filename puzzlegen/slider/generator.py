"""Shuffled sliding-tile puzzle generator with a solvability guarantee."""

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
from .solvability import BLANK, MIN_SLIDER_SIZE, is_solvable
from .state import TileGrid, solved_tiles

logger = logging.getLogger(__name__)

DEFAULT_SLIDER_SIZE = 4
MAX_SHUFFLE_ATTEMPTS = 100


def shuffle_until_solvable(
    size: int,
    rng: random.Random,
    *,
    max_attempts: int = MAX_SHUFFLE_ATTEMPTS,
    allow_solved: bool = True,
) -> Tuple[Tuple[int, ...], int]:
    """Return a solvable shuffled board and the number of attempts it took.

    Each attempt is a uniform Fisher-Yates shuffle of all ``size**2`` values;
    about half of them are solvable. Running out of attempts means the random
    source is broken, so it is reported instead of returning a bad board.
    With ``allow_solved=False`` the solved ordering also counts as a failed
    attempt, which is what ``SliderGenerator`` does by default.
    """

    if size < MIN_SLIDER_SIZE:
        raise PreconditionError(f"Sliding puzzle size must be at least {MIN_SLIDER_SIZE}, got {size}")
    if max_attempts < 1:
        raise PreconditionError(f"max_attempts must be positive, got {max_attempts}")

    solved = solved_tiles(size)
    tiles = list(solved)
    for attempt in range(1, max_attempts + 1):
        rng.shuffle(tiles)
        candidate = tuple(tiles)
        if not is_solvable(candidate):
            logger.debug("Shuffle attempt %d for size %d is unsolvable", attempt, size)
            continue
        if candidate == solved and not allow_solved:
            logger.debug("Shuffle attempt %d for size %d is already solved", attempt, size)
            continue
        return candidate, attempt

    logger.error("No solvable shuffle for size %d after %d attempts", size, max_attempts)
    raise InvariantBreachError(
        f"Could not find a solvable {size}x{size} arrangement in {max_attempts} shuffles"
    )


def generate_shuffled_tiles(
    size: int,
    rng: random.Random,
    *,
    max_attempts: int = MAX_SHUFFLE_ATTEMPTS,
    allow_solved: bool = True,
) -> Tuple[int, ...]:
    """Uniformly shuffled solvable board; pass ``allow_solved=False`` to skip the solved one."""

    tiles, _ = shuffle_until_solvable(size, rng, max_attempts=max_attempts, allow_solved=allow_solved)
    return tiles


@dataclass
class SliderPuzzleRecord:
    id: str
    size: int
    tiles: List[int]
    blank_index: int
    attempts: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "size": self.size,
            "tiles": list(self.tiles),
            "blank_index": self.blank_index,
            "attempts": self.attempts,
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "SliderPuzzleRecord":
        tiles = [int(tile) for tile in payload["tiles"]]
        if BLANK not in tiles:
            raise ValueError(f"Record {payload['id']} has no blank tile")
        return cls(
            id=str(payload["id"]),
            size=int(payload["size"]),
            tiles=tiles,
            blank_index=tiles.index(BLANK),
            attempts=int(payload.get("attempts", 1)),
        )

    def to_tile_grid(self) -> TileGrid:
        return TileGrid(self.size, tuple(self.tiles))


class SliderGenerator(AbstractPuzzleGenerator[SliderPuzzleRecord]):
    """Generate shuffled N-puzzles (the 15-puzzle by default) that can always be solved."""

    def __init__(
        self,
        output_dir: PathLike = "data/slider",
        *,
        size: int = DEFAULT_SLIDER_SIZE,
        seed: Optional[int] = None,
        max_attempts: int = MAX_SHUFFLE_ATTEMPTS,
        allow_solved: bool = False,
    ) -> None:
        super().__init__(output_dir, seed=seed)
        if size < MIN_SLIDER_SIZE:
            raise PreconditionError(f"Sliding puzzle size must be at least {MIN_SLIDER_SIZE}, got {size}")
        self.size = size
        self.max_attempts = max_attempts
        self.allow_solved = allow_solved

    def create_puzzle(self, *, puzzle_id: Optional[str] = None) -> SliderPuzzleRecord:
        puzzle_uuid = puzzle_id or str(uuid.uuid4())
        tiles, attempts = shuffle_until_solvable(
            self.size,
            self._rng,
            max_attempts=self.max_attempts,
            allow_solved=self.allow_solved,
        )
        logger.debug("Generated slider %s after %d shuffle(s)", puzzle_uuid, attempts)

        return SliderPuzzleRecord(
            id=puzzle_uuid,
            size=self.size,
            tiles=list(tiles),
            blank_index=tiles.index(BLANK),
            attempts=attempts,
        )


__all__ = [
    "SliderGenerator",
    "SliderPuzzleRecord",
    "generate_shuffled_tiles",
    "shuffle_until_solvable",
    "DEFAULT_SLIDER_SIZE",
    "MAX_SHUFFLE_ATTEMPTS",
]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate solvable sliding-tile puzzles")
    parser.add_argument("count", type=int, help="Number of puzzles to generate")
    parser.add_argument("--output-dir", type=Path, default=Path("data/slider"), help="Where to save metadata")
    parser.add_argument("--size", type=int, default=DEFAULT_SLIDER_SIZE, help="Tiles per side")
    parser.add_argument("--max-attempts", type=int, default=MAX_SHUFFLE_ATTEMPTS)
    parser.add_argument(
        "--allow-solved",
        action="store_true",
        help="Accept a shuffle that happens to come out already solved",
    )
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    generator = SliderGenerator(
        output_dir=args.output_dir,
        size=args.size,
        seed=args.seed,
        max_attempts=args.max_attempts,
        allow_solved=args.allow_solved,
    )
    generator.generate_dataset(args.count, metadata_path=generator.metadata_path)


if __name__ == "__main__":
    main()
