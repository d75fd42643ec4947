#!/usr/bin/env python3
"""Generate maze and sliding-puzzle datasets across a range of board sizes."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from puzzlegen.maze import MazeGenerator, MazePuzzleRecord
from puzzlegen.slider import SliderGenerator, SliderPuzzleRecord


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("data"),
        help="Directory that receives maze/ and slider/ metadata",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="Puzzles to generate per kind and size",
    )
    parser.add_argument(
        "--maze-sizes",
        type=int,
        nargs="*",
        default=[8, 10, 12, 14, 16],
        help="Maze side lengths to generate",
    )
    parser.add_argument(
        "--slider-sizes",
        type=int,
        nargs="*",
        default=[3, 4, 5],
        help="Sliding puzzle side lengths to generate",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional RNG seed; each size derives its own seed from it",
    )
    return parser.parse_args(argv)


def _size_seed(seed: Optional[int], size: int) -> Optional[int]:
    return None if seed is None else seed * 1000 + size


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    maze_dir = args.output_dir / "maze"
    slider_dir = args.output_dir / "slider"

    maze_records: List[MazePuzzleRecord] = []
    for size in args.maze_sizes:
        generator = MazeGenerator(maze_dir, size=size, seed=_size_seed(args.seed, size))
        for index in range(1, args.count + 1):
            record = generator.create_puzzle(puzzle_id=f"maze-{size}-{index:04d}")
            maze_records.append(record)
            print(f"[maze {size}x{size} {index}/{args.count}] generated {record.id}")

    slider_records: List[SliderPuzzleRecord] = []
    for size in args.slider_sizes:
        generator = SliderGenerator(slider_dir, size=size, seed=_size_seed(args.seed, size))
        for index in range(1, args.count + 1):
            record = generator.create_puzzle(puzzle_id=f"slider-{size}-{index:04d}")
            slider_records.append(record)
            print(
                f"[slider {size}x{size} {index}/{args.count}] generated {record.id} "
                f"(attempts={record.attempts})"
            )

    maze_path = maze_dir / "puzzles.json"
    slider_path = slider_dir / "puzzles.json"
    MazeGenerator(maze_dir).write_metadata(maze_records, maze_path, append=False)
    SliderGenerator(slider_dir).write_metadata(slider_records, slider_path, append=False)
    print(f"Wrote {len(maze_records)} mazes to {maze_path}")
    print(f"Wrote {len(slider_records)} sliding puzzles to {slider_path}")


if __name__ == "__main__":
    main()
