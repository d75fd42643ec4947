"""Inversion-parity solvability test for sliding-tile puzzles.

Every legal slide changes the inversion parity of the flattened board in
lockstep with the parity of the blank's row, so the reachable boards form
exactly half of all permutations:

* odd ``N``: solvable iff the number of inversions is even;
* even ``N``: solvable iff ``inversions + blank row`` is odd, where the blank
  row is counted from the bottom with the bottom row numbered 1.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..errors import PreconditionError

BLANK = 0
MIN_SLIDER_SIZE = 2


def validate_tiles(tiles: Sequence[int]) -> int:
    """Check that ``tiles`` is a complete board and return its side length."""

    size = math.isqrt(len(tiles))
    if size * size != len(tiles) or size < MIN_SLIDER_SIZE:
        raise PreconditionError(
            f"A tile sequence must hold N*N values with N >= {MIN_SLIDER_SIZE}, got {len(tiles)}"
        )
    if sorted(tiles) != list(range(size * size)):
        raise PreconditionError(
            f"Tiles must be 1..{size * size - 1} exactly once plus a single blank ({BLANK})"
        )
    return size


def count_inversions(tiles: Sequence[int]) -> int:
    """Count pairs ``i < j`` with ``tiles[i] > tiles[j]``, ignoring the blank."""

    values = np.asarray([tile for tile in tiles if tile != BLANK], dtype=np.int64)
    if values.size < 2:
        return 0
    greater = values[:, None] > values[None, :]
    return int(np.count_nonzero(np.triu(greater, k=1)))


def blank_row_from_bottom(tiles: Sequence[int], size: int) -> int:
    """Row of the blank counted upward from 1 at the bottom row."""

    blank_index = list(tiles).index(BLANK)
    return size - blank_index // size


def is_solvable(tiles: Sequence[int]) -> bool:
    size = validate_tiles(tiles)
    inversions = count_inversions(tiles)
    if size % 2 == 1:
        return inversions % 2 == 0
    return (inversions + blank_row_from_bottom(tiles, size)) % 2 == 1


__all__ = [
    "BLANK",
    "MIN_SLIDER_SIZE",
    "validate_tiles",
    "count_inversions",
    "blank_row_from_bottom",
    "is_solvable",
]
