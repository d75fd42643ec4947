"""Sliding-tile board and slide moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..errors import PreconditionError
from ..grid import GridModel, Position
from ..moves import MoveResult
from .solvability import BLANK, MIN_SLIDER_SIZE, validate_tiles


def solved_tiles(size: int) -> Tuple[int, ...]:
    """Return ``1, 2, ..., size**2 - 1`` followed by the blank."""

    if size < MIN_SLIDER_SIZE:
        raise PreconditionError(f"Sliding puzzle size must be at least {MIN_SLIDER_SIZE}, got {size}")
    return tuple(range(1, size * size)) + (BLANK,)


@dataclass(frozen=True)
class TileGrid:
    size: int
    tiles: Tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", tuple(int(tile) for tile in self.tiles))
        if validate_tiles(self.tiles) != self.size:
            raise PreconditionError(f"{len(self.tiles)} tiles do not fill a {self.size}x{self.size} board")

    @classmethod
    def solved(cls, size: int) -> "TileGrid":
        return cls(size, solved_tiles(size))

    @classmethod
    def from_tiles(cls, tiles: Sequence[int]) -> "TileGrid":
        return cls(validate_tiles(tiles), tuple(tiles))

    @property
    def grid(self) -> GridModel:
        return GridModel(self.size)

    @property
    def blank_index(self) -> int:
        return self.tiles.index(BLANK)

    @property
    def blank_position(self) -> Position:
        return self.grid.position_of(self.blank_index)

    def movable_indices(self) -> List[int]:
        grid = self.grid
        return sorted(grid.index_of(pos) for _, pos in grid.neighbors(self.blank_position))

    def can_slide(self, tile_index: int) -> bool:
        if isinstance(tile_index, bool) or not isinstance(tile_index, int):
            return False
        if not 0 <= tile_index < len(self.tiles):
            return False
        grid = self.grid
        return grid.is_adjacent(grid.position_of(tile_index), self.blank_position)

    def attempt_move(self, tile_index: int) -> MoveResult["TileGrid"]:
        """Slide the tile at ``tile_index`` into the blank if they touch."""

        if not self.can_slide(tile_index):
            return MoveResult(accepted=False, state=self)
        tiles = list(self.tiles)
        blank = self.blank_index
        tiles[blank], tiles[tile_index] = tiles[tile_index], BLANK
        return MoveResult(accepted=True, state=TileGrid(self.size, tuple(tiles)))

    def is_solved(self) -> bool:
        return self.tiles == solved_tiles(self.size)

    def rows(self) -> List[List[int]]:
        return [list(self.tiles[r * self.size:(r + 1) * self.size]) for r in range(self.size)]


__all__ = ["TileGrid", "solved_tiles"]
