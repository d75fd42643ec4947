"""Single entry point for applying player moves to a puzzle state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

StateT = TypeVar("StateT")


@dataclass(frozen=True)
class MoveResult(Generic[StateT]):
    """Outcome of a move attempt.

    Rejected moves carry the unchanged state; they mean "blocked", not an error.
    """

    accepted: bool
    state: StateT


def attempt_move(state: Any, move: Any) -> MoveResult:
    """Apply ``move`` to ``state`` and return the resulting state.

    ``move`` is a :class:`~puzzlegen.grid.Direction` (or its name) for maze
    states and a tile index for tile grids. The input state is never mutated.
    """

    return state.attempt_move(move)


def is_solved(state: Any) -> bool:
    return state.is_solved()


__all__ = ["MoveResult", "attempt_move", "is_solved"]
