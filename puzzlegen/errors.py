"""Error taxonomy shared by the puzzle generators."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by the toolkit."""


class PreconditionError(PuzzleError, ValueError):
    """Raised when a caller supplies an invalid size or malformed board."""


class InvariantBreachError(PuzzleError, RuntimeError):
    """Raised when a generator cannot uphold its correctness guarantee.

    This signals a defect in the generator or in the random source it was
    given, never an ordinary runtime outcome.
    """


__all__ = ["PuzzleError", "PreconditionError", "InvariantBreachError"]
