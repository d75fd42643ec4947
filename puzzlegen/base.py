"""Abstract interfaces for puzzle generation and evaluation."""

from __future__ import annotations

import json
import random
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar, Dict, Generic, Iterable, List, Optional, Type, TypeVar, Union

PathLike = Union[str, Path]
RecordT = TypeVar("RecordT")


def append_records(path: PathLike, payload: List[Dict[str, Any]], *, append: bool = True) -> Path:
    """Write ``payload`` as a JSON list, after any records already in ``path``."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    existing: List[Dict[str, Any]] = []
    if append and path.exists():
        existing = read_records(path)
    path.write_text(json.dumps(existing + payload, indent=2), encoding="utf-8")
    return path


def read_records(path: PathLike) -> List[Dict[str, Any]]:
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"Puzzle metadata in {path} must be a list of records")
    return raw


class AbstractPuzzleGenerator(ABC, Generic[RecordT]):
    """Base class for dataset builders that emit puzzle records.

    Subclasses draw all randomness from ``self._rng`` so a seed reproduces a
    whole dataset.
    """

    def __init__(self, output_dir: PathLike, *, seed: Optional[int] = None) -> None:
        self.output_dir = Path(output_dir)
        self.seed = seed
        self._rng = random.Random(seed)

    @property
    def metadata_path(self) -> Path:
        return self.output_dir / "puzzles.json"

    @abstractmethod
    def create_puzzle(self, *, puzzle_id: Optional[str] = None) -> RecordT:
        """Create one puzzle, optionally with a caller-chosen id."""

    def create_random_puzzle(self) -> RecordT:
        return self.create_puzzle()

    def generate_dataset(
        self,
        count: int,
        *,
        metadata_path: Optional[PathLike] = None,
        append: bool = True,
    ) -> List[RecordT]:
        records = [self.create_random_puzzle() for _ in range(count)]
        if metadata_path is not None:
            self.write_metadata(records, metadata_path, append=append)
        return records

    def write_metadata(
        self,
        records: Iterable[RecordT],
        metadata_path: PathLike,
        *,
        append: bool = True,
    ) -> None:
        append_records(metadata_path, [record.to_dict() for record in records], append=append)


class AbstractPuzzleEvaluator(ABC, Generic[RecordT]):
    """Replays candidate solutions against records from a metadata file.

    ``record_type`` must offer ``from_dict``; records are parsed once, on load.
    """

    record_type: ClassVar[Type[Any]]

    def __init__(self, metadata_path: PathLike) -> None:
        self.metadata_path = Path(metadata_path)
        if not self.metadata_path.exists():
            raise FileNotFoundError(f"Metadata file not found: {self.metadata_path}")
        self._records: Dict[str, RecordT] = {}
        for payload in read_records(self.metadata_path):
            if not payload.get("id"):
                raise ValueError("Each puzzle record must include an 'id'")
            self._records[str(payload["id"])] = self.record_type.from_dict(payload)

    @property
    def records(self) -> Dict[str, RecordT]:
        return self._records

    def get_record(self, puzzle_id: str) -> RecordT:
        try:
            return self._records[puzzle_id]
        except KeyError as exc:
            raise KeyError(f"Puzzle id '{puzzle_id}' not found in metadata") from exc

    @abstractmethod
    def evaluate(self, puzzle_id: str, moves, **kwargs):
        """Replay ``moves`` against the puzzle stored under ``puzzle_id``."""


__all__ = [
    "AbstractPuzzleGenerator",
    "AbstractPuzzleEvaluator",
    "PathLike",
    "append_records",
    "read_records",
]
