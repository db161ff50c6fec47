"""Abstract interfaces for puzzle generation."""

from __future__ import annotations

import dataclasses
import random
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

RecordT = TypeVar("RecordT")


class AbstractPuzzleGenerator(ABC, Generic[RecordT]):
    """Base class for builders that emit puzzle records.

    Each generator owns a private ``random.Random`` so that two generators
    created with the same seed produce the same sequence of puzzles.
    """

    def __init__(self, *, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    @abstractmethod
    def create_puzzle(self, *args, **kwargs) -> RecordT:
        """Create a puzzle from the provided resources."""

    def create_random_puzzle(self) -> RecordT:
        """Create a single randomized puzzle instance."""
        return self.create_puzzle()

    def generate_dataset(self, count: int) -> List[RecordT]:
        """Generate a batch of puzzles in memory."""
        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.create_random_puzzle() for _ in range(count)]

    def record_to_dict(self, record: RecordT) -> Dict[str, Any]:
        """Dictionary serialization hook for puzzle records."""

        if hasattr(record, "to_dict"):
            return getattr(record, "to_dict")()
        return dataclasses.asdict(record)


__all__ = [
    "AbstractPuzzleGenerator",
    "RecordT",
]
