"""
Outcome Log Interface

Append-only sink shared by every customer worker.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar


T = TypeVar('T')


class IOutcomeLog(ABC, Generic[T]):
    @abstractmethod
    def append(self, entry: T) -> None:
        """Append one entry; insertion order is the order appenders got exclusive access."""
        pass

    @abstractmethod
    def snapshot(self) -> list[T]:
        """Copy of every entry so far, in insertion order."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass
