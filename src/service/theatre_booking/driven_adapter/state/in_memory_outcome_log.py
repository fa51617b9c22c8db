import threading
from typing import TypeVar

from src.service.theatre_booking.app.interface.i_outcome_log import IOutcomeLog


T = TypeVar('T')


class InMemoryOutcomeLog(IOutcomeLog[T]):
    """List guarded by its own lock; safe to append from many worker threads."""

    def __init__(self) -> None:
        self._entries: list[T] = []
        self._lock = threading.Lock()

    def append(self, entry: T) -> None:
        with self._lock:
            self._entries.append(entry)

    def snapshot(self) -> list[T]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
