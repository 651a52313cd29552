"""Bounded undo history.

- Each entry holds: action, was_on (bulb state before the action ran)
- Entries are stored oldest -> newest
- Length never exceeds capacity
- When full, the oldest entry is evicted before the new one is appended
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, List, Optional

from lumen.core.actions import Action
from lumen.core.errors import EmptyHistory

DEFAULT_CAPACITY = 10


@dataclass(frozen=True)
class HistoryEntry:
    action: Action
    was_on: bool

    def name(self) -> str:
        return self.action.name()


class BoundedHistory:
    """Fixed-capacity FIFO-evicting stack of applied actions."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"history capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._entries: Deque[HistoryEntry] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, entry: HistoryEntry) -> Optional[HistoryEntry]:
        """Append an entry. Returns the evicted entry, if any."""
        evicted = None
        if len(self._entries) >= self._capacity:
            evicted = self._entries.popleft()
        self._entries.append(entry)
        return evicted

    def pop(self) -> HistoryEntry:
        """Remove and return the newest entry."""
        if not self._entries:
            raise EmptyHistory()
        return self._entries.pop()

    def peek(self) -> Optional[HistoryEntry]:
        if not self._entries:
            return None
        return self._entries[-1]

    def names(self) -> List[str]:
        return [e.name() for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))
