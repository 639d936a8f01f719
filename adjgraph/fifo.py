"""Unbounded first-in first-out queue used by BFS and Kahn's sort."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


class FifoQueue(Generic[T]):
    """FIFO queue with O(1) enqueue and dequeue.

    ``dequeue`` and ``front`` return ``None`` on an empty queue rather than
    raising.
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: Deque[T] = deque(items or ())

    def enqueue(self, value: T) -> None:
        self._items.append(value)

    def dequeue(self) -> Optional[T]:
        """Remove and return the oldest element, or ``None`` if empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def front(self) -> Optional[T]:
        """Return the oldest element without removing it."""
        return self._items[0] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


__all__ = ["FifoQueue"]
