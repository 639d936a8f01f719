"""Binary heap priority queue ordered by a caller-supplied predicate.

Unlike :mod:`heapq`, entries need not be comparable themselves: the queue
only ever asks ``before(a, b)``, "should ``a`` dequeue before ``b``". There
is no key or identity beyond that, so the same logical vertex may sit in the
heap several times. Prim and Dijkstra rely on this and discard stale entries
when they are popped.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")

Comparator = Callable[[T, T], bool]


class PriorityQueue(Generic[T]):
    """Array-backed binary heap.

    Args:
        comparator: Strict weak ordering, ``comparator(a, b)`` is ``True``
            when ``a`` must dequeue before ``b``.
        items: Optional initial contents, built in O(n) with :meth:`heapify`.

    Examples:
        ```python
        >>> pq = PriorityQueue(lambda a, b: a > b, [3, 1, 4, 1, 5])
        >>> [pq.pop() for _ in range(len(pq))]
        [5, 4, 3, 1, 1]
        ```
    """

    def __init__(self, comparator: Comparator[T], items: Optional[Iterable[T]] = None) -> None:
        self._before = comparator
        self._nodes: List[T] = []
        if items is not None:
            self.heapify(items)

    @classmethod
    def min_by(cls, key: Callable[[T], K], items: Optional[Iterable[T]] = None) -> "PriorityQueue[T]":
        """Return a queue that dequeues the entry with the smallest ``key`` first."""
        return cls(lambda a, b: key(a) < key(b), items)  # type: ignore[operator]

    @classmethod
    def max_by(cls, key: Callable[[T], K], items: Optional[Iterable[T]] = None) -> "PriorityQueue[T]":
        """Return a queue that dequeues the entry with the largest ``key`` first."""
        return cls(lambda a, b: key(a) > key(b), items)  # type: ignore[operator]

    # ---- index arithmetic ----------------------------------------------

    @staticmethod
    def _parent(i: int) -> int:
        return (i - 1) // 2

    @staticmethod
    def _left(i: int) -> int:
        return 2 * i + 1

    # ---- internals ------------------------------------------------------

    def _sift_up(self, index: int) -> None:
        nodes = self._nodes
        child = nodes[index]
        while index > 0:
            parent = self._parent(index)
            if not self._before(child, nodes[parent]):
                break
            nodes[index] = nodes[parent]
            index = parent
        nodes[index] = child

    def _sift_down(self, index: int) -> None:
        nodes = self._nodes
        end = len(nodes)
        while True:
            left = self._left(index)
            right = left + 1
            first = index
            if left < end and self._before(nodes[left], nodes[first]):
                first = left
            # compared against the current winner, so when both children
            # qualify the one ranked ahead of its sibling is taken
            if right < end and self._before(nodes[right], nodes[first]):
                first = right
            if first == index:
                return
            nodes[index], nodes[first] = nodes[first], nodes[index]
            index = first

    def _check_invariant(self) -> bool:
        """Return ``True`` when no child dequeues strictly before its parent."""
        nodes = self._nodes
        return all(not self._before(nodes[i], nodes[self._parent(i)]) for i in range(1, len(nodes)))

    # ---- public API -----------------------------------------------------

    def heapify(self, items: Iterable[T]) -> None:
        """Replace the contents with ``items`` in O(n).

        Sifts down from the last parent index toward the root instead of
        pushing one by one.
        """
        self._nodes = list(items)
        for i in range(len(self._nodes) // 2 - 1, -1, -1):
            self._sift_down(i)

    def push(self, value: T) -> None:
        """Insert ``value`` in O(log n)."""
        self._nodes.append(value)
        self._sift_up(len(self._nodes) - 1)

    def pop(self) -> Optional[T]:
        """Remove and return the front entry, or ``None`` if the queue is empty."""
        nodes = self._nodes
        if not nodes:
            return None
        last = len(nodes) - 1
        nodes[0], nodes[last] = nodes[last], nodes[0]
        value = nodes.pop()
        if nodes:
            self._sift_down(0)
        return value

    def peek(self) -> Optional[T]:
        """Return the front entry without removing it, or ``None`` if empty."""
        return self._nodes[0] if self._nodes else None

    def is_empty(self) -> bool:
        return not self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def drain(self) -> Iterator[T]:
        """Pop entries in priority order until the queue is empty."""
        while self._nodes:
            value = self.pop()
            assert value is not None, "heap underflow"
            yield value

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._nodes)})"


__all__ = ["Comparator", "PriorityQueue"]
