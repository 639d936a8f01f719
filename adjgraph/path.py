"""Utilities for reconstructing paths from predecessor arrays."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .exceptions import InvalidVertexError

Vertex = int


def reconstruct_path(
    predecessors: Sequence[Optional[Vertex]],
    source: Vertex,
    target: Vertex,
) -> List[Vertex]:
    """Return the path from ``source`` to ``target`` using a predecessor array.

    Args:
        predecessors: Predecessor of each vertex, or ``None`` for the source
            and for unreached vertices.
        source: Source vertex identifier.
        target: Target vertex identifier.

    Returns:
        Vertices from source to target (inclusive). Returns an empty list if
        ``target`` is not reachable through the predecessor chain.

    Raises:
        InvalidVertexError: If ``source`` or ``target`` is out of range.
    """
    n = len(predecessors)
    if not (0 <= source < n):
        raise InvalidVertexError(source, n, "source")
    if not (0 <= target < n):
        raise InvalidVertexError(target, n, "target")
    if source == target:
        return [source]

    chain: List[Vertex] = []
    cur: Optional[Vertex] = target
    seen = set()
    while cur is not None:
        chain.append(cur)
        if cur == source:
            chain.reverse()
            return chain
        if cur in seen:  # predecessor cycle, only possible after a negative cycle
            break
        seen.add(cur)
        cur = predecessors[cur]

    return []


def cycle_through(predecessors: Sequence[Optional[Vertex]], start: Vertex) -> List[Vertex]:
    """Return a predecessor cycle reached by walking back from ``start``.

    Walks at most ``len(predecessors)`` steps back, which lands on a vertex
    inside the cycle if one hangs off ``start``, then collects the cycle in
    forward edge order.

    Returns:
        Cycle vertices, or an empty list if the chain ends without looping.
    """
    n = len(predecessors)
    cur: Optional[Vertex] = start
    for _ in range(n):
        if cur is None:
            return []
        cur = predecessors[cur]
    if cur is None:
        return []

    cycle = [cur]
    nxt = predecessors[cur]
    while nxt is not None and nxt != cur:
        cycle.append(nxt)
        nxt = predecessors[nxt]
        if len(cycle) > n:
            return []
    if nxt is None:
        return []
    cycle.reverse()
    return cycle


__all__ = ["reconstruct_path", "cycle_through"]
