"""Breadth-first and depth-first traversal."""

from __future__ import annotations

from typing import Iterator, List, Optional

from .exceptions import InputError
from .fifo import FifoQueue
from .graph import Edge, Graph, Vertex
from .logger import Logger, NoopLogger


def bfs(graph: Graph, start: Vertex, *, logger: Optional[Logger] = None) -> List[Vertex]:
    """Return vertices reachable from ``start`` in breadth-first order.

    Vertices are marked visited when they are enqueued, so none is queued
    twice. Neighbors are scanned in adjacency-list insertion order, which
    makes the result deterministic for a given graph.

    Args:
        graph: Graph to traverse.
        start: First vertex of the traversal.
        logger: Optional logger for the ``bfs`` summary event.

    Raises:
        InvalidVertexError: If ``start`` is out of range.
    """
    graph.check_vertex(start, "start")
    logger = logger or NoopLogger()

    visited = [False] * graph.vertex_count
    order: List[Vertex] = []
    queue: FifoQueue[Vertex] = FifoQueue()
    visited[start] = True
    queue.enqueue(start)
    scanned = 0

    while not queue.is_empty():
        u = queue.dequeue()
        assert u is not None, "queue underflow"
        for edge in graph.neighbors(u):
            scanned += 1
            if not visited[edge.target]:
                visited[edge.target] = True
                queue.enqueue(edge.target)
        order.append(u)

    logger.debug("bfs", start=start, visited=len(order), edges_scanned=scanned)
    return order


def dfs(
    graph: Graph,
    start: Vertex,
    visited: Optional[List[bool]] = None,
    *,
    logger: Optional[Logger] = None,
) -> List[Vertex]:
    """Return vertices reachable from ``start`` in depth-first pre-order.

    Runs on an explicit stack but visits in exactly the order the recursive
    formulation would: a vertex is recorded, then each unvisited neighbor is
    explored fully in adjacency-list order.

    Args:
        graph: Graph to traverse.
        start: Root of the traversal.
        visited: Optional per-vertex flags shared between calls. It is
            updated in place, so calling ``dfs`` once per unvisited vertex
            walks every component exactly once. Vertices already flagged are
            skipped, and an already visited ``start`` yields ``[]``.
        logger: Optional logger for the ``dfs`` summary event.

    Raises:
        InvalidVertexError: If ``start`` is out of range.
        InputError: If ``visited`` does not have one flag per vertex.

    Examples:
        ```python
        >>> g = Graph.from_edges(4, [(0, 1), (2, 3)])
        >>> seen = [False] * 4
        >>> [dfs(g, v, seen) for v in range(4)]
        [[0, 1], [], [2, 3], []]
        ```
    """
    graph.check_vertex(start, "start")
    logger = logger or NoopLogger()
    if visited is None:
        visited = [False] * graph.vertex_count
    elif len(visited) != graph.vertex_count:
        raise InputError(
            f"visited has {len(visited)} flags, graph has {graph.vertex_count} vertices."
        )

    order: List[Vertex] = []
    if visited[start]:
        return order

    visited[start] = True
    order.append(start)
    stack: List[Iterator[Edge]] = [iter(graph.neighbors(start))]
    max_depth = 1

    while stack:
        for edge in stack[-1]:
            v = edge.target
            if not visited[v]:
                visited[v] = True
                order.append(v)
                stack.append(iter(graph.neighbors(v)))
                break
        else:
            stack.pop()
        max_depth = max(max_depth, len(stack))

    logger.debug("dfs", start=start, visited=len(order), max_depth=max_depth)
    return order


__all__ = ["bfs", "dfs"]
