"""Topological ordering of directed acyclic graphs."""

from __future__ import annotations

from typing import Iterator, List, Optional

from .exceptions import CycleDetectedError
from .fifo import FifoQueue
from .graph import Edge, Graph, Vertex
from .logger import Logger, NoopLogger


def in_degrees(graph: Graph) -> List[int]:
    """Return the number of incoming edges of every vertex.

    Parallel edges count once each.
    """
    degree = [0] * graph.vertex_count
    for edge in graph.edges():
        degree[edge.target] += 1
    return degree


def topo_sort_dfs(graph: Graph, *, logger: Optional[Logger] = None) -> List[Vertex]:
    """Return a topological order built from reversed DFS post-order.

    Roots are taken in vertex id order. A vertex is appended only after all
    of its descendants, and the whole post-order is reversed at the end.

    The graph must be a DAG. Cycles are not detected: on a cyclic graph the
    result is still a permutation of all vertices, but some edge will point
    backwards in it. Use :func:`topo_sort_kahn` when the input may be cyclic.
    """
    logger = logger or NoopLogger()
    n = graph.vertex_count
    visited = [False] * n
    post: List[Vertex] = []

    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        path = [root]
        stack: List[Iterator[Edge]] = [iter(graph.neighbors(root))]
        while stack:
            for edge in stack[-1]:
                v = edge.target
                if not visited[v]:
                    visited[v] = True
                    path.append(v)
                    stack.append(iter(graph.neighbors(v)))
                    break
            else:
                stack.pop()
                post.append(path.pop())

    post.reverse()
    logger.debug("topo_sort_dfs", vertices=n)
    return post


def topo_sort_kahn(graph: Graph, *, logger: Optional[Logger] = None) -> List[Vertex]:
    """Return a topological order using Kahn's algorithm.

    Zero in-degree vertices are queued in id order; every dequeued vertex is
    emitted and lowers the in-degree of its neighbors, queueing those that
    reach zero.

    Raises:
        CycleDetectedError: If some vertices never reach in-degree zero. The
            exception carries the partial order emitted so far and the
            unresolved vertices.

    Examples:
        ```python
        >>> g = Graph.from_edges(3, [(2, 0), (0, 1)])
        >>> topo_sort_kahn(g)
        [2, 0, 1]
        ```
    """
    logger = logger or NoopLogger()
    n = graph.vertex_count
    degree = in_degrees(graph)
    queue: FifoQueue[Vertex] = FifoQueue(v for v in range(n) if degree[v] == 0)
    order: List[Vertex] = []

    while not queue.is_empty():
        u = queue.dequeue()
        assert u is not None, "queue underflow"
        order.append(u)
        for edge in graph.neighbors(u):
            degree[edge.target] -= 1
            if degree[edge.target] == 0:
                queue.enqueue(edge.target)

    if len(order) < n:
        remaining = [v for v in range(n) if degree[v] > 0]
        logger.debug("topo_sort_kahn", vertices=n, ordered=len(order), cycle=True)
        raise CycleDetectedError(order, remaining)

    logger.debug("topo_sort_kahn", vertices=n, ordered=len(order), cycle=False)
    return order


__all__ = ["in_degrees", "topo_sort_dfs", "topo_sort_kahn"]
