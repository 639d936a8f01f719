"""Minimum spanning trees: Prim and Kruskal.

Both expect an undirected graph stored as pairs of directed edges (see
:meth:`~adjgraph.graph.Graph.add_undirected_edge`). Unweighted edges cost
``0``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .exceptions import GraphDisconnectedError
from .graph import Edge, Graph, Vertex
from .heap import PriorityQueue
from .logger import Logger, NoopLogger
from .unionfind import UnionFind

# (vertex, weight of the edge that reaches it, tail of that edge)
_PrimEntry = Tuple[Vertex, int, Optional[Vertex]]


@dataclass(frozen=True)
class SpanningTree:
    """Edges chosen by a spanning-tree algorithm.

    Attributes:
        weight: Sum of the chosen edge costs.
        edges: Chosen edges in the order they were accepted.
        spans: Whether every vertex is covered.
        parents: Parent of each vertex in the tree rooted at the start
            vertex (Prim only), ``None`` for the root and uncovered vertices.
    """

    weight: int
    edges: List[Edge]
    spans: bool
    parents: Optional[List[Optional[Vertex]]] = None


def prim_tree(
    graph: Graph,
    start: Vertex = 0,
    *,
    require_connected: bool = False,
    logger: Optional[Logger] = None,
) -> SpanningTree:
    """Grow a minimum spanning tree from ``start`` with Prim's algorithm.

    The heap holds ``(vertex, weight, parent)`` entries ordered by weight.
    The same vertex can be queued several times; entries for vertices
    already in the tree are skipped when popped.

    Only the component of ``start`` is covered. Vertices it cannot reach
    are left out of ``weight`` without error unless ``require_connected``
    is set.

    Args:
        graph: Undirected weighted graph.
        start: Root of the tree.
        require_connected: Raise instead of returning a partial tree.
        logger: Optional logger for the ``prim`` summary event.

    Raises:
        InvalidVertexError: If ``start`` is out of range.
        GraphDisconnectedError: If ``require_connected`` is set and some
            vertex is unreachable from ``start``.
    """
    graph.check_vertex(start, "start")
    logger = logger or NoopLogger()

    n = graph.vertex_count
    visited = [False] * n
    parents: List[Optional[Vertex]] = [None] * n
    chosen: List[Edge] = []
    total = 0
    stale = 0

    pq: PriorityQueue[_PrimEntry] = PriorityQueue.min_by(lambda entry: entry[1])
    pq.push((start, 0, None))

    while pq:
        entry = pq.pop()
        assert entry is not None, "heap underflow"
        vertex, weight, parent = entry
        if visited[vertex]:
            stale += 1
            continue
        visited[vertex] = True
        total += weight
        if parent is not None:
            parents[vertex] = parent
            chosen.append(Edge(parent, vertex, weight))
        for edge in graph.neighbors(vertex):
            if not visited[edge.target]:
                pq.push((edge.target, edge.cost, vertex))

    spans = len(chosen) == n - 1
    logger.debug("prim", start=start, weight=total, tree_edges=len(chosen), stale_pops=stale)
    if require_connected and not spans:
        raise GraphDisconnectedError(len(chosen), n - 1)
    return SpanningTree(weight=total, edges=chosen, spans=spans, parents=parents)


def prim_mst(
    graph: Graph,
    start: Vertex = 0,
    *,
    require_connected: bool = False,
    logger: Optional[Logger] = None,
) -> int:
    """Return the weight of Prim's minimum spanning tree rooted at ``start``.

    See :func:`prim_tree`.
    """
    return prim_tree(graph, start, require_connected=require_connected, logger=logger).weight


def kruskal_tree(graph: Graph, *, logger: Optional[Logger] = None) -> SpanningTree:
    """Build a minimum spanning tree with Kruskal's algorithm.

    Edges are sorted by cost (ties in any order) and accepted when they join
    two different union-find sets, until ``vertex_count - 1`` are accepted.

    Raises:
        GraphDisconnectedError: If the sorted edges run out before the tree
            covers every vertex.
    """
    logger = logger or NoopLogger()
    n = graph.vertex_count
    required = max(n - 1, 0)
    edges = sorted(graph.edges(), key=lambda e: e.cost)
    sets = UnionFind(n)

    chosen: List[Edge] = []
    total = 0
    index = 0
    while len(chosen) < required:
        if index >= len(edges):
            logger.debug("kruskal", weight=total, tree_edges=len(chosen), scanned=index)
            raise GraphDisconnectedError(len(chosen), required)
        edge = edges[index]
        index += 1
        if sets.union(edge.source, edge.target):
            chosen.append(edge)
            total += edge.cost

    logger.debug("kruskal", weight=total, tree_edges=len(chosen), scanned=index)
    return SpanningTree(weight=total, edges=chosen, spans=True)


def kruskal_mst(graph: Graph, *, logger: Optional[Logger] = None) -> int:
    """Return the weight of Kruskal's minimum spanning tree.

    See :func:`kruskal_tree`.
    """
    return kruskal_tree(graph, logger=logger).weight


__all__ = ["SpanningTree", "prim_mst", "prim_tree", "kruskal_mst", "kruskal_tree"]
