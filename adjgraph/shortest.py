"""Single-source shortest paths: Dijkstra and Bellman-Ford.

Both return per-vertex distances with :data:`INF` for unreachable vertices.
The ``*_paths`` variants also keep the predecessor array so callers can
rebuild the actual routes with :meth:`ShortestPaths.path_to`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from .config import DEFAULT_CONFIG, AlgorithmConfig
from .exceptions import AlgorithmError, NegativeCycleError, NegativeWeightError
from .graph import Graph, Vertex
from .heap import PriorityQueue
from .logger import Logger, NoopLogger
from .path import cycle_through, reconstruct_path

Distance = Union[int, float]

#: Distance of a vertex the source cannot reach.
INF: float = math.inf


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessors produced by a shortest-path run.

    Attributes:
        source: Source vertex of the run.
        distances: Distance from ``source`` per vertex, :data:`INF` when
            unreachable.
        predecessors: Previous vertex on a shortest path, ``None`` for the
            source and for unreachable vertices.
        counters: Work counters of the run (edges scanned, relaxations, ...).
    """

    source: Vertex
    distances: List[Distance]
    predecessors: List[Optional[Vertex]]
    counters: Dict[str, int]

    def reachable(self, v: Vertex) -> bool:
        return self.distances[v] != INF

    def distance(self, v: Vertex) -> Distance:
        return self.distances[v]

    def path_to(self, target: Vertex) -> List[Vertex]:
        """Return the vertices of a shortest path from the source to ``target``.

        Returns:
            ``[source, ..., target]``, or ``[]`` if ``target`` is unreachable.
        """
        return reconstruct_path(self.predecessors, self.source, target)


def dijkstra_paths(
    graph: Graph,
    source: Vertex,
    *,
    config: Optional[AlgorithmConfig] = None,
    logger: Optional[Logger] = None,
) -> ShortestPaths:
    """Run Dijkstra's algorithm from ``source``.

    Uses a binary min-heap of ``(vertex, distance)`` entries with lazy
    deletion: an improved distance is pushed as a new entry and entries for
    already finalized vertices are dropped when popped.

    Args:
        graph: Graph with non-negative weights. Unweighted edges cost ``0``.
        source: Source vertex.
        config: ``check_negative_weights`` controls the precondition scan.
        logger: Optional logger for the ``dijkstra`` summary event.

    Returns:
        Distances, predecessors and counters.

    Raises:
        InvalidVertexError: If ``source`` is out of range.
        NegativeWeightError: If the graph has a negative weight and the
            check is enabled. With the check disabled such graphs give
            undefined results.
    """
    graph.check_vertex(source, "source")
    cfg = config or DEFAULT_CONFIG
    logger = logger or NoopLogger()

    if cfg.check_negative_weights:
        bad = graph.negative_edge()
        if bad is not None:
            raise NegativeWeightError(
                f"negative weight {bad.weight} on edge ({bad.source}, {bad.target}); "
                "use bellman_ford instead"
            )

    n = graph.vertex_count
    dist: List[Distance] = [INF] * n
    pred: List[Optional[Vertex]] = [None] * n
    done = [False] * n
    dist[source] = 0

    pq: PriorityQueue[Tuple[Vertex, Distance]] = PriorityQueue.min_by(lambda entry: entry[1])
    pq.push((source, 0))
    counters = {"edges_scanned": 0, "relaxations": 0, "pops": 0, "stale_pops": 0, "max_heap": 1}

    while pq:
        entry = pq.pop()
        assert entry is not None, "heap underflow"
        counters["pops"] += 1
        u, d_u = entry
        if done[u]:
            counters["stale_pops"] += 1
            continue
        done[u] = True
        for edge in graph.neighbors(u):
            counters["edges_scanned"] += 1
            nd = d_u + edge.cost
            if nd < dist[edge.target]:
                dist[edge.target] = nd
                pred[edge.target] = u
                counters["relaxations"] += 1
                pq.push((edge.target, nd))
        counters["max_heap"] = max(counters["max_heap"], len(pq))

    logger.debug("dijkstra", source=source, **counters)
    return ShortestPaths(source=source, distances=dist, predecessors=pred, counters=counters)


def dijkstra(
    graph: Graph,
    source: Vertex,
    *,
    config: Optional[AlgorithmConfig] = None,
    logger: Optional[Logger] = None,
) -> List[Distance]:
    """Return Dijkstra distances from ``source``, :data:`INF` for unreachable vertices.

    See :func:`dijkstra_paths` for details and raised errors.
    """
    return dijkstra_paths(graph, source, config=config, logger=logger).distances


def bellman_ford_paths(
    graph: Graph,
    source: Vertex,
    *,
    config: Optional[AlgorithmConfig] = None,
    logger: Optional[Logger] = None,
) -> ShortestPaths:
    """Run Bellman-Ford from ``source`` and check for negative cycles.

    Every pass scans the complete edge list and relaxes edges whose tail has
    a finite distance. After at most ``vertex_count - 1`` passes one more
    full scan runs; an edge that still relaxes proves a negative cycle
    reachable from the source.

    Args:
        graph: Graph, negative weights allowed. Unweighted edges cost ``0``.
        source: Source vertex.
        config: ``early_exit`` stops after a pass without changes;
            ``max_passes`` caps the number of passes.
        logger: Optional logger for the ``bellman_ford`` summary event.

    Returns:
        Distances, predecessors and counters.

    Raises:
        InvalidVertexError: If ``source`` is out of range.
        NegativeCycleError: If a negative cycle is reachable from
            ``source``.
        AlgorithmError: If ``max_passes`` stopped relaxation before
            ``vertex_count - 1`` passes while an edge still relaxes.

    Examples:
        ```python
        >>> g = Graph.from_edges(3, [(0, 1, 4), (0, 2, 5), (2, 1, -3)])
        >>> bellman_ford(g, 0)
        [0, 2, 5]
        ```
    """
    graph.check_vertex(source, "source")
    cfg = config or DEFAULT_CONFIG
    logger = logger or NoopLogger()

    n = graph.vertex_count
    edges = [(e.source, e.target, e.cost) for e in graph.edges()]
    dist: List[Distance] = [INF] * n
    pred: List[Optional[Vertex]] = [None] * n
    dist[source] = 0

    limit = n - 1 if cfg.max_passes is None else min(cfg.max_passes, n - 1)
    counters = {"passes": 0, "edges_scanned": 0, "relaxations": 0}

    for _ in range(limit):
        counters["passes"] += 1
        updated = False
        for u, v, w in edges:
            counters["edges_scanned"] += 1
            du = dist[u]
            if du == INF:
                continue
            if du + w < dist[v]:
                dist[v] = du + w
                pred[v] = u
                counters["relaxations"] += 1
                updated = True
        if not updated and cfg.early_exit:
            break

    offending: Optional[Tuple[int, int, int]] = None
    last_relaxed: Optional[Vertex] = None
    for u, v, w in edges:
        du = dist[u]
        if du != INF and du + w < dist[v]:
            if offending is None:
                offending = (u, v, w)
            dist[v] = du + w
            pred[v] = u
            last_relaxed = v

    if offending is not None and counters["passes"] < n - 1:
        # the pass cap stopped relaxation early, so a relaxable edge is not a cycle
        u, v, w = offending
        logger.warning("bellman_ford_unsettled", source=source, edge=offending, **counters)
        raise AlgorithmError(
            f"distances from {source} did not settle within {counters['passes']} passes: "
            f"edge ({u}, {v}) with weight {w} still relaxes"
        )

    if offending is not None:
        assert last_relaxed is not None
        logger.debug("bellman_ford", source=source, negative_cycle=True, **counters)
        raise NegativeCycleError(source, offending, cycle_through(pred, last_relaxed))

    logger.debug("bellman_ford", source=source, negative_cycle=False, **counters)
    return ShortestPaths(source=source, distances=dist, predecessors=pred, counters=counters)


def bellman_ford(
    graph: Graph,
    source: Vertex,
    *,
    config: Optional[AlgorithmConfig] = None,
    logger: Optional[Logger] = None,
) -> List[Distance]:
    """Return Bellman-Ford distances from ``source``.

    See :func:`bellman_ford_paths` for details and raised errors.
    """
    return bellman_ford_paths(graph, source, config=config, logger=logger).distances


__all__ = [
    "INF",
    "Distance",
    "ShortestPaths",
    "dijkstra",
    "dijkstra_paths",
    "bellman_ford",
    "bellman_ford_paths",
]
