"""Adjacency-list directed graph with optional integer edge weights."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union

from .exceptions import GraphFormatError, InputError, InvalidVertexError
from .logger import Logger, NoopLogger

Vertex = int
Weight = Optional[int]
EdgeSpec = Union[Tuple[Vertex, Vertex], Tuple[Vertex, Vertex, Weight]]


class Edge(NamedTuple):
    """Directed edge ``source -> target``.

    ``weight`` is ``None`` for an unweighted edge.
    """

    source: Vertex
    target: Vertex
    weight: Weight = None

    @property
    def cost(self) -> int:
        """Weight as used by weighted algorithms; a missing weight counts as ``0``."""
        return 0 if self.weight is None else self.weight


@dataclass(eq=False)
class Graph:
    """Directed multigraph over vertices ``0`` .. ``vertex_count-1``.

    Each vertex owns a list of outgoing edges kept in insertion order. BFS
    and DFS output depends on that order. Parallel edges are kept as is.

    Out-of-range endpoints passed to :meth:`add_edge` are ignored rather
    than raised, so callers can feed edge lists that mention vertices the
    graph does not have. The ignored edge is reported to ``logger`` at
    debug level.

    Attributes:
        vertex_count: Number of vertices.
        logger: Receives ``edge_ignored`` events.
    """

    vertex_count: int
    logger: Optional[Logger] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate vertex count and initialize adjacency lists."""
        if isinstance(self.vertex_count, bool) or not isinstance(self.vertex_count, int):
            raise InputError("Graph vertex_count must be an integer.")
        if self.vertex_count < 0:
            raise InputError("Graph vertex_count must be non-negative.")
        self.logger = self.logger or NoopLogger()
        self._adj: List[List[Edge]] = [[] for _ in range(self.vertex_count)]
        self._edge_count = 0

    def __len__(self) -> int:
        return self.vertex_count

    def __contains__(self, v: object) -> bool:
        return isinstance(v, int) and not isinstance(v, bool) and 0 <= v < self.vertex_count

    def check_vertex(self, v: object, name: str = "vertex") -> Vertex:
        """Return ``v`` if it is a vertex of this graph.

        Raises:
            InvalidVertexError: If ``v`` is not an integer in
                ``[0, vertex_count)``.
        """
        if v not in self:
            raise InvalidVertexError(v, self.vertex_count, name)
        return v  # type: ignore[return-value]

    def add_edge(self, source: Vertex, target: Vertex, weight: Weight = None) -> None:
        """Add a directed edge from ``source`` to ``target``.

        Args:
            source: Tail vertex.
            target: Head vertex.
            weight: Integer weight, or ``None`` for an unweighted edge.

        Raises:
            GraphFormatError: If both endpoints are vertices and ``weight`` is
                neither ``None`` nor an integer.

        Examples:
            ```python
            >>> g = Graph(2)
            >>> g.add_edge(0, 1, 3)
            >>> g.add_edge(0, 5)  # out of range, ignored
            >>> g.neighbors(0)
            [Edge(source=0, target=1, weight=3)]
            ```
        """
        if source not in self or target not in self:
            self.logger.debug(
                "edge_ignored", source=source, target=target, vertex_count=self.vertex_count
            )
            return
        if weight is not None:
            if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
                raise GraphFormatError(f"non-integer weight {weight!r} on edge ({source}, {target})")
            weight = int(weight)
        self._adj[source].append(Edge(source, target, weight))
        self._edge_count += 1

    def add_undirected_edge(self, a: Vertex, b: Vertex, weight: Weight = None) -> None:
        """Add ``a -> b`` and ``b -> a`` with the same weight."""
        self.add_edge(a, b, weight)
        self.add_edge(b, a, weight)

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: Iterable[EdgeSpec],
        *,
        undirected: bool = False,
        logger: Optional[Logger] = None,
    ) -> "Graph":
        """Create a graph from ``(u, v)`` or ``(u, v, w)`` tuples.

        Args:
            vertex_count: Number of vertices.
            edges: Edge tuples, added in iteration order.
            undirected: Add every edge in both directions.
            logger: Optional logger handed to the graph.

        Returns:
            A graph populated with the provided edges.
        """
        g = cls(vertex_count, logger=logger)
        add = g.add_undirected_edge if undirected else g.add_edge
        for spec in edges:
            if len(spec) == 2:
                u, v = spec  # type: ignore[misc]
                add(u, v)
            else:
                u, v, w = spec  # type: ignore[misc]
                add(u, v, w)
        return g

    def neighbors(self, v: Vertex) -> Sequence[Edge]:
        """Return the outgoing edges of ``v`` in insertion order.

        The returned list is the graph's own storage; callers must not
        modify it.

        Raises:
            InvalidVertexError: If ``v`` is out of range.
        """
        return self._adj[self.check_vertex(v)]

    def out_degree(self, v: Vertex) -> int:
        return len(self.neighbors(v))

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def edges(self) -> Iterator[Edge]:
        """Iterate over every edge, by source vertex then insertion order."""
        for lst in self._adj:
            yield from lst

    def negative_edge(self) -> Optional[Edge]:
        """Return the first edge with a negative weight, or ``None``."""
        for edge in self.edges():
            if edge.cost < 0:
                return edge
        return None

    def has_negative_weight(self) -> bool:
        return self.negative_edge() is not None

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self.vertex_count}, edge_count={self._edge_count})"


__all__ = ["Edge", "EdgeSpec", "Graph", "Vertex", "Weight"]
