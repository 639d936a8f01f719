"""Custom exception types used across :mod:`adjgraph`."""

from __future__ import annotations

from typing import List, Optional, Sequence


class AdjGraphError(Exception):
    """Base class for all package-specific errors."""


class InputError(AdjGraphError, ValueError):
    """Raised for invalid user input such as a negative vertex count."""


class GraphFormatError(InputError):
    """Raised when an edge carries a weight that is not an integer."""


class InvalidVertexError(InputError, IndexError):
    """Raised when a vertex id passed to an entry point is out of range.

    Attributes:
        vertex: The offending vertex id.
        vertex_count: Number of vertices of the graph it was checked against.
    """

    def __init__(self, vertex: object, vertex_count: int, name: str = "vertex") -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(f"{name} {vertex!r} is not a vertex id in [0, {vertex_count}).")


class NegativeWeightError(InputError):
    """Raised when an algorithm that needs non-negative weights sees one below zero."""


class ConfigError(AdjGraphError, ValueError):
    """Raised for invalid configuration options."""


class CycleDetectedError(AdjGraphError):
    """Raised by Kahn's topological sort when the graph is not a DAG.

    Attributes:
        order: Vertices emitted before the sort stalled. Always shorter than
            the vertex count.
        remaining: Vertices that never reached in-degree zero.
    """

    def __init__(self, order: Sequence[int], remaining: Sequence[int]) -> None:
        self.order: List[int] = list(order)
        self.remaining: List[int] = list(remaining)
        super().__init__(
            f"graph contains a cycle: {len(self.remaining)} vertices unresolved "
            f"after ordering {len(self.order)}"
        )


class NegativeCycleError(AdjGraphError):
    """Raised by Bellman-Ford when a negative cycle is reachable from the source.

    Attributes:
        source: Source vertex of the run.
        edge: ``(u, v, weight)`` of an edge that could still be relaxed.
        cycle: Vertices of one negative cycle in traversal order, when it
            could be recovered from the predecessor chain.
    """

    def __init__(
        self,
        source: int,
        edge: tuple[int, int, int],
        cycle: Optional[Sequence[int]] = None,
    ) -> None:
        self.source = source
        self.edge = edge
        self.cycle: List[int] = list(cycle or [])
        u, v, w = edge
        super().__init__(
            f"negative cycle reachable from {source}: edge ({u}, {v}) with weight {w} "
            "still relaxes"
        )


class GraphDisconnectedError(AdjGraphError):
    """Raised when a spanning tree cannot cover every vertex.

    Attributes:
        accepted: Number of tree edges found.
        required: Number of tree edges a spanning tree needs.
    """

    def __init__(self, accepted: int, required: int) -> None:
        self.accepted = accepted
        self.required = required
        super().__init__(
            f"graph is disconnected: spanning tree needs {required} edges, found {accepted}"
        )


class AlgorithmError(AdjGraphError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


__all__ = [
    "AdjGraphError",
    "InputError",
    "GraphFormatError",
    "InvalidVertexError",
    "NegativeWeightError",
    "ConfigError",
    "CycleDetectedError",
    "NegativeCycleError",
    "GraphDisconnectedError",
    "AlgorithmError",
]
