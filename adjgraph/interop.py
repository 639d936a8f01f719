"""Conversion between :class:`~adjgraph.graph.Graph` and NetworkX graphs.

Rendering is left to callers; NetworkX is the usual way to draw or further
analyse a graph, so these helpers hand the adjacency lists over unchanged.
"""

from __future__ import annotations

from typing import Optional

import networkx as nx

from .exceptions import InputError
from .graph import Graph
from .logger import Logger


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """Return a :class:`networkx.MultiDiGraph` with every vertex and edge of ``graph``.

    Parallel edges are kept. Weighted edges carry a ``weight`` attribute;
    unweighted ones carry none.
    """
    g = nx.MultiDiGraph()
    g.add_nodes_from(range(graph.vertex_count))
    for edge in graph.edges():
        if edge.weight is None:
            g.add_edge(edge.source, edge.target)
        else:
            g.add_edge(edge.source, edge.target, weight=edge.weight)
    return g


def from_networkx(
    g: nx.Graph,
    *,
    weight: Optional[str] = "weight",
    logger: Optional[Logger] = None,
) -> Graph:
    """Build a :class:`~adjgraph.graph.Graph` from a NetworkX graph.

    Args:
        g: Any NetworkX graph whose nodes are exactly the integers
            ``0`` .. ``N-1``. Undirected graphs become pairs of directed
            edges.
        weight: Edge attribute read as the weight, ``None`` to build an
            unweighted graph. Edges lacking the attribute are unweighted.
        logger: Optional logger handed to the graph.

    Raises:
        InputError: If the node labels are not ``0`` .. ``N-1``.
        GraphFormatError: If a weight attribute is not an integer.
    """
    n = g.number_of_nodes()
    if set(g.nodes) != set(range(n)):
        raise InputError("networkx graph nodes must be the integers 0..N-1.")

    out = Graph(n, logger=logger)
    add = out.add_edge if g.is_directed() else out.add_undirected_edge
    for u, v, data in g.edges(data=True):
        add(u, v, data.get(weight) if weight is not None else None)
    return out


__all__ = ["to_networkx", "from_networkx"]
