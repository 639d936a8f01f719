"""
Pytest configuration and shared fixtures.

The named graphs below are small hand-checked instances reused across the
test modules.
"""

import io

import pytest

from adjgraph import Graph, StdLogger


@pytest.fixture
def mesh_graph() -> Graph:
    """Unweighted 5-vertex graph, mostly symmetric, with one-way 2 -> 4."""
    edges = [
        (0, 1), (0, 3), (0, 4),
        (1, 0), (1, 3),
        (2, 4),
        (3, 0), (3, 1), (3, 4),
        (4, 0), (4, 2), (4, 3),
    ]
    return Graph.from_edges(5, edges)


@pytest.fixture
def dag_graph() -> Graph:
    """6-vertex DAG with two sources (0 and 5)."""
    edges = [(0, 2), (0, 3), (1, 4), (2, 3), (2, 1), (3, 1), (5, 4), (5, 1)]
    return Graph.from_edges(6, edges)


@pytest.fixture
def weighted_graph() -> Graph:
    """Undirected 5-vertex weighted graph; MST weight 8, distances from 0 are [0, 2, 3, 6, 5]."""
    edges = [
        (0, 1, 2), (0, 3, 7), (0, 4, 6),
        (1, 2, 1), (1, 4, 4),
        (2, 3, 3), (2, 4, 2),
        (3, 4, 5),
    ]
    return Graph.from_edges(5, edges, undirected=True)


@pytest.fixture
def mst_edges() -> list:
    """Edges whose undirected MST weighs 14."""
    return [(0, 1, 1), (0, 4, 5), (1, 2, 2), (1, 4, 6), (2, 3, 7), (2, 4, 4), (3, 4, 8)]


@pytest.fixture
def negative_cycle_graph() -> Graph:
    """Cycle 1 -> 2 -> 3 -> 1 with total weight -2, reachable from 0."""
    return Graph.from_edges(4, [(0, 1, 3), (1, 2, -8), (2, 3, 2), (3, 1, 4)])


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def debug_logger(log_stream: io.StringIO) -> StdLogger:
    """Text logger writing every level into ``log_stream``."""
    return StdLogger(level="debug", stream=log_stream)
