"""Public package exports for :mod:`adjgraph`."""

from __future__ import annotations

from .config import AlgorithmConfig
from .exceptions import (
    AdjGraphError,
    AlgorithmError,
    ConfigError,
    CycleDetectedError,
    GraphDisconnectedError,
    GraphFormatError,
    InputError,
    InvalidVertexError,
    NegativeCycleError,
    NegativeWeightError,
)
from .fifo import FifoQueue
from .generator import generate_graph
from .graph import Edge, Graph
from .heap import PriorityQueue
from .interop import from_networkx, to_networkx
from .logger import Logger, NoopLogger, StdLogger
from .mst import SpanningTree, kruskal_mst, kruskal_tree, prim_mst, prim_tree
from .path import reconstruct_path
from .shortest import (
    INF,
    ShortestPaths,
    bellman_ford,
    bellman_ford_paths,
    dijkstra,
    dijkstra_paths,
)
from .toposort import in_degrees, topo_sort_dfs, topo_sort_kahn
from .traversal import bfs, dfs
from .unionfind import UnionFind

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "Edge",
    "PriorityQueue",
    "FifoQueue",
    "UnionFind",
    "bfs",
    "dfs",
    "in_degrees",
    "topo_sort_dfs",
    "topo_sort_kahn",
    "SpanningTree",
    "prim_mst",
    "prim_tree",
    "kruskal_mst",
    "kruskal_tree",
    "INF",
    "ShortestPaths",
    "dijkstra",
    "dijkstra_paths",
    "bellman_ford",
    "bellman_ford_paths",
    "reconstruct_path",
    "generate_graph",
    "to_networkx",
    "from_networkx",
    "AlgorithmConfig",
    "Logger",
    "NoopLogger",
    "StdLogger",
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
