"""Seeded random graph families for property tests and benchmarking.

SUPPORTED GRAPH TYPES
---------------------
1. erdos_renyi
   Random edges sampled uniformly until ``m`` distinct pairs exist.
2. dag
   Edges only go from a lower to a higher vertex id, so the result is
   acyclic in directed mode.
3. grid
   Near-square 2D grid with edges between horizontal and vertical
   neighbors in both directions. ``m`` adds random extra edges on top.

WEIGHT DISTRIBUTIONS
--------------------
- uniform: integers drawn evenly from ``[w_min, w_max]``
- small_int: integers from ``[w_min, w_min + 10]``, many ties

Graphs never contain self loops or duplicate pairs. The same arguments and
seed always produce the same graph, edge insertion order included.
"""

from __future__ import annotations

import math
import random
from typing import List, Literal, Optional, Set, Tuple

from .exceptions import InputError
from .graph import Graph

WeightDist = Literal["uniform", "small_int"]
GraphType = Literal["erdos_renyi", "dag", "grid"]


def _sample_weight(rng: random.Random, dist: WeightDist, w_min: int, w_max: int) -> int:
    if dist == "uniform":
        return rng.randint(w_min, w_max)
    if dist == "small_int":
        return rng.randint(w_min, min(w_max, w_min + 10))
    raise InputError(f"unknown weight distribution: {dist}")


def generate_graph(
    *,
    n: int,
    m: Optional[int] = None,
    graph_type: GraphType = "erdos_renyi",
    weight_dist: WeightDist = "uniform",
    w_min: int = 1,
    w_max: int = 100,
    seed: Optional[int] = 0,
    undirected: bool = False,
    ensure_connected: bool = True,
    allow_negative: bool = False,
) -> Graph:
    """Generate a weighted graph.

    Args:
        n: Number of vertices.
        m: Target number of distinct vertex pairs. Defaults to ``4 * n``
            (capped by what the family allows); for grids, extra random
            pairs beyond the grid edges.
        graph_type: Family, see the module docstring.
        weight_dist: Weight distribution.
        w_min: Smallest weight.
        w_max: Largest weight.
        seed: Random seed.
        undirected: Store every pair in both directions with one weight.
        ensure_connected: Add a backbone chain ``i -> i+1`` first, which
            makes the graph connected when ``undirected`` is set and weakly
            connected otherwise. Grids are always connected.
        allow_negative: Permit ``w_min < 0``. Negative weights on a cyclic
            family can create negative cycles.

    Returns:
        The generated graph.

    Raises:
        InputError: For invalid size or weight arguments.
    """
    if n <= 0:
        raise InputError("n must be > 0.")
    if w_max < w_min:
        raise InputError("w_max must be >= w_min.")
    if w_min < 0 and not allow_negative:
        raise InputError("w_min must be >= 0 unless allow_negative is set.")
    if m is not None and m < 0:
        raise InputError("m must be >= 0.")

    rng = random.Random(seed)
    g = Graph(n)
    seen: Set[Tuple[int, int]] = set()

    def add_pair(u: int, v: int) -> None:
        if u == v:
            return
        key = (min(u, v), max(u, v)) if undirected else (u, v)
        if key in seen:
            return
        seen.add(key)
        w = _sample_weight(rng, weight_dist, w_min, w_max)
        if undirected:
            g.add_undirected_edge(u, v, w)
        else:
            g.add_edge(u, v, w)

    pair_cap = n * (n - 1) // 2 if undirected or graph_type == "dag" else n * (n - 1)

    if graph_type == "grid":
        rows = max(1, math.isqrt(n))
        cols = (n + rows - 1) // rows
        for r in range(rows):
            for c in range(cols):
                u = r * cols + c
                if u >= n:
                    continue
                right, down = u + 1, u + cols
                if c + 1 < cols and right < n:
                    add_pair(u, right)
                    add_pair(right, u)
                if down < n:
                    add_pair(u, down)
                    add_pair(down, u)
        target = min(len(seen) + (m or 0), pair_cap)
    else:
        if graph_type not in ("erdos_renyi", "dag"):
            raise InputError(f"unknown graph_type: {graph_type}")
        if ensure_connected:
            for i in range(n - 1):
                add_pair(i, i + 1)
        target = min(4 * n if m is None else m, pair_cap)
        target = max(target, len(seen))

    while len(seen) < target:
        u = rng.randrange(n)
        v = rng.randrange(n)
        if graph_type == "dag" and u > v:
            u, v = v, u
        add_pair(u, v)

    return g


def edge_list(g: Graph) -> List[Tuple[int, int, Optional[int]]]:
    """Return ``(u, v, w)`` tuples for every edge of ``g`` in insertion order."""
    return [(e.source, e.target, e.weight) for e in g.edges()]


__all__ = ["generate_graph", "edge_list", "GraphType", "WeightDist"]
