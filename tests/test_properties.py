"""Property-based cross checks between algorithms and against NetworkX."""

from __future__ import annotations

import networkx as nx
from hypothesis import given, settings, strategies as st

from adjgraph import (
    INF,
    bellman_ford,
    bfs,
    dfs,
    dijkstra,
    generate_graph,
    kruskal_mst,
    prim_mst,
    to_networkx,
    topo_sort_dfs,
    topo_sort_kahn,
)

_sizes = st.integers(min_value=1, max_value=25)
_seeds = st.integers(min_value=0, max_value=10_000)


@settings(max_examples=60, deadline=None)
@given(n=_sizes, seed=_seeds, dense=st.booleans())
def test_prim_and_kruskal_agree(n, seed, dense):
    g = generate_graph(n=n, m=3 * n if dense else n, seed=seed, undirected=True)
    weight = kruskal_mst(g)
    assert prim_mst(g) == weight
    expected = nx.minimum_spanning_tree(nx.Graph(to_networkx(g).to_undirected()))
    assert weight == expected.size(weight="weight")


@settings(max_examples=60, deadline=None)
@given(n=_sizes, seed=_seeds)
def test_dijkstra_has_no_relaxable_edge(n, seed):
    g = generate_graph(n=n, seed=seed, ensure_connected=False)
    dist = dijkstra(g, 0)
    assert dist[0] == 0
    for e in g.edges():
        if dist[e.source] != INF:
            assert dist[e.target] <= dist[e.source] + e.cost


@settings(max_examples=60, deadline=None)
@given(n=_sizes, seed=_seeds, source=st.integers(min_value=0, max_value=24))
def test_bellman_ford_agrees_with_dijkstra_and_networkx(n, seed, source):
    g = generate_graph(n=n, seed=seed, weight_dist="small_int", ensure_connected=False)
    source %= n
    dist = dijkstra(g, source)
    assert bellman_ford(g, source) == dist
    expected = nx.single_source_dijkstra_path_length(to_networkx(g), source)
    assert {v: d for v, d in enumerate(dist) if d != INF} == expected


@settings(max_examples=60, deadline=None)
@given(n=_sizes, seed=_seeds)
def test_topological_orders_on_random_dags(n, seed):
    g = generate_graph(n=n, m=2 * n, graph_type="dag", seed=seed)
    for order in (topo_sort_kahn(g), topo_sort_dfs(g)):
        position = {v: i for i, v in enumerate(order)}
        assert len(order) == n
        assert all(position[e.source] < position[e.target] for e in g.edges())


@settings(max_examples=40, deadline=None)
@given(n=_sizes, seed=_seeds)
def test_bellman_ford_with_negative_weights_on_dags(n, seed):
    g = generate_graph(
        n=n, graph_type="dag", w_min=-20, w_max=20, seed=seed, allow_negative=True
    )
    expected = nx.single_source_bellman_ford_path_length(to_networkx(g), 0)
    dist = bellman_ford(g, 0)
    assert {v: d for v, d in enumerate(dist) if d != INF} == expected


@settings(max_examples=60, deadline=None)
@given(n=_sizes, seed=_seeds)
def test_traversals_reach_descendants_deterministically(n, seed):
    g = generate_graph(n=n, m=n, seed=seed, ensure_connected=False)
    reach = nx.descendants(to_networkx(g), 0) | {0}
    order = bfs(g, 0)
    assert order == bfs(g, 0)
    assert order[0] == 0
    assert sorted(order) == sorted(reach)
    pre = dfs(g, 0)
    assert pre == dfs(g, 0)
    assert sorted(pre) == sorted(reach)
