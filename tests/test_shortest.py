import json
import math

import pytest

from adjgraph import (
    INF,
    AlgorithmConfig,
    AlgorithmError,
    Graph,
    InvalidVertexError,
    NegativeCycleError,
    NegativeWeightError,
    StdLogger,
    bellman_ford,
    bellman_ford_paths,
    dijkstra,
    dijkstra_paths,
)


def test_dijkstra_distances(weighted_graph):
    assert dijkstra(weighted_graph, 0) == [0, 2, 3, 6, 5]


def test_dijkstra_paths(weighted_graph):
    result = dijkstra_paths(weighted_graph, 0)
    assert result.path_to(0) == [0]
    assert result.path_to(3) == [0, 1, 2, 3]
    assert result.path_to(4) == [0, 1, 2, 4]
    assert result.predecessors[0] is None
    assert result.counters["relaxations"] >= 4


def test_dijkstra_unreachable_vertex():
    g = Graph.from_edges(3, [(0, 1, 4)])
    result = dijkstra_paths(g, 0)
    assert result.distances == [0, 4, INF]
    assert math.isinf(result.distance(2))
    assert not result.reachable(2)
    assert result.path_to(2) == []


def test_dijkstra_skips_stale_entries():
    g = Graph.from_edges(3, [(0, 1, 10), (0, 2, 1), (2, 1, 2)])
    result = dijkstra_paths(g, 0)
    assert result.distances == [0, 3, 1]
    assert result.counters["stale_pops"] == 1


def test_dijkstra_unweighted_edges_cost_zero():
    assert dijkstra(Graph.from_edges(2, [(0, 1)]), 0) == [0, 0]


def test_dijkstra_rejects_negative_weight():
    g = Graph.from_edges(3, [(0, 1, 2), (1, 2, -1)])
    with pytest.raises(NegativeWeightError, match=r"\(1, 2\)"):
        dijkstra(g, 0)


def test_dijkstra_negative_check_can_be_disabled():
    g = Graph.from_edges(3, [(0, 1, 2), (1, 2, -1)])
    cfg = AlgorithmConfig(check_negative_weights=False)
    # undefined in general; on this chain the answer happens to be exact
    assert dijkstra(g, 0, config=cfg) == [0, 2, 1]


def test_invalid_source(weighted_graph):
    for fn in (dijkstra, bellman_ford):
        with pytest.raises(InvalidVertexError):
            fn(weighted_graph, 5)
        with pytest.raises(InvalidVertexError):
            fn(weighted_graph, -1)


def test_bellman_ford_matches_dijkstra(weighted_graph):
    for s in range(weighted_graph.vertex_count):
        assert bellman_ford(weighted_graph, s) == dijkstra(weighted_graph, s)


def test_bellman_ford_negative_edges_without_cycle():
    g = Graph.from_edges(4, [(0, 1, 4), (0, 2, 5), (2, 1, -3), (1, 3, 1)])
    result = bellman_ford_paths(g, 0)
    assert result.distances == [0, 2, 5, 3]
    assert result.path_to(3) == [0, 2, 1, 3]


def test_bellman_ford_detects_negative_cycle(negative_cycle_graph):
    with pytest.raises(NegativeCycleError) as info:
        bellman_ford(negative_cycle_graph, 0)
    exc = info.value
    assert exc.source == 0
    assert exc.edge == (1, 2, -8)
    assert exc.cycle == [1, 2, 3]


def test_negative_cycle_not_reachable_from_source_is_ignored():
    g = Graph.from_edges(4, [(0, 1, 1), (2, 3, -5), (3, 2, 1)])
    assert bellman_ford(g, 0) == [0, 1, INF, INF]
    with pytest.raises(NegativeCycleError):
        bellman_ford(g, 2)


def test_bellman_ford_relaxes_every_outgoing_edge_not_only_the_first():
    # A scan that only looked at the first edge of each vertex would never
    # reach vertex 2 or improve vertex 1 through it.
    g = Graph.from_edges(3, [(0, 1, 5), (0, 2, 1), (2, 1, 1)])
    assert bellman_ford(g, 0) == [0, 2, 1]


def test_negative_cycle_behind_second_outgoing_edge_is_detected():
    # 1 -> 2 -> 1 weighs -2, and 1 -> 2 is not the first edge of vertex 1.
    g = Graph.from_edges(3, [(0, 1, 1), (1, 0, 10), (1, 2, 1), (2, 1, -3)])
    with pytest.raises(NegativeCycleError) as info:
        bellman_ford(g, 0)
    assert sorted(info.value.cycle) == [1, 2]


def test_early_exit_stops_after_quiet_pass(weighted_graph):
    eager = bellman_ford_paths(weighted_graph, 0)
    full = bellman_ford_paths(weighted_graph, 0, config=AlgorithmConfig(early_exit=False))
    assert eager.distances == full.distances
    assert eager.counters["passes"] < full.counters["passes"] == weighted_graph.vertex_count - 1


def test_max_passes_cap_that_suffices_returns_distances():
    # edges are scanned by source vertex, so one pass settles a forward chain
    g = Graph.from_edges(4, [(2, 3, 1), (1, 2, 1), (0, 1, 1)])
    result = bellman_ford_paths(g, 0, config=AlgorithmConfig(max_passes=1))
    assert result.distances == [0, 1, 2, 3]
    assert result.counters["passes"] == 1


def test_max_passes_cap_on_unsettled_chain_is_not_a_negative_cycle(log_stream):
    # a backward chain settles one vertex per pass
    g = Graph.from_edges(4, [(3, 2, 1), (2, 1, 1), (1, 0, 1)])
    assert bellman_ford(g, 3) == [3, 2, 1, 0]
    logger = StdLogger(level="warning", stream=log_stream)
    with pytest.raises(AlgorithmError, match=r"within 1 passes") as info:
        bellman_ford(g, 3, config=AlgorithmConfig(max_passes=1), logger=logger)
    assert not isinstance(info.value, NegativeCycleError)
    assert log_stream.getvalue().startswith("warning bellman_ford_unsettled")
    assert bellman_ford(g, 3, config=AlgorithmConfig(max_passes=3)) == [3, 2, 1, 0]


def test_capped_run_never_reports_negative_cycle(negative_cycle_graph):
    with pytest.raises(AlgorithmError):
        bellman_ford(negative_cycle_graph, 0, config=AlgorithmConfig(max_passes=1))


def test_single_vertex():
    assert dijkstra(Graph(1), 0) == [0]
    assert bellman_ford(Graph(1), 0) == [0]


def test_shortest_path_logging(weighted_graph, log_stream):
    logger = StdLogger(level="debug", json_fmt=True, stream=log_stream)
    dijkstra(weighted_graph, 0, logger=logger)
    bellman_ford(weighted_graph, 0, logger=logger)
    events = [json.loads(line) for line in log_stream.getvalue().splitlines()]
    assert [e["event"] for e in events] == ["dijkstra", "bellman_ford"]
    assert events[0]["level"] == "debug"
    assert events[0]["source"] == 0
    assert events[1]["negative_cycle"] is False
