import itertools

import networkx as nx
import numpy as np
import pytest

from dualroute import GraphStore, Metric, PathResult, route, shortest_path
from dualroute.algorithms.common.dijkstra import dijkstra_shortest_path
from dualroute.fake_data import generate_random_graph_records


@pytest.fixture
def triangle():
    return GraphStore.from_records(
        [
            ("A", "B", 1.0, 5.0),
            ("B", "C", 1.0, 5.0),
            ("A", "C", 5.0, 1.0),
        ]
    )


def test_distance_prefers_two_short_hops(triangle):
    result = shortest_path(triangle, "A", "C", Metric.DISTANCE)
    assert result.path == ("A", "B", "C")
    assert result.total_distance == 2.0
    assert result.total_time == 10.0
    assert result.cost == 2.0
    assert result.n_hops == 2


def test_time_prefers_direct_edge(triangle):
    result = shortest_path(triangle, "A", "C", "time")
    assert result.path == ("A", "C")
    assert result.total_time == 1.0
    assert result.total_distance == 5.0
    assert result.metric == Metric.TIME


def test_start_equals_end_is_single_node(triangle):
    result = shortest_path(triangle, "B", "B", Metric.TIME)
    assert result == PathResult(path=("B",), total_distance=0.0, total_time=0.0, metric=Metric.TIME)

    # works for ids the graph has never seen
    assert shortest_path(triangle, "Z", "Z", Metric.DISTANCE).path == ("Z",)


def test_unreachable_destination_is_none(triangle):
    assert shortest_path(triangle, "C", "A", Metric.DISTANCE) is None
    assert shortest_path(triangle, "A", "missing", Metric.DISTANCE) is None
    assert shortest_path(triangle, "missing", "A", Metric.TIME) is None


def test_edges_are_directed():
    graph = GraphStore.from_records([("A", "B", 1.0, 1.0)])
    assert shortest_path(graph, "A", "B", Metric.DISTANCE).path == ("A", "B")
    assert shortest_path(graph, "B", "A", Metric.DISTANCE) is None


def test_empty_graph():
    graph = GraphStore.from_records([])
    assert shortest_path(graph, "A", "B", Metric.DISTANCE) is None


def test_parallel_edges_report_first_edge_in_adjacency_order():
    graph = GraphStore.from_records(
        [
            ("A", "B", 2.0, 9.0),
            ("A", "B", 2.0, 3.0),
        ]
    )

    by_distance = shortest_path(graph, "A", "B", Metric.DISTANCE)
    assert by_distance.path == ("A", "B")
    assert by_distance.total_time == 9.0

    # the search relaxes the time-3 edge, but totals are taken from the first edge
    by_time = shortest_path(graph, "A", "B", Metric.TIME)
    assert by_time.path == ("A", "B")
    assert by_time.total_time == 9.0
    assert by_time.total_distance == 2.0


def test_equal_cost_keeps_first_discovered_predecessor():
    graph = GraphStore.from_records(
        [
            ("A", "C", 2.0, 0.0),
            ("A", "B", 1.0, 0.0),
            ("B", "C", 1.0, 0.0),
        ]
    )
    assert shortest_path(graph, "A", "C", Metric.DISTANCE).path == ("A", "C")


def test_equal_cost_diamond_is_deterministic():
    graph = GraphStore.from_records(
        [
            ("A", "B", 1.0, 1.0),
            ("A", "C", 1.0, 1.0),
            ("B", "D", 1.0, 1.0),
            ("C", "D", 1.0, 1.0),
        ]
    )
    first = shortest_path(graph, "A", "D", Metric.DISTANCE)
    assert first.path == ("A", "B", "D")
    assert shortest_path(graph, "A", "D", Metric.DISTANCE) == first


def test_invalid_metric_is_rejected(triangle):
    with pytest.raises(ValueError):
        shortest_path(triangle, "A", "C", "speed")
    with pytest.raises(ValueError):
        shortest_path(triangle, "A", "C", 7)
    with pytest.raises(ValueError):
        shortest_path(triangle, "A", "C", Metric.BOTH)


def test_route_both_runs_each_metric(triangle):
    results = route(triangle, "A", "C", Metric.BOTH)
    assert list(results) == [Metric.DISTANCE, Metric.TIME]
    assert results[Metric.DISTANCE].path == ("A", "B", "C")
    assert results[Metric.TIME].path == ("A", "C")

    single = route(triangle, "A", "C", 2)
    assert list(single) == [Metric.TIME]


def test_route_keeps_not_found_entries(triangle):
    results = route(triangle, "C", "A", "both")
    assert results == {Metric.DISTANCE: None, Metric.TIME: None}


def test_kernel_returns_padded_path():
    edge_offsets = np.array([0, 2, 3, 3], dtype=np.int64)
    edge_target = np.array([1, 2, 2], dtype=np.int64)
    edge_weight = np.array([1.0, 5.0, 1.0])

    cost, path = dijkstra_shortest_path(edge_offsets, edge_target, edge_weight, 0, 2)
    assert cost == 2.0
    assert path.tolist() == [0, 1, 2]

    cost, path = dijkstra_shortest_path(edge_offsets, edge_target, edge_weight, 2, 0)
    assert cost == np.inf
    assert path.tolist() == [-1, -1, -1]


def _reference_graph(records, field):
    G = nx.DiGraph()
    for source, target, distance, time in records:
        weight = distance if field == "distance" else time
        if G.has_edge(source, target):
            weight = min(weight, G[source][target]["weight"])
        G.add_edge(source, target, weight=weight)
    return G


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
@pytest.mark.parametrize("metric", [Metric.DISTANCE, Metric.TIME])
def test_costs_match_bellman_ford(seed, metric):
    records = generate_random_graph_records(n_nodes=12, n_edges=30, seed=seed)
    graph = GraphStore.from_records(records)
    reference = _reference_graph(records, metric.name.lower())
    node_ids = [f"N{i}" for i in range(12)]

    for start, end in itertools.permutations(node_ids, 2):
        result = shortest_path(graph, start, end, metric)
        try:
            expected = nx.bellman_ford_path_length(reference, start, end, weight="weight")
        except (nx.NetworkXNoPath, nx.NodeNotFound):
            assert result is None
            continue

        assert result is not None
        assert result.path[0] == start
        assert result.path[-1] == end
        assert result.cost == pytest.approx(expected)
        for u, v in zip(result.path[:-1], result.path[1:]):
            assert any(edge.to == v for edge in graph.neighbors(u))


def test_parallel_edges_never_report_a_partial_path():
    records = generate_random_graph_records(n_nodes=10, n_edges=25, parallel_fraction=0.3, seed=5)
    graph = GraphStore.from_records(records)
    reference = _reference_graph(records, "distance")

    for start, end in itertools.permutations([f"N{i}" for i in range(10)], 2):
        result = shortest_path(graph, start, end, Metric.DISTANCE)
        reachable = start in reference and end in reference and nx.has_path(reference, start, end)
        if not reachable:
            assert result is None
        else:
            assert result.path[0] == start and result.path[-1] == end


def test_repeated_queries_are_identical(triangle):
    first = route(triangle, "A", "C", Metric.BOTH)
    second = route(triangle, "A", "C", Metric.BOTH)
    assert first == second


def test_infinite_weight_edge_is_still_a_path():
    graph = GraphStore.from_records([("A", "B", float("inf"), 1.0)])
    result = shortest_path(graph, "A", "B", Metric.DISTANCE)
    assert result is not None
    assert result.path == ("A", "B")
    assert result.total_distance == float("inf")
    assert result.total_time == 1.0
