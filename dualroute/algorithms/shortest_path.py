"""Single-pair shortest path queries over a GraphStore."""

from dataclasses import dataclass
from typing import Dict, Tuple

from ..graph_store import GraphStore, Metric
from .common.dijkstra import dijkstra_shortest_path
from .common.path_cost import compute_path_totals


@dataclass(frozen=True)
class PathResult:
    """Node sequence from start to end inclusive, with both totals."""

    path: Tuple[str, ...]
    total_distance: float
    total_time: float
    metric: Metric = Metric.DISTANCE

    @property
    def cost(self) -> float:
        """Recomputed total of the metric that drove the search.

        Totals use the first edge per hop, so with parallel edges this can
        exceed the cost the search actually minimized.
        """
        return self.total_time if self.metric == Metric.TIME else self.total_distance

    @property
    def n_hops(self) -> int:
        return len(self.path) - 1


def _resolve_single_metric(metric) -> Metric:
    metric = Metric.parse(metric)
    if metric == Metric.BOTH:
        raise ValueError("shortest_path optimizes one metric per call; use route() for BOTH")
    return metric


def shortest_path(graph: GraphStore, start: str, end: str, metric) -> PathResult | None:
    """Dijkstra query from ``start`` to ``end`` driven by ``metric``.

    Returns ``None`` when ``end`` is unreachable. Raises ``ValueError`` for a
    metric selector other than distance or time.
    """

    metric = _resolve_single_metric(metric)

    if start == end:
        return PathResult(path=(start,), total_distance=0.0, total_time=0.0, metric=metric)

    source = graph.index_of(start)
    target = graph.index_of(end)
    if source is None or target is None:
        return None

    _, path = dijkstra_shortest_path(
        graph.edge_offsets,
        graph.edge_target,
        graph.weights(metric),
        source,
        target,
    )
    if path[0] < 0:
        return None

    total_distance, total_time = compute_path_totals(
        path,
        graph.edge_offsets,
        graph.edge_target,
        graph.edge_distance,
        graph.edge_time,
    )
    node_path = tuple(graph.node_id(int(idx)) for idx in path[path >= 0])
    return PathResult(
        path=node_path,
        total_distance=float(total_distance),
        total_time=float(total_time),
        metric=metric,
    )


def route(graph: GraphStore, start: str, end: str, metric) -> Dict[Metric, PathResult | None]:
    """Run one query per requested metric; BOTH gives a distance and a time entry."""

    metric = Metric.parse(metric)
    if metric == Metric.BOTH:
        return {
            Metric.DISTANCE: shortest_path(graph, start, end, Metric.DISTANCE),
            Metric.TIME: shortest_path(graph, start, end, Metric.TIME),
        }
    return {metric: shortest_path(graph, start, end, metric)}
