"""Routing algorithms for dual-weight directed graphs."""

from .common.dijkstra import dijkstra_shortest_path
from .common.path_cost import compute_path_totals
from .shortest_path import PathResult, route, shortest_path

__all__ = [
    "dijkstra_shortest_path",
    "compute_path_totals",
    "PathResult",
    "shortest_path",
    "route",
]
