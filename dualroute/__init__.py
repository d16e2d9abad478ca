"""Dual-metric (distance / time) shortest path routing on directed graphs."""

from .algorithms import PathResult, route, shortest_path
from .fake_data import generate_random_graph_records, generate_sample_text
from .graph_store import Edge, GraphStore, Metric
from .loader import GraphFormatError, GraphQuery, load_graph_file, load_graph_text

__all__ = [
    "Edge",
    "GraphStore",
    "Metric",
    "PathResult",
    "shortest_path",
    "route",
    "GraphQuery",
    "GraphFormatError",
    "load_graph_text",
    "load_graph_file",
    "generate_random_graph_records",
    "generate_sample_text",
]
