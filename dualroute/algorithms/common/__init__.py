"""Numba kernels shared by the routing front ends."""

from .dijkstra import dijkstra_shortest_path
from .min_heap import create_heap, heap_is_empty, heap_pop, heap_push
from .path_cost import compute_path_totals

__all__ = [
    "dijkstra_shortest_path",
    "compute_path_totals",
    "create_heap",
    "heap_push",
    "heap_pop",
    "heap_is_empty",
]
