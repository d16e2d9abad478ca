"""Dijkstra shortest path over a CSR adjacency using a binary heap."""

import numpy as np
from numba import njit

from .min_heap import create_heap, heap_is_empty, heap_pop, heap_push


@njit
def dijkstra_shortest_path(
    edge_offsets: np.ndarray,
    edge_target: np.ndarray,
    edge_weight: np.ndarray,
    source: int,
    target: int,
) -> tuple:
    """Compute the cheapest ``source`` -> ``target`` path under ``edge_weight``.

    Edges of node ``u`` are ``edge_offsets[u]:edge_offsets[u + 1]``. Weights
    must be non-negative. Returns ``(cost, path)`` where ``path`` holds node
    indices padded with -1; an unreachable target gives ``inf`` and an
    all -1 path.
    """

    n_nodes = edge_offsets.shape[0] - 1
    n_edges = edge_target.shape[0]

    dist = np.full(n_nodes, np.inf)
    discovered = np.zeros(n_nodes, dtype=np.bool_)
    prev = np.full(n_nodes, -1, dtype=np.int64)
    visited = np.zeros(n_nodes, dtype=np.bool_)

    # one push per relaxed edge plus the source
    heap_nodes, heap_priorities = create_heap(n_edges + 1)
    size = 0

    dist[source] = 0.0
    discovered[source] = True
    size = heap_push(heap_nodes, heap_priorities, size, source, 0.0)

    while not heap_is_empty(size):
        u, _, size = heap_pop(heap_nodes, heap_priorities, size)
        if visited[u]:
            continue
        visited[u] = True

        if u == target:
            break

        for e in range(edge_offsets[u], edge_offsets[u + 1]):
            v = edge_target[e]
            if visited[v]:
                continue
            alt = dist[u] + edge_weight[e]
            if (not discovered[v]) or alt < dist[v]:
                dist[v] = alt
                discovered[v] = True
                prev[v] = u
                size = heap_push(heap_nodes, heap_priorities, size, v, alt)
                if size < 0:
                    raise ValueError("heap capacity exhausted")

    path = np.full(n_nodes, -1, dtype=np.int64)
    if not discovered[target]:
        return np.inf, path

    tmp = np.full(n_nodes, -1, dtype=np.int64)
    idx = 0
    cur = target
    while cur != -1 and idx < n_nodes:
        tmp[idx] = cur
        cur = prev[cur]
        idx += 1

    for i in range(idx):
        path[i] = tmp[idx - 1 - i]

    return dist[target], path
