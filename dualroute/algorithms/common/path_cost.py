"""Utilities for computing distance and time totals of a path."""

import numpy as np
from numba import njit


@njit
def compute_path_totals(
    path: np.ndarray,
    edge_offsets: np.ndarray,
    edge_target: np.ndarray,
    edge_distance: np.ndarray,
    edge_time: np.ndarray,
) -> tuple:
    """Sum distance and time along a padded path sequence.

    Each hop uses the first edge in adjacency order that reaches the next
    node, whichever metric produced the path. With parallel edges the
    reported totals can therefore differ from the edge the search relaxed.
    """

    n_nodes = path.shape[0]
    total_distance = 0.0
    total_time = 0.0
    for i in range(n_nodes - 1):
        u = path[i]
        v = path[i + 1]
        if u < 0 or v < 0:
            break
        for e in range(edge_offsets[u], edge_offsets[u + 1]):
            if edge_target[e] == v:
                total_distance += edge_distance[e]
                total_time += edge_time[e]
                break

    return total_distance, total_time
