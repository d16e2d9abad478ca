"""Synthetic directed dual-weight graph generation utilities."""

from typing import List

import networkx as nx
import numpy as np

from .graph_store import EdgeRecord, Metric


def generate_random_graph_records(
    n_nodes: int = 50,
    n_edges: int = 200,
    distance_low: float = 1.0,
    distance_high: float = 100.0,
    time_low: float = 1.0,
    time_high: float = 60.0,
    parallel_fraction: float = 0.0,
    seed: int = 42,
) -> List[EdgeRecord]:
    """Generate directed edge records with independent distance and time weights.

    A ``parallel_fraction`` share of edges is repeated with fresh weights so
    the result contains parallel arcs.
    """

    rng = np.random.default_rng(seed)

    max_edges = n_nodes * (n_nodes - 1)
    G = nx.gnm_random_graph(n_nodes, min(n_edges, max_edges), seed=seed, directed=True)

    edges = list(G.edges())
    m = len(edges)
    edge_distance = np.round(rng.uniform(distance_low, distance_high, size=m), 2)
    edge_time = np.round(rng.uniform(time_low, time_high, size=m), 2)

    records: List[EdgeRecord] = []
    for k, (u, v) in enumerate(edges):
        records.append((f"N{u}", f"N{v}", float(edge_distance[k]), float(edge_time[k])))

    n_parallel = int(round(m * parallel_fraction))
    if n_parallel > 0:
        picks = rng.choice(m, size=n_parallel, replace=False)
        for k in picks:
            u, v = edges[int(k)]
            records.append(
                (
                    f"N{u}",
                    f"N{v}",
                    float(np.round(rng.uniform(distance_low, distance_high), 2)),
                    float(np.round(rng.uniform(time_low, time_high), 2)),
                )
            )

    return records


def generate_sample_text(
    n_nodes: int = 50,
    n_edges: int = 200,
    metric: Metric = Metric.BOTH,
    seed: int = 42,
    **kwargs,
) -> str:
    """Render a complete query file: header line followed by edge lines."""

    if n_nodes < 2:
        raise ValueError(f"A sample query needs at least 2 nodes, got {n_nodes}")

    records = generate_random_graph_records(n_nodes=n_nodes, n_edges=n_edges, seed=seed, **kwargs)
    rng = np.random.default_rng(seed + 1)
    start, end = rng.choice(n_nodes, size=2, replace=False)

    lines = [f"N{start} N{end} {int(Metric.parse(metric))}"]
    for source, target, distance, time in records:
        lines.append(f"{source} {target} {distance:g} {time:g}")
    return "\n".join(lines) + "\n"
