"""Plotly-based visualization of a graph and the routes found on it."""

from typing import Dict, Mapping

import networkx as nx
import numpy as np
import plotly.graph_objects as go

from .algorithms.shortest_path import PathResult
from .graph_store import GraphStore, Metric


METRIC_COLORS = {
    Metric.DISTANCE: "#1976d2",
    Metric.TIME: "#e65100",
}


def compute_layout(graph: GraphStore, seed: int = 42) -> Dict[str, np.ndarray]:
    """Spring layout positions keyed by node id."""

    G = nx.DiGraph()
    G.add_nodes_from(graph.node_id(i) for i in range(graph.n_nodes))
    G.add_edges_from((source, target) for source, target, _, _ in graph.records())
    return nx.spring_layout(G, seed=seed)


def _segment_coords(pairs, pos: Mapping[str, np.ndarray]) -> tuple[list, list]:
    xs: list = []
    ys: list = []
    for u, v in pairs:
        xs.extend([pos[u][0], pos[v][0], None])
        ys.extend([pos[u][1], pos[v][1], None])
    return xs, ys


def visualize_route(
    graph: GraphStore,
    results: Mapping[Metric, PathResult | None],
    title: str = "Shortest Path",
    node_size: int = 10,
    seed: int = 42,
) -> go.Figure:
    """Draw every edge in grey and overlay each metric's path in its own color."""

    pos = compute_layout(graph, seed=seed)
    fig = go.Figure()

    edge_x, edge_y = _segment_coords(
        ((source, target) for source, target, _, _ in graph.records()), pos
    )
    fig.add_trace(
        go.Scatter(
            x=edge_x,
            y=edge_y,
            mode="lines",
            line=dict(width=1, color="#bdbdbd"),
            hoverinfo="skip",
            name="edges",
            showlegend=False,
        )
    )

    node_ids = [graph.node_id(i) for i in range(graph.n_nodes)]
    fig.add_trace(
        go.Scatter(
            x=[pos[n][0] for n in node_ids],
            y=[pos[n][1] for n in node_ids],
            mode="markers",
            marker=dict(size=node_size, color="#616161"),
            hovertext=node_ids,
            hoverinfo="text",
            name="nodes",
            showlegend=False,
        )
    )

    for metric, result in results.items():
        if result is None or len(result.path) == 0:
            continue
        color = METRIC_COLORS.get(metric, "#2e7d32")
        label = (
            f"{metric.name.lower()}: {result.total_distance:g} dist, "
            f"{result.total_time:g} time"
        )
        path_nodes = [n for n in result.path if n in pos]
        path_x, path_y = _segment_coords(zip(path_nodes[:-1], path_nodes[1:]), pos)
        fig.add_trace(
            go.Scatter(
                x=path_x,
                y=path_y,
                mode="lines",
                line=dict(width=4, color=color),
                name=label,
                hoverinfo="skip",
            )
        )
        if path_nodes:
            fig.add_trace(
                go.Scatter(
                    x=[pos[path_nodes[0]][0], pos[path_nodes[-1]][0]],
                    y=[pos[path_nodes[0]][1], pos[path_nodes[-1]][1]],
                    mode="markers",
                    marker=dict(
                        size=node_size * 1.9,
                        symbol=["triangle-up", "triangle-down"],
                        color=color,
                        line=dict(width=2, color="black"),
                    ),
                    hovertext=[f"start {path_nodes[0]}", f"end {path_nodes[-1]}"],
                    hoverinfo="text",
                    showlegend=False,
                )
            )

    fig.update_layout(
        title=title,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, scaleanchor="x", scaleratio=1),
        plot_bgcolor="white",
        hovermode="closest",
    )
    return fig
