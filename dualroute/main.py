"""Command-line entry point for dual-metric shortest path queries."""

import argparse
import sys
from typing import List, Mapping

from .algorithms import route
from .algorithms.shortest_path import PathResult
from .fake_data import generate_sample_text
from .graph_store import GraphStore, Metric
from .loader import GraphQuery, load_graph_file, load_graph_text


METRIC_LABELS = {
    Metric.DISTANCE: "Shortest Distance",
    Metric.TIME: "Fastest Time",
}


def format_path_report(label: str, result: PathResult | None) -> str:
    lines = ["", "=" * 60, f"  {label}", "=" * 60]
    if result is None:
        lines.append("  No path found")
        return "\n".join(lines)
    lines.append(f"  Path: {' → '.join(result.path)}")
    lines.append(f"  Hops: {result.n_hops}")
    lines.append(f"  Total distance: {result.total_distance:g}")
    lines.append(f"  Total time: {result.total_time:g}")
    return "\n".join(lines)


def print_path_report(label: str, result: PathResult | None) -> None:
    print(format_path_report(label, result))


def print_graph_summary(graph: GraphStore) -> None:
    print(f"  Nodes: {graph.n_nodes:,}")
    print(f"  Edges: {graph.n_edges:,}")
    print("  Type: Directed Graph")


def _print_progress(done: int, total: int) -> None:
    pct = round(done / total * 100) if total > 0 else 100
    print(f"  loaded {done:,}/{total:,} lines ({pct}%)")


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Dijkstra shortest path on a directed graph with distance and time weights."
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Query file: '<source> <destination> <choice>' header, then '<from> <to> <distance> <time>' lines.",
    )
    parser.add_argument("--sample", action="store_true", help="Use a generated random graph instead of a file.")
    parser.add_argument("--sample-nodes", type=int, default=50)
    parser.add_argument("--sample-edges", type=int, default=200)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument(
        "--metric",
        choices=["distance", "time", "both", "1", "2", "3"],
        help="Override the metric choice from the header.",
    )
    parser.add_argument("--start", help="Override the start node from the header.")
    parser.add_argument("--end", help="Override the destination node from the header.")
    parser.add_argument("--chunk-size", type=int, default=2000)
    parser.add_argument("--no-progress", action="store_true", help="Do not print loading progress.")
    parser.add_argument("--html", help="Write an HTML visualization of the result to this path.")
    parser.add_argument("--open", action="store_true", help="Open the HTML visualization in a browser.")
    args = parser.parse_args(argv)
    if not args.sample and not args.input:
        parser.error("either an input file or --sample is required")
    return args


def export_html(
    graph: GraphStore,
    query: GraphQuery,
    results: Mapping[Metric, PathResult | None],
    output_path: str,
    open_browser: bool = False,
) -> str:
    from .visualize import visualize_route
    from .visualize_html import export_figures_to_tabbed_html

    title = f"{query.start} → {query.end}"
    figures = [("All metrics", visualize_route(graph, results, title=title))]
    if len(results) > 1:
        for metric, result in results.items():
            figures.append(
                (METRIC_LABELS[metric], visualize_route(graph, {metric: result}, title=title))
            )
    return export_figures_to_tabbed_html(
        figures, output_path, title="Dijkstra Multi-Criteria Shortest Path", open_browser=open_browser
    )


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    progress = None if args.no_progress else _print_progress

    print("=== Loading Graph ===")
    try:
        if args.sample:
            text = generate_sample_text(
                n_nodes=args.sample_nodes, n_edges=args.sample_edges, seed=args.seed
            )
            query, graph = load_graph_text(text, chunk_size=args.chunk_size, progress=progress)
        else:
            query, graph = load_graph_file(args.input, chunk_size=args.chunk_size, progress=progress)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print_graph_summary(graph)

    query = GraphQuery(
        start=args.start or query.start,
        end=args.end or query.end,
        metric=Metric.parse(args.metric) if args.metric else query.metric,
    )

    print(f"\n=== Routing {query.start} → {query.end} ({query.metric.name.lower()}) ===")
    results = route(graph, query.start, query.end, query.metric)
    for metric, result in results.items():
        print_path_report(METRIC_LABELS[metric], result)

    if args.html:
        print("\n=== Building Visualization ===")
        export_html(graph, query, results, args.html, open_browser=args.open)

    return 0 if all(result is not None for result in results.values()) else 1


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
