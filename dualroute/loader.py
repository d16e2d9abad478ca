"""Text ingestion for route query files.

File format::

    <source> <destination> <choice>        choice: 1=distance, 2=time, 3=both
    <from> <to> <distance> <time>          one directed edge per line
    ...

Edge lines with fewer than four fields are ignored.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, List, Sequence, Tuple

from .graph_store import EdgeRecord, GraphStore, Metric


ProgressCallback = Callable[[int, int], None]


class GraphFormatError(ValueError):
    """Raised when a query file cannot be parsed."""


@dataclass(frozen=True)
class GraphQuery:
    start: str
    end: str
    metric: Metric


def parse_header(line: str) -> GraphQuery:
    parts = line.split()
    if len(parts) < 3:
        raise GraphFormatError(f"Header needs '<source> <destination> <choice>', got {line!r}")
    start, end, choice = parts[:3]
    try:
        metric = Metric.parse(choice)
    except ValueError:
        raise GraphFormatError(f"Unknown metric choice {choice!r} in header") from None
    return GraphQuery(start=start, end=end, metric=metric)


def iter_edge_records(
    lines: Sequence[str],
    chunk_size: int = 2000,
    progress: ProgressCallback | None = None,
    first_line_no: int = 2,
) -> Iterator[EdgeRecord]:
    """Yield ``(source, target, distance, time)`` for every edge line.

    ``progress(done, total)`` is called after each chunk of ``chunk_size``
    lines. ``first_line_no`` is the file line number of ``lines[0]``, used in
    error messages.
    """

    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    total = len(lines)
    for chunk_start in range(0, total, chunk_size):
        chunk_end = min(chunk_start + chunk_size, total)
        for offset in range(chunk_start, chunk_end):
            parts = lines[offset].split()
            if len(parts) < 4:
                continue
            source, target, dist_str, time_str = parts[:4]
            try:
                distance = float(dist_str)
                time = float(time_str)
            except ValueError:
                raise GraphFormatError(
                    f"Line {first_line_no + offset}: bad weights {dist_str!r} {time_str!r}"
                ) from None
            yield source, target, distance, time
        if progress is not None:
            progress(chunk_end, total)


def load_graph_text(
    text: str,
    chunk_size: int = 2000,
    progress: ProgressCallback | None = None,
) -> Tuple[GraphQuery, GraphStore]:
    lines: List[str] = text.splitlines()
    header_idx = next((idx for idx, line in enumerate(lines) if line.strip()), None)
    if header_idx is None:
        raise GraphFormatError("Input is empty")

    query = parse_header(lines[header_idx])
    records = iter_edge_records(
        lines[header_idx + 1 :],
        chunk_size=chunk_size,
        progress=progress,
        first_line_no=header_idx + 2,
    )
    return query, GraphStore.from_records(records)


def load_graph_file(
    path: str | Path,
    chunk_size: int = 2000,
    progress: ProgressCallback | None = None,
) -> Tuple[GraphQuery, GraphStore]:
    text = Path(path).read_text(encoding="utf-8")
    return load_graph_text(text, chunk_size=chunk_size, progress=progress)
