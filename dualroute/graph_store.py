"""Directed dual-weight graph stored as CSR arrays."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Tuple

import numpy as np


EdgeRecord = Tuple[str, str, float, float]


class Metric(IntEnum):
    """Edge weight driving a query. Values match the input file's choice codes."""

    DISTANCE = 1
    TIME = 2
    BOTH = 3

    @classmethod
    def parse(cls, value) -> "Metric":
        """Resolve a member, a choice code (1/2/3) or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                raise ValueError(f"Unknown metric selector: {value!r}") from None
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return cls.parse(int(text))
            try:
                return cls[text.upper()]
            except KeyError:
                raise ValueError(f"Unknown metric selector: {value!r}") from None
        raise ValueError(f"Unknown metric selector: {value!r}")


@dataclass(frozen=True)
class Edge:
    to: str
    distance: float
    time: float


class GraphStore:
    """Immutable adjacency built once from ``(source, target, distance, time)`` records.

    Node ids are interned to dense indices in first-seen order. Outgoing
    edges of index ``i`` live in ``edge_offsets[i]:edge_offsets[i + 1]`` and
    keep their insertion order; parallel edges are not merged.
    """

    def __init__(
        self,
        node_ids: List[str],
        edge_offsets: np.ndarray,
        edge_target: np.ndarray,
        edge_distance: np.ndarray,
        edge_time: np.ndarray,
    ) -> None:
        self._node_ids = list(node_ids)
        self._node_index: Dict[str, int] = {nid: idx for idx, nid in enumerate(self._node_ids)}
        # private copies; callers keep their own arrays writable
        self.edge_offsets = np.array(edge_offsets, dtype=np.int64)
        self.edge_target = np.array(edge_target, dtype=np.int64)
        self.edge_distance = np.array(edge_distance, dtype=np.float64)
        self.edge_time = np.array(edge_time, dtype=np.float64)
        for arr in (self.edge_offsets, self.edge_target, self.edge_distance, self.edge_time):
            arr.flags.writeable = False

    @classmethod
    def from_records(cls, records: Iterable[EdgeRecord]) -> "GraphStore":
        node_ids: List[str] = []
        node_index: Dict[str, int] = {}

        def _intern(node_id: str) -> int:
            idx = node_index.get(node_id)
            if idx is None:
                idx = len(node_ids)
                node_index[node_id] = idx
                node_ids.append(node_id)
            return idx

        src_list: List[int] = []
        dst_list: List[int] = []
        dist_list: List[float] = []
        time_list: List[float] = []
        for source, target, distance, time in records:
            src_list.append(_intern(str(source)))
            dst_list.append(_intern(str(target)))
            dist_list.append(float(distance))
            time_list.append(float(time))

        n_nodes = len(node_ids)
        edge_src = np.asarray(src_list, dtype=np.int64)
        counts = np.bincount(edge_src, minlength=n_nodes)
        edge_offsets = np.zeros(n_nodes + 1, dtype=np.int64)
        np.cumsum(counts, out=edge_offsets[1:])

        # stable so each node keeps its insertion order
        order = np.argsort(edge_src, kind="stable")
        edge_target = np.asarray(dst_list, dtype=np.int64)[order]
        edge_distance = np.asarray(dist_list, dtype=np.float64)[order]
        edge_time = np.asarray(time_list, dtype=np.float64)[order]

        return cls(node_ids, edge_offsets, edge_target, edge_distance, edge_time)

    @property
    def n_nodes(self) -> int:
        return len(self._node_ids)

    @property
    def n_edges(self) -> int:
        return int(self.edge_target.shape[0])

    @property
    def nodes(self) -> List[str]:
        return sorted(self._node_ids)

    def __len__(self) -> int:
        return self.n_nodes

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._node_index

    def index_of(self, node_id: str) -> int | None:
        return self._node_index.get(node_id)

    def node_id(self, index: int) -> str:
        return self._node_ids[index]

    def neighbors(self, node_id: str) -> List[Edge]:
        """Outgoing edges in insertion order; empty for sinks and unknown ids."""
        idx = self._node_index.get(node_id)
        if idx is None:
            return []
        start, stop = self.edge_offsets[idx], self.edge_offsets[idx + 1]
        return [
            Edge(
                to=self._node_ids[int(self.edge_target[e])],
                distance=float(self.edge_distance[e]),
                time=float(self.edge_time[e]),
            )
            for e in range(start, stop)
        ]

    def weights(self, metric: Metric) -> np.ndarray:
        metric = Metric.parse(metric)
        if metric == Metric.DISTANCE:
            return self.edge_distance
        if metric == Metric.TIME:
            return self.edge_time
        raise ValueError(f"A single query needs DISTANCE or TIME, got {metric.name}")

    def records(self) -> List[EdgeRecord]:
        """Edge records grouped by source, each group in insertion order."""
        out: List[EdgeRecord] = []
        for idx, nid in enumerate(self._node_ids):
            for e in range(self.edge_offsets[idx], self.edge_offsets[idx + 1]):
                out.append(
                    (
                        nid,
                        self._node_ids[int(self.edge_target[e])],
                        float(self.edge_distance[e]),
                        float(self.edge_time[e]),
                    )
                )
        return out
