"""Array-backed binary min-heap over (node, priority) pairs."""

import numpy as np
from numba import njit


@njit
def create_heap(capacity: int) -> tuple:
    """Allocate node/priority storage for a heap holding up to ``capacity`` entries."""
    heap_nodes = np.full(capacity, -1, dtype=np.int64)
    heap_priorities = np.full(capacity, np.inf, dtype=np.float64)
    return heap_nodes, heap_priorities


@njit
def heap_is_empty(size: int) -> bool:
    return size == 0


@njit
def _swap(heap_nodes: np.ndarray, heap_priorities: np.ndarray, i: int, j: int) -> None:
    node = heap_nodes[i]
    heap_nodes[i] = heap_nodes[j]
    heap_nodes[j] = node
    priority = heap_priorities[i]
    heap_priorities[i] = heap_priorities[j]
    heap_priorities[j] = priority


@njit
def _sift_up(heap_nodes: np.ndarray, heap_priorities: np.ndarray, idx: int) -> None:
    while idx > 0:
        parent = (idx - 1) // 2
        if heap_priorities[idx] >= heap_priorities[parent]:
            break
        _swap(heap_nodes, heap_priorities, idx, parent)
        idx = parent


@njit
def _sift_down(heap_nodes: np.ndarray, heap_priorities: np.ndarray, size: int, idx: int) -> None:
    while True:
        smallest = idx
        left = 2 * idx + 1
        right = 2 * idx + 2
        if left < size and heap_priorities[left] < heap_priorities[smallest]:
            smallest = left
        if right < size and heap_priorities[right] < heap_priorities[smallest]:
            smallest = right
        if smallest == idx:
            break
        _swap(heap_nodes, heap_priorities, idx, smallest)
        idx = smallest


@njit
def heap_push(
    heap_nodes: np.ndarray,
    heap_priorities: np.ndarray,
    size: int,
    node: int,
    priority: float,
) -> int:
    """Insert an entry and return the new size, or -1 when the heap is full.

    The same node may be pushed several times with different priorities.
    """
    if size >= heap_nodes.shape[0]:
        return -1
    heap_nodes[size] = node
    heap_priorities[size] = priority
    _sift_up(heap_nodes, heap_priorities, size)
    return size + 1


@njit
def heap_pop(heap_nodes: np.ndarray, heap_priorities: np.ndarray, size: int) -> tuple:
    """Remove the minimum entry.

    Returns ``(node, priority, new_size)``. An empty heap yields
    ``(-1, inf, 0)``, as does a negative size. Equal priorities come out
    in heap order.
    """
    if size <= 0:
        return np.int64(-1), np.inf, np.int64(0)

    node = heap_nodes[0]
    priority = heap_priorities[0]
    last = size - 1
    heap_nodes[0] = heap_nodes[last]
    heap_priorities[0] = heap_priorities[last]
    heap_nodes[last] = -1
    heap_priorities[last] = np.inf
    _sift_down(heap_nodes, heap_priorities, last, 0)
    return node, priority, np.int64(last)
