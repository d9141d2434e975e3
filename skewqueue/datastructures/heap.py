from __future__ import annotations
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Generic, Iterable, Optional, Tuple, TypeVar

from ..errors import EmptyQueue
from .node import SkewItem, _SkewNode, clone_nodes, merge_nodes

log = logging.getLogger(__name__)

T = TypeVar("T", bound=SkewItem)

# One snapshot task per operand of merge_queues.
_MERGE_WORKERS = 2


class SkewHeap(Generic[T]):
    """A thread-safe min-priority queue backed by a skew heap.

    Every operation is defined in terms of a single destructive merge of
    two trees. Two queues can be combined into a third with
    :func:`merge_queues` without touching either operand.
    """

    __slots__ = ("_size", "_root", "_lock")

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._size: int = 0
        self._root: Optional[_SkewNode[T]] = None
        self._lock = threading.Lock()
        if items is not None:
            for item in items:
                self.insert(item)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _snapshot(self) -> Tuple[int, Optional[_SkewNode[T]]]:
        """Return the size and a private copy of the tree, taken under the lock."""
        with self._lock:
            return self._size, clone_nodes(self._root)

    @classmethod
    def _from_tree(cls, size: int, root: Optional[_SkewNode[T]]) -> "SkewHeap[T]":
        heap: SkewHeap[T] = cls()
        heap._size = size
        heap._root = root
        return heap

    # -----------------------------
    # Public API
    # -----------------------------
    def size(self) -> int:
        """Return the number of queued items."""
        with self._lock:
            return self._size

    def insert(self, value: T) -> None:
        """Add *value* to the queue (amortized O(log n))."""
        node = _SkewNode(value)
        with self._lock:
            if self._size == 0:
                self._root = node
            else:
                self._root = merge_nodes(self._root, node)
            self._size += 1

    def extract(self) -> T:
        """Remove and return the item with the lowest priority key."""
        with self._lock:
            if self._size == 0:
                raise EmptyQueue("extract from empty queue")
            root = self._root
            self._root = merge_nodes(root.left, root.right)
            self._size -= 1
            return root.value

    def peek(self) -> T:
        """Return the item with the lowest priority key without removing it."""
        with self._lock:
            if self._size == 0:
                raise EmptyQueue("peek at empty queue")
            return self._root.value

    def merge(self, other: "SkewHeap[T]") -> "SkewHeap[T]":
        """Return a new queue holding the items of both; see :func:`merge_queues`."""
        return merge_queues(self, other)

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self.size() > 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"SkewHeap(size={self.size()})"


def new() -> SkewHeap:
    """Return an empty queue."""
    return SkewHeap()


def merge_queues(a: SkewHeap[T], b: SkewHeap[T]) -> SkewHeap[T]:
    """Combine two queues into a new one, leaving both unchanged.

    Each operand is snapshotted (size + cloned tree) in its own worker
    thread while holding only that operand's lock, and both snapshots are
    joined before the clones are merged. No thread ever holds two queue
    locks, so concurrent merges of the same pair in opposite order cannot
    deadlock, and neither operand is locked while the result is built.
    """
    with ThreadPoolExecutor(max_workers=_MERGE_WORKERS) as pool:
        fa = pool.submit(a._snapshot)
        fb = pool.submit(b._snapshot)
        size_a, root_a = fa.result()
        size_b, root_b = fb.result()

    log.debug("merging queues of size %d and %d", size_a, size_b)
    merged = SkewHeap._from_tree(size_a + size_b, merge_nodes(root_a, root_b))
    log.debug("merged queue has %d items", merged._size)
    return merged
