from .node import SkewItem, clone_nodes, merge_nodes
from .heap import SkewHeap, merge_queues, new

__all__ = [
    "SkewItem",
    "SkewHeap",
    "merge_queues",
    "merge_nodes",
    "clone_nodes",
    "new",
]
