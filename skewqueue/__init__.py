"""
skewqueue: a mergeable priority queue built on the skew heap.

Items supply their own integer key through a ``priority()`` method;
lower keys come out first. Queues are safe to share between threads, and
two queues can be combined into a third without modifying either:

    from skewqueue import SkewHeap, merge_queues
    a, b = SkewHeap(jobs_a), SkewHeap(jobs_b)
    both = merge_queues(a, b)
"""

import logging

from .errors import EmptyQueue
from .datastructures import SkewHeap, SkewItem, merge_queues, new

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EmptyQueue",
    "SkewHeap",
    "SkewItem",
    "merge_queues",
    "new",
]
