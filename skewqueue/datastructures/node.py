from __future__ import annotations
from collections import deque
from typing import Generic, List, Optional, Protocol, Tuple, TypeVar


class SkewItem(Protocol):
    """Anything that can report an integer priority key.

    A lower key means a higher priority in the queue. The key must not
    change while the item is queued.
    """

    def priority(self) -> int:
        ...


T = TypeVar("T", bound=SkewItem)


class _SkewNode(Generic[T]):
    """A binary tree cell holding one item and up to two owned subtrees."""

    __slots__ = ("left", "right", "value")

    def __init__(self, value: T, left: Optional["_SkewNode[T]"] = None, right: Optional["_SkewNode[T]"] = None) -> None:
        self.left = left
        self.right = right
        self.value = value

    def priority(self) -> int:
        return self.value.priority()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"_SkewNode({self.value!r}, priority={self.priority()})"


def merge_nodes(a: Optional[_SkewNode[T]], b: Optional[_SkewNode[T]]) -> Optional[_SkewNode[T]]:
    """Destructively merge two trees and return the new root.

    Both inputs are consumed: their nodes are relinked into the result,
    so neither may be used afterwards. Every right link reachable from
    either root is cut, the cut fragments are sorted by priority, and the
    fragments are then folded back together from the lowest priority end,
    each step pushing the existing left subtree over to the right.

    Items with equal priority come out in no guaranteed relative order.
    """
    if a is None:
        return b
    if b is None:
        return a

    # Cut the right spines; what remains are nodes with only a left subtree.
    todo = deque((a, b))
    nodes: List[_SkewNode[T]] = []
    while todo:
        node = todo.popleft()
        if node.right is not None:
            todo.append(node.right)
            node.right = None
        nodes.append(node)

    nodes.sort(key=_SkewNode.priority)

    # Recombine from the tail
    while len(nodes) > 1:
        last = nodes.pop()
        prev = nodes[-1]
        prev.right = prev.left
        prev.left = last

    return nodes[0]


def clone_nodes(src: Optional[_SkewNode[T]]) -> Optional[_SkewNode[T]]:
    """Return a copy of the tree rooted at *src* that shares no nodes with it.

    Item references are copied, not the items themselves. Walks the tree
    with an explicit stack, so arbitrarily deep trees are fine.
    """
    if src is None:
        return None

    root: _SkewNode[T] = _SkewNode(src.value)
    stack: List[Tuple[_SkewNode[T], _SkewNode[T]]] = [(src, root)]
    while stack:
        old, new = stack.pop()
        if old.left is not None:
            new.left = _SkewNode(old.left.value)
            stack.append((old.left, new.left))
        if old.right is not None:
            new.right = _SkewNode(old.right.value)
            stack.append((old.right, new.right))
    return root
