import random
import sys

from skewqueue.datastructures.node import _SkewNode, clone_nodes, merge_nodes


class Item:
    __slots__ = ("key",)

    def __init__(self, key: int) -> None:
        self.key = key

    def priority(self) -> int:
        return self.key


def build(keys):
    root = None
    for k in keys:
        root = merge_nodes(root, _SkewNode(Item(k)))
    return root


def walk(root):
    """Yield every node reachable from *root*."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        for child in (node.left, node.right):
            if child is not None:
                stack.append(child)


def assert_heap_ordered(root):
    for node in walk(root):
        for child in (node.left, node.right):
            if child is not None:
                assert node.priority() <= child.priority()


def test_merge_with_none_returns_other_side():
    n = _SkewNode(Item(3))
    assert merge_nodes(None, None) is None
    assert merge_nodes(n, None) is n
    assert merge_nodes(None, n) is n


def test_merge_keeps_minimum_at_root_and_all_nodes():
    a = build([5, 1, 9, 7])
    b = build([4, 0, 8])
    root = merge_nodes(a, b)
    assert root.priority() == 0
    assert sorted(n.priority() for n in walk(root)) == [0, 1, 4, 5, 7, 8, 9]
    assert_heap_ordered(root)


def test_merge_random_trees_stay_heap_ordered():
    rng = random.Random(1234)
    for _ in range(20):
        ka = [rng.randint(-100, 100) for _ in range(rng.randint(0, 40))]
        kb = [rng.randint(-100, 100) for _ in range(rng.randint(0, 40))]
        root = merge_nodes(build(ka), build(kb))
        assert sorted(n.priority() for n in walk(root)) == sorted(ka + kb)
        assert_heap_ordered(root)


def test_merge_reuses_input_nodes():
    a = _SkewNode(Item(2))
    b = _SkewNode(Item(1))
    root = merge_nodes(a, b)
    assert root is b
    assert root.left is a
    assert root.right is None


def test_clone_of_none_is_none():
    assert clone_nodes(None) is None


def test_clone_shares_no_nodes_but_shares_values():
    src = build(range(30))
    copy = clone_nodes(src)

    src_nodes = list(walk(src))
    copy_nodes = list(walk(copy))
    assert len(src_nodes) == len(copy_nodes) == 30
    assert not {id(n) for n in src_nodes} & {id(n) for n in copy_nodes}

    # Same shape, same item objects
    pairs = [(src, copy)]
    while pairs:
        s, c = pairs.pop()
        assert s.value is c.value
        for sc, cc in ((s.left, c.left), (s.right, c.right)):
            assert (sc is None) == (cc is None)
            if sc is not None:
                pairs.append((sc, cc))


def test_clone_survives_merge_of_source():
    src = build([3, 1, 2])
    copy = clone_nodes(src)
    merge_nodes(src, build([0]))
    assert sorted(n.priority() for n in walk(copy)) == [1, 2, 3]
    assert_heap_ordered(copy)


def test_clone_deep_degenerate_tree():
    depth = sys.getrecursionlimit() * 3
    root = _SkewNode(Item(0))
    node = root
    for k in range(1, depth):
        node.left = _SkewNode(Item(k))
        node = node.left

    copy = clone_nodes(root)
    count = 0
    node = copy
    while node is not None:
        assert node.priority() == count
        assert node.right is None
        count += 1
        node = node.left
    assert count == depth
