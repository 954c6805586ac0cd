import random
from typing import Callable, Optional

import pytest

from fibonacci_heap import FibonacciHeap, Node, Ring


@pytest.fixture(autouse=True)
def init_random() -> None:
    random.seed(0)


def _check_ring(ring: Ring) -> None:
    members = list(ring)
    assert len(members) == len(ring)
    assert len(set(map(id, members))) == len(members)

    if members:
        assert ring.head is members[0]
        assert members[-1].next is ring.head
    else:
        assert ring.head is None

    for node in members:
        assert node.next.prev is node
        assert node.prev.next is node


def check_tree(node: Node, parent: Optional[Node]) -> int:
    """
    Checks a subtree and returns the number of marked nodes in it.
    """

    assert node.parent is parent
    if parent is None:
        assert not node.mark
    else:
        assert node.key >= parent.key

    _check_ring(node.children)
    assert node.rank == len(node.children)
    assert node.child is node.children.head

    marked = int(node.mark)
    for child in node.children:
        marked += check_tree(child, node)

    return marked


def count_nodes(node: Node) -> int:
    return 1 + sum(count_nodes(child) for child in node.children)


@pytest.fixture
def check_heap() -> Callable[[FibonacciHeap], None]:
    def check(heap: FibonacciHeap) -> None:
        roots = list(heap.roots())
        assert len(roots) == heap.num_trees()

        marked = 0
        for root in roots:
            assert root.next.prev is root
            marked += check_tree(root, None)

        assert marked == heap.marked_count()
        assert sum(count_nodes(root) for root in roots) == len(heap)
        assert heap.potential() == len(roots) + 2 * marked

        if roots:
            min_node = heap.find_min()
            assert min_node is not None
            assert any(root is min_node for root in roots)
            assert min_node.key == min(root.key for root in roots)
        else:
            assert heap.find_min() is None
            assert heap.is_empty()

    return check


@pytest.fixture
def check_ring() -> Callable[[Ring], None]:
    return _check_ring
