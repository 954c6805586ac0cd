"""
K smallest keys extraction.
"""

from typing import List

from . import exceptions
from .heap import FibonacciHeap
from .node import Node


def k_smallest(heap: FibonacciHeap, k: int) -> List[int]:
    """
    Returns the `k` smallest keys of a heap consisting of a single tree in ascending order.
    The heap is not modified. Runs in O(k * deg(heap)) where deg(heap) is the root rank.

    The keys are extracted using an auxiliary heap of shadow nodes. Each shadow node refers
    to the original node it mirrors, when a shadow node is extracted the children
    of the original node are added to the auxiliary heap.

    :param heap: single tree heap
    :param k: number of keys to be returned
    :return: the smallest keys
    """

    if heap.num_trees() != 1:
        raise exceptions.InvalidArgumentError("heap must consist of a single tree")

    if not 1 <= k <= len(heap):
        raise exceptions.InvalidArgumentError(f"k must be in range [1, {len(heap)}]")

    root = heap.find_min()
    assert root is not None

    shadows = FibonacciHeap()
    shadows.add_node(Node(root.key, origin=root))

    result: List[int] = []
    for _ in range(k):
        shadow = shadows.find_min()
        assert shadow is not None and shadow.origin is not None

        result.append(shadow.key)
        for child in shadow.origin.children:
            shadows.add_node(Node(child.key, origin=child))

        shadows.delete_min()

    return result
