import random

import pytest

from fibonacci_heap import FibonacciHeap, InvalidArgumentError, k_smallest


def single_tree_heap(keys):
    """
    Builds a single tree heap of the provided keys (number of keys must be a power of 2).
    """

    heap = FibonacciHeap()
    for key in keys:
        heap.insert(key)
    heap.insert(min(keys) - 1)
    heap.delete_min()
    assert heap.num_trees() == 1

    return heap


def snapshot(heap):
    def walk(node):
        return node.key, node.rank, node.mark, [walk(child) for child in node.children]

    return [walk(root) for root in heap.roots()], len(heap), heap.potential(), heap.total_links()


def test_k_smallest():
    heap = single_tree_heap([50, 10, 80, 30, 20, 70, 60, 40])

    assert k_smallest(heap, 1) == [10]
    assert k_smallest(heap, 3) == [10, 20, 30]
    assert k_smallest(heap, 8) == [10, 20, 30, 40, 50, 60, 70, 80]


def test_k_smallest_not_mutated():
    heap = single_tree_heap(random.sample(range(10_000), 64))

    before = snapshot(heap)
    k_smallest(heap, 64)
    k_smallest(heap, 17)

    assert snapshot(heap) == before


def test_k_smallest_matches_delete_min():
    keys = random.sample(range(10_000), 128)
    heap = single_tree_heap(keys)
    copy = single_tree_heap(keys)

    expected_result = []
    while copy:
        expected_result.append(copy.delete_min())

    assert k_smallest(heap, len(heap)) == expected_result
    assert k_smallest(heap, len(heap)) == sorted(keys)


def test_k_smallest_after_decrease_key():
    heap = single_tree_heap(range(10, 90, 10))
    node = heap.find_min().child
    assert node.key == 20
    heap.decrease_key(node, 5)

    assert heap.num_trees() == 1
    assert k_smallest(heap, 5) == [10, 15, 30, 40, 50]


def test_k_smallest_single_node():
    heap = FibonacciHeap()
    heap.insert(3)

    assert k_smallest(heap, 1) == [3]
    assert len(heap) == 1


@pytest.mark.parametrize('k', [0, -1, 9])
def test_k_smallest_k_out_of_range_error(k):
    heap = single_tree_heap(range(8))

    with pytest.raises(InvalidArgumentError):
        k_smallest(heap, k)


def test_k_smallest_multiple_trees_error():
    heap = FibonacciHeap()
    heap.insert(1)
    heap.insert(2)

    with pytest.raises(InvalidArgumentError):
        k_smallest(heap, 1)


def test_k_smallest_empty_heap_error():
    with pytest.raises(InvalidArgumentError):
        k_smallest(FibonacciHeap(), 1)
