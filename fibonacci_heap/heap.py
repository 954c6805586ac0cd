import dataclasses as dc
import logging
import math
from typing import Iterator, List, Optional

from . import exceptions
from .node import Node
from .ring import Ring

logger = logging.getLogger(__package__)

GOLDEN_RATIO = (1 + math.sqrt(5)) / 2


def max_rank_bound(count: int) -> int:
    """
    Returns the maximum rank a node of a heap containing `count` nodes may have.
    A subtree of rank k holds at least phi^k nodes, so the rank can't exceed log_phi(count).
    One is added to compensate floating point rounding.

    :param count: number of heap nodes
    """

    if count <= 1:
        return 0

    return int(math.log(count, GOLDEN_RATIO)) + 1


@dc.dataclass
class HeapStats:
    """
    Heap lifetime statistics.
    Several heaps may share the same instance to aggregate their statistics.

    :param links: number of link operations performed
    :param cuts: number of cut operations performed
    """

    links: int = 0
    cuts: int = 0


class FibonacciHeap:
    """
    Fibonacci heap over integer keys.

    Supports insert, find-min, meld and decrease-key in amortized O(1),
    delete-min and delete in amortized O(log(n)).
    Node handles returned by `insert` must be used only with the heap they were inserted into.
    Keys are assumed to be unique, that is not checked.

    :param stats: statistics object the heap counts links and cuts in;
                  if not provided the heap creates its own
    """

    def __init__(self, stats: Optional[HeapStats] = None):
        self._roots = Ring()
        self._min: Optional[Node] = None
        self._count = 0
        self._marked = 0
        self._stats = stats if stats is not None else HeapStats()

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count != 0

    def __repr__(self) -> str:
        return f"FibonacciHeap(size={self._count}, trees={len(self._roots)}, min={self._min!r})"

    @property
    def stats(self) -> HeapStats:
        return self._stats

    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def num_trees(self) -> int:
        """
        Returns the number of trees (roots) in the heap.
        """

        return len(self._roots)

    def marked_count(self) -> int:
        """
        Returns the number of marked nodes in the heap.
        """

        return self._marked

    def roots(self) -> Iterator[Node]:
        """
        Returns an iterator over the tree roots.
        The heap must not be modified during the iteration.
        """

        return iter(self._roots)

    def clear(self) -> None:
        """
        Remove all nodes from the heap. Statistics are kept.
        """

        self._roots.clear()
        self._min = None
        self._count = 0
        self._marked = 0

    def find_min(self) -> Optional[Node]:
        """
        Returns the node with the smallest key or `None` if the heap is empty.
        """

        return self._min

    def insert(self, key: int) -> Node:
        """
        Inserts a new key into the heap.

        :param key: key to be inserted
        :return: node handle of the inserted key
        """

        node = Node(key)
        self.add_node(node)

        return node

    def add_node(self, node: Node) -> None:
        """
        Adds a detached childless node to the root list.

        :param node: node to be added
        """

        assert node.parent is None and node.rank == 0, "node is not detached"

        self._roots.add(node)
        self._count += 1

        if self._min is None or node.key < self._min.key:
            self._min = node

    def meld(self, other: 'FibonacciHeap') -> None:
        """
        Melds another heap into this one. The other heap is left empty.
        Statistics are not merged: each heap keeps counting links and cuts in its own `HeapStats`.

        :param other: heap to be absorbed
        """

        if other is self:
            raise exceptions.InvalidArgumentError("heap can't be melded with itself")

        if other._min is not None and (self._min is None or other._min.key < self._min.key):
            self._min = other._min

        self._roots.splice(other._roots)
        self._count += other._count
        self._marked += other._marked

        logger.debug("melded %d nodes, heap size: %d", other._count, self._count)
        other.clear()

    def delete_min(self) -> int:
        """
        Removes the node with the smallest key and consolidates the heap trees.

        :return: removed key
        """

        if (min_node := self._min) is None:
            raise exceptions.EmptyHeapError("heap is empty")

        self._roots.remove(min_node)

        for child in min_node.children:
            child.parent = None
            if child.mark:
                child.mark = False
                self._marked -= 1

        self._roots.splice(min_node.children)

        if self._roots:
            self._consolidate()
        else:
            self._min = None

        self._count -= 1

        return min_node.key

    def decrease_key(self, node: Node, delta: int) -> None:
        """
        Decreases a node key. If the heap order is violated the node is cut off its parent.

        :param node: node handle
        :param delta: non-negative value the key is decreased by
        """

        if delta < 0:
            raise exceptions.InvalidArgumentError("delta must be non-negative")

        node.key -= delta

        if (parent := node.parent) is not None:
            if node.key < parent.key:
                self._cascading_cut(node)
        elif self._min is not None and node.key < self._min.key:
            self._min = node

    def delete(self, node: Node) -> int:
        """
        Removes a node from the heap.

        :param node: node handle
        :return: key the node held
        """

        if (min_node := self._min) is None:
            raise exceptions.EmptyHeapError("heap is empty")

        key = node.key
        if node is not min_node:
            # makes the node the unique minimum
            self.decrease_key(node, node.key - min_node.key + 1)

        assert self._min is node
        self.delete_min()
        node.key = key

        return key

    def potential(self) -> int:
        """
        Returns the heap potential: number of trees plus twice the number of marked nodes.
        """

        return len(self._roots) + 2 * self._marked

    def total_links(self) -> int:
        return self._stats.links

    def total_cuts(self) -> int:
        return self._stats.cuts

    def counters_rep(self) -> List[int]:
        """
        Returns the tree rank histogram: the i-th item is the number of trees of rank i.
        An empty heap returns an empty list.
        """

        ranks = [root.rank for root in self._roots]
        if not ranks:
            return []

        counters = [0] * (max(ranks) + 1)
        for rank in ranks:
            counters[rank] += 1

        return counters

    def _consolidate(self) -> None:
        """
        Links the trees of equal rank until all the roots have distinct ranks
        and finds the new minimum.
        """

        buckets: List[Optional[Node]] = [None] * (max_rank_bound(self._count) + 1)

        roots = list(self._roots)
        self._roots.clear()

        for root in roots:
            rank = root.rank
            while (other := buckets[rank]) is not None:
                buckets[rank] = None
                root = self._link(other, root)
                rank += 1

            buckets[rank] = root

        new_min: Optional[Node] = None
        for root in buckets:
            if root is not None:
                self._roots.add(root)
                if new_min is None or root.key < new_min.key:
                    new_min = root

        self._min = new_min

        logger.debug("consolidated %d roots into %d trees", len(roots), len(self._roots))

    def _link(self, first: Node, second: Node) -> Node:
        """
        Hangs the tree with the larger root key under the other one.

        :param first: tree root (wins ties)
        :param second: tree root of the same rank
        :return: resulting tree root
        """

        assert first.rank == second.rank

        if second.key < first.key:
            lo, hi = second, first
        else:
            lo, hi = first, second

        hi.mark = False
        hi.parent = lo
        lo.children.add(hi)
        self._stats.links += 1

        return lo

    def _cascading_cut(self, node: Node) -> None:
        """
        Cuts a node off its parent moving it to the root list.
        Marked ancestors are cut as well up to the first unmarked one, which gets marked.

        :param node: node violating the heap order
        """

        assert self._min is not None

        cuts = 0
        while (parent := node.parent) is not None:
            parent.children.remove(node)
            node.parent = None
            if node.mark:
                node.mark = False
                self._marked -= 1

            self._roots.add(node)
            self._stats.cuts += 1
            cuts += 1

            if node.key < self._min.key:
                self._min = node

            if parent.is_root:
                break

            if not parent.mark:
                parent.mark = True
                self._marked += 1
                break

            node = parent

        logger.debug("cascading cut finished after %d cuts", cuts)
