from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from .node import Node


class Ring:
    """
    Circular doubly-linked list of sibling nodes.
    The ring is identified by one representative member (`head`) and keeps its size cached.
    Nodes are threaded through their own `next` / `prev` attributes so that
    a known member can be removed in O(1).
    """

    __slots__ = ('_head', '_size')

    def __init__(self) -> None:
        self._head: Optional['Node'] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __iter__(self) -> Iterator['Node']:
        node = self._head
        for _ in range(self._size):
            assert node is not None
            yield node
            node = node.next

    def __repr__(self) -> str:
        return f"Ring(size={self._size}, head={self._head!r})"

    @property
    def head(self) -> Optional['Node']:
        """
        Returns the ring representative or `None` if the ring is empty.
        """

        return self._head

    def clear(self) -> None:
        """
        Forgets all the ring members. Members' links are left as is.
        """

        self._head = None
        self._size = 0

    def add(self, node: 'Node') -> None:
        """
        Threads a node into the ring right before the representative.
        The node's previous links are overwritten.

        :param node: node to be added
        """

        if (head := self._head) is None:
            node.next = node.prev = node
            self._head = node
        else:
            last = head.prev
            last.next = node
            node.prev = last
            node.next = head
            head.prev = node

        self._size += 1

    def remove(self, node: 'Node') -> None:
        """
        Detaches a ring member leaving it a singleton.
        If the representative is removed the next member becomes the representative.

        :param node: ring member to be removed
        """

        assert self._size != 0, "ring is empty"

        self._size -= 1
        if self._size == 0:
            self._head = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next

        node.next = node.prev = node

    def splice(self, other: 'Ring') -> None:
        """
        Moves all the members of another ring into this one. The other ring is left empty.

        :param other: ring to be spliced in
        """

        if other is self:
            raise AssertionError("ring can't be spliced with itself")

        if (other_head := other._head) is None:
            return

        if (head := self._head) is None:
            self._head = other_head
        else:
            last = head.prev
            other_last = other_head.prev

            last.next = other_head
            other_head.prev = last
            other_last.next = head
            head.prev = other_last

        self._size += other._size
        other.clear()
