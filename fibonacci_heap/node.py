from typing import Optional

from .ring import Ring


class Node:
    """
    Fibonacci heap node.

    :param key: node key
    :param origin: node the created one mirrors (used by shadow nodes only)
    """

    __slots__ = ('key', 'mark', 'parent', 'children', 'next', 'prev', 'origin')

    def __init__(self, key: int, origin: Optional['Node'] = None):
        self.key = key
        self.mark = False
        self.parent: Optional[Node] = None
        self.children = Ring()
        self.next: Node = self
        self.prev: Node = self
        self.origin = origin

    def __repr__(self) -> str:
        return f"Node(key={self.key}, rank={self.rank}, mark={self.mark})"

    @property
    def rank(self) -> int:
        """
        Returns the number of the node children.
        """

        return len(self.children)

    @property
    def child(self) -> Optional['Node']:
        """
        Returns the child ring representative or `None` if the node has no children.
        """

        return self.children.head

    @property
    def is_root(self) -> bool:
        return self.parent is None
