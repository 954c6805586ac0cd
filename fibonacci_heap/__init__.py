from . import exceptions
from .exceptions import BaseError, EmptyHeapError, InvalidArgumentError
from .heap import FibonacciHeap, HeapStats
from .kmin import k_smallest
from .node import Node
from .ring import Ring

__all__ = [
    'BaseError',
    'EmptyHeapError',
    'FibonacciHeap',
    'HeapStats',
    'InvalidArgumentError',
    'Node',
    'Ring',
    'k_smallest',
]
