import logging
from typing import Dict, List, Tuple

from fibonacci_heap import FibonacciHeap, Node

Vertex = int
Graph = Dict[Vertex, List[Tuple[Vertex, int]]]

logging.basicConfig(level=logging.DEBUG)


def shortest_paths(graph: Graph, source: Vertex) -> Dict[Vertex, int]:
    heap = FibonacciHeap()
    handles: Dict[Node, Vertex] = {}
    nodes: Dict[Vertex, Node] = {}

    for vertex in graph:
        node = heap.insert(0 if vertex == source else 10 ** 9)
        nodes[vertex] = node
        handles[node] = vertex

    distances: Dict[Vertex, int] = {}
    while heap:
        node = heap.find_min()
        assert node is not None
        vertex = handles[node]
        distances[vertex] = heap.delete_min()

        for neighbour, weight in graph[vertex]:
            if neighbour in distances:
                continue

            neighbour_node = nodes[neighbour]
            if (distance := distances[vertex] + weight) < neighbour_node.key:
                heap.decrease_key(neighbour_node, neighbour_node.key - distance)

    return distances


graph: Graph = {
    0: [(1, 4), (2, 1)],
    1: [(3, 1)],
    2: [(1, 2), (3, 5)],
    3: [(4, 3)],
    4: [],
}

print(shortest_paths(graph, source=0))
