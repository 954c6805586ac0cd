"""
Prometheus heap statistics collector.
"""

from typing import Dict, Iterable

from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily, Metric
from prometheus_client.registry import Collector

from fibonacci_heap.heap import FibonacciHeap


class HeapCollector(Collector):
    """
    Prometheus collector exporting the state of registered heaps.
    Each heap is labelled by the name it is registered with.

    :param prefix: metric names prefix
    """

    def __init__(self, prefix: str = 'fibonacci_heap'):
        self._prefix = prefix
        self._heaps: Dict[str, FibonacciHeap] = {}

    def add_heap(self, name: str, heap: FibonacciHeap) -> None:
        """
        Starts exporting a heap.

        :param name: heap label value
        :param heap: heap to be exported
        """

        if name in self._heaps:
            raise KeyError("heap already exists")

        self._heaps[name] = heap

    def remove_heap(self, name: str) -> None:
        self._heaps.pop(name, None)

    def collect(self) -> Iterable[Metric]:
        size = GaugeMetricFamily(f'{self._prefix}_size', 'Number of heap nodes', labels=['heap'])
        trees = GaugeMetricFamily(f'{self._prefix}_trees', 'Number of heap trees', labels=['heap'])
        marked = GaugeMetricFamily(f'{self._prefix}_marked', 'Number of marked heap nodes', labels=['heap'])
        potential = GaugeMetricFamily(f'{self._prefix}_potential', 'Heap potential', labels=['heap'])
        links = CounterMetricFamily(f'{self._prefix}_links', 'Link operations count', labels=['heap'])
        cuts = CounterMetricFamily(f'{self._prefix}_cuts', 'Cut operations count', labels=['heap'])

        for name, heap in self._heaps.items():
            size.add_metric([name], len(heap))
            trees.add_metric([name], heap.num_trees())
            marked.add_metric([name], heap.marked_count())
            potential.add_metric([name], heap.potential())
            links.add_metric([name], heap.total_links())
            cuts.add_metric([name], heap.total_cuts())

        yield from (size, trees, marked, potential, links, cuts)
