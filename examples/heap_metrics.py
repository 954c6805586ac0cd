import random
import time

import prometheus_client as prom

from fibonacci_heap import FibonacciHeap
from fibonacci_heap.contrib.prometheus import HeapCollector

tasks = FibonacciHeap()

collector = HeapCollector()
collector.add_heap('tasks', tasks)
prom.REGISTRY.register(collector)

prom.start_http_server(8000)

while True:
    for _ in range(random.randint(1, 10)):
        tasks.insert(random.randint(0, 1_000_000))

    for _ in range(random.randint(1, 10)):
        if tasks:
            tasks.delete_min()

    time.sleep(1.0)
