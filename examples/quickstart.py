from fibonacci_heap import FibonacciHeap, k_smallest

heap = FibonacciHeap()
nodes = {key: heap.insert(key) for key in [5, 3, 8, 1, 9, 7]}

print("min:", heap.find_min())

heap.decrease_key(nodes[9], 7)
print("min after decrease:", heap.find_min())

heap.delete(nodes[8])
print("removed:", heap.delete_min())

other = FibonacciHeap()
other.insert(0)
heap.meld(other)

while len(heap) > 1 and heap.num_trees() > 1:
    heap.delete_min()

print("smallest keys:", k_smallest(heap, len(heap)))
print("rank histogram:", heap.counters_rep())
print("potential: %d, links: %d, cuts: %d" % (heap.potential(), heap.total_links(), heap.total_cuts()))
