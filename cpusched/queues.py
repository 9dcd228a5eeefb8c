"""Ready queues: a bounded FIFO and a bounded binary-heap priority queue."""

from __future__ import annotations

from collections import deque
from enum import IntEnum

from cpusched.process import Process


class SortKey(IntEnum):
    """Ordering criterion for the priority queue."""

    ARRIVAL = 0
    BURST = 1
    PRIORITY = 2


class QueueFullError(IndexError):
    """Raised when pushing onto a full queue."""


class QueueEmptyError(IndexError):
    """Raised when taking from an empty queue."""


def compare(a: Process, b: Process, key: SortKey | int) -> bool:
    """Return True if ``a`` should run before ``b`` under ``key``."""
    key = SortKey(key)
    if key is SortKey.ARRIVAL:
        return a.arrival_time < b.arrival_time
    if key is SortKey.BURST:
        return (a.burst_time, a.arrival_time) < (b.burst_time, b.arrival_time)
    return (a.priority, a.arrival_time) < (b.priority, b.arrival_time)


class FifoQueue:
    """First-in first-out queue holding at most ``capacity`` processes."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._items: deque[Process] = deque()

    def push(self, process: Process) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(process)

    def pop(self) -> Process:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)


class PriorityQueue:
    """Min-heap of processes ordered by :func:`compare` with a fixed key."""

    def __init__(self, max_size: int, key: SortKey | int) -> None:
        self.max_size = max_size
        self.key = SortKey(key)
        self._heap: list[Process] = []

    def _before(self, a: Process, b: Process) -> bool:
        return compare(a, b, self.key)

    def push(self, process: Process) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        heap = self._heap
        heap.append(process)
        t = len(heap) - 1
        while t != 0:
            parent = (t - 1) // 2
            if not self._before(heap[t], heap[parent]):
                break
            heap[t], heap[parent] = heap[parent], heap[t]
            t = parent

    def pop(self) -> Process:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        heap = self._heap
        top = heap[0]
        last = heap.pop()
        if not heap:
            return top
        heap[0] = last
        t = 0
        size = len(heap)
        while (left := 2 * t + 1) < size:
            right = left + 1
            best = t
            if self._before(heap[left], heap[t]):
                best = left
            if right < size and self._before(heap[right], heap[best]):
                best = right
            if best == t:
                break
            heap[t], heap[best] = heap[best], heap[t]
            t = best
        return top

    def peek(self) -> Process:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._heap[0]

    def is_empty(self) -> bool:
        return not self._heap

    def is_full(self) -> bool:
        return len(self._heap) >= self.max_size

    def __len__(self) -> int:
        return len(self._heap)