import random

import pytest

from cpusched.process import Process, create_processes
from cpusched.queues import (
    FifoQueue,
    PriorityQueue,
    QueueEmptyError,
    QueueFullError,
    SortKey,
    compare,
)


def proc(pid, arrival, burst, priority):
    return Process(pid=pid, arrival_time=arrival, burst_time=burst, priority=priority)


def test_compare_arrival():
    a, b = proc(0, 1, 9, 9), proc(1, 2, 1, 1)
    assert compare(a, b, SortKey.ARRIVAL) is True
    assert compare(b, a, SortKey.ARRIVAL) is False
    assert compare(a, a, SortKey.ARRIVAL) is False


def test_compare_burst_tie_broken_by_arrival():
    a, b = proc(0, 1, 5, 0), proc(1, 3, 5, 0)
    assert compare(a, b, SortKey.BURST) is True
    assert compare(b, a, SortKey.BURST) is False
    assert compare(proc(2, 9, 2, 0), a, SortKey.BURST) is True


def test_compare_priority_tie_broken_by_arrival():
    a, b = proc(0, 1, 5, 3), proc(1, 0, 5, 3)
    assert compare(b, a, SortKey.PRIORITY) is True
    assert compare(proc(2, 9, 9, 1), a, 2) is True


def test_compare_invalid_key():
    with pytest.raises(ValueError):
        compare(proc(0, 0, 1, 1), proc(1, 0, 1, 1), 3)


def test_fifo_order_and_len():
    q = FifoQueue(3)
    items = [proc(i, i, 1, 1) for i in range(3)]
    for item in items:
        q.push(item)
    assert q.is_full()
    assert len(q) == 3
    assert [q.pop() for _ in range(3)] == items
    assert q.is_empty()


def test_fifo_full_and_empty_errors():
    q = FifoQueue(1)
    q.push(proc(0, 0, 1, 1))
    with pytest.raises(QueueFullError):
        q.push(proc(1, 0, 1, 1))
    q.pop()
    with pytest.raises(QueueEmptyError):
        q.pop()


@pytest.mark.parametrize("key", list(SortKey))
def test_priority_queue_pops_in_order(key):
    procs = create_processes(40, 15, 20, 10, random.Random(int(key) + 11))
    q = PriorityQueue(len(procs), key)
    for p in procs:
        q.push(p)
    assert q.is_full()
    popped = []
    while not q.is_empty():
        head = q.peek()
        taken = q.pop()
        assert head is taken
        popped.append(taken)
    assert sorted(p.pid for p in popped) == list(range(40))
    for earlier, later in zip(popped, popped[1:]):
        assert not compare(later, earlier, key)


def test_priority_queue_specific_order():
    q = PriorityQueue(4, SortKey.BURST)
    for p in [proc(0, 0, 7, 1), proc(1, 2, 3, 1), proc(2, 1, 3, 1), proc(3, 0, 9, 1)]:
        q.push(p)
    assert [q.pop().pid for _ in range(4)] == [2, 1, 0, 3]


def test_priority_queue_errors():
    q = PriorityQueue(1, SortKey.ARRIVAL)
    with pytest.raises(QueueEmptyError):
        q.pop()
    with pytest.raises(QueueEmptyError):
        q.peek()
    q.push(proc(0, 0, 1, 1))
    with pytest.raises(QueueFullError):
        q.push(proc(1, 0, 1, 1))
    assert len(q) == 1


def test_priority_queue_invalid_key():
    with pytest.raises(ValueError):
        PriorityQueue(3, 7)