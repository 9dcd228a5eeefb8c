"""Tick-by-tick CPU scheduling simulations producing Gantt chart logs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from cpusched.process import Process
from cpusched.queues import FifoQueue, PriorityQueue, SortKey, compare

IDLE_PID = -1
END_PID = -2


@dataclass(frozen=True)
class LogEntry:
    """A Gantt chart mark: ``pid`` starts running at ``time``.

    ``pid`` is :data:`IDLE_PID` when the CPU goes idle and :data:`END_PID`
    for the final entry that marks the end of the schedule.
    """

    pid: int
    time: int


_PreemptRule = Callable[[Process, int], bool]


def _validate(processes: Sequence[Process]) -> None:
    for process in processes:
        if process.burst_time <= 0:
            raise ValueError(f"process {process.pid} has no CPU burst")
        if process.arrival_time < 0:
            raise ValueError(f"process {process.pid} has a negative arrival time")


def _simulate(
    processes: Sequence[Process],
    ready: FifoQueue | PriorityQueue,
    should_preempt: _PreemptRule,
) -> list[LogEntry]:
    """Run the processes one time unit at a time, updating them in place."""
    _validate(processes)
    logs: list[LogEntry] = []
    current: Process | None = None
    remaining = len(processes)
    time = 0
    slice_used = 0

    while remaining:
        for process in processes:
            if process.arrival_time == time:
                ready.push(process)

        if current is None:
            if ready.is_empty():
                if not logs or logs[-1].pid != IDLE_PID:
                    logs.append(LogEntry(IDLE_PID, time))
                time += 1
                continue
            current = ready.pop()
            slice_used = 0
            logs.append(LogEntry(current.pid, time))
        elif not ready.is_empty() and should_preempt(current, slice_used):
            incoming = ready.pop()
            ready.push(current)
            current = incoming
            slice_used = 0
            logs.append(LogEntry(current.pid, time))

        for process in processes:
            if time >= process.arrival_time and process.burst_time > 0:
                process.turnaround_time += 1
                if process is not current:
                    process.waiting_time += 1

        current.burst_time -= 1
        if current.burst_time == 0:
            current = None
            remaining -= 1

        slice_used += 1
        time += 1

    logs.append(LogEntry(END_PID, time))
    return logs


def nonpreemptive_schedule(
    processes: Sequence[Process], key: SortKey | int
) -> list[LogEntry]:
    """Run each chosen process to completion, choosing by ``key``.

    The processes are updated in place: their bursts are consumed and their
    waiting and turnaround times accumulated.
    """
    ready = PriorityQueue(len(processes), key)
    return _simulate(processes, ready, lambda current, used: False)


def preemptive_schedule(
    processes: Sequence[Process], key: SortKey | int
) -> list[LogEntry]:
    """Switch to a ready process whenever it ranks before the running one."""
    ready = PriorityQueue(len(processes), key)

    def preempt(current: Process, used: int) -> bool:
        return compare(ready.peek(), current, ready.key)

    return _simulate(processes, ready, preempt)


def rr_schedule(processes: Sequence[Process], quantum: int) -> list[LogEntry]:
    """Round-robin: switch when the running process has used exactly ``quantum``."""
    if quantum <= 0:
        raise ValueError("quantum must be positive")
    ready = FifoQueue(len(processes))
    return _simulate(processes, ready, lambda current, used: used == quantum)