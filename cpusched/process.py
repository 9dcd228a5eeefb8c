"""Process records and helpers for generating, copying and listing them."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Iterable, Sequence

_HEADER = "\t".join(("pid", "arrival", "burst", "i/o", "priority", "wait", "turn"))


@dataclass
class Process:
    """A simulated process; a smaller priority value means a higher priority."""

    pid: int
    arrival_time: int
    burst_time: int
    priority: int
    waiting_time: int = 0
    turnaround_time: int = 0
    io_list: list | None = None

    def copy(self) -> "Process":
        """Return an independent copy without any I/O list."""
        return replace(self, io_list=None)


def create_processes(
    count: int,
    max_burst: int,
    max_priority: int,
    max_arrival_time: int,
    rng: random.Random | None = None,
) -> list[Process]:
    """Generate ``count`` random processes whose pid equals their list index."""
    rng = rng if rng is not None else random.Random()
    return [
        Process(
            pid=pid,
            arrival_time=rng.randint(0, max_arrival_time),
            burst_time=rng.randint(1, max_burst),
            priority=rng.randint(1, max_priority),
        )
        for pid in range(count)
    ]


def copy_processes(processes: Iterable[Process]) -> list[Process]:
    """Return a deep copy of a process list."""
    return [process.copy() for process in processes]


def _io_repr(io_list: list | None) -> str:
    return "(nil)" if io_list is None else hex(id(io_list))


def _row(process: Process, waiting_time: int, turnaround_time: int) -> str:
    return (
        f"{process.pid}\t{process.arrival_time}\t{process.burst_time}\t"
        f"{_io_repr(process.io_list)}\t{process.priority}\t\t"
        f"{waiting_time}\t{turnaround_time}"
    )


def format_process_list(processes: Sequence[Process]) -> str:
    """Render a table of processes with their own waiting and turnaround times."""
    lines = [_HEADER]
    lines.extend(_row(p, p.waiting_time, p.turnaround_time) for p in processes)
    return "\n".join(lines) + "\n"


def format_results(original: Sequence[Process], scheduled: Sequence[Process]) -> str:
    """Render the original processes with times taken from a scheduled copy."""
    if len(scheduled) < len(original):
        raise ValueError("scheduled list is shorter than the original list")
    lines = [_HEADER]
    lines.extend(
        _row(orig, done.waiting_time, done.turnaround_time)
        for orig, done in zip(original, scheduled)
    )
    return "\n".join(lines) + "\n"