"""Text reports: algorithm comparison table and Gantt charts."""

from __future__ import annotations

from typing import Sequence

from cpusched.process import Process
from cpusched.scheduler import END_PID, IDLE_PID, LogEntry

_INDENT = " " * 26
_RULE = "-" * 99
_MAX_IN_LINE = 20


def _average(values: list[int]) -> float:
    return sum(values) / len(values)


def format_evaluation(
    results: Sequence[Sequence[Process]], names: Sequence[str]
) -> str:
    """Render average waiting and turnaround times for each algorithm."""
    if len(results) != len(names):
        raise ValueError("need exactly one name per result")
    if any(len(result) == 0 for result in results):
        raise ValueError("cannot average an empty process list")

    waits = [_average([p.waiting_time for p in result]) for result in results]
    turns = [_average([p.turnaround_time for p in result]) for result in results]

    lines = [
        "<Algorithm Performance Comparison>",
        _INDENT + "-" * 73,
        _INDENT + "".join(f"|{name:>10} " for name in names) + "|",
        _RULE,
        f"|{' Avg. Waiting Time':<25}" + "".join(f"|{w:10.3f} " for w in waits) + "|",
        f"|{' Avg. Turnarround Time':<25}"
        + "".join(f"|{t:10.3f} " for t in turns)
        + "|",
        _RULE,
    ]
    return "\n".join(lines) + "\n"


def _label(entry: LogEntry) -> str:
    if entry.pid == END_PID:
        return "|"
    if entry.pid == IDLE_PID:
        return "| idle "
    return f"| P{entry.pid} "


def _tick(entry: LogEntry) -> str:
    if entry.pid == END_PID:
        pad = ""
    elif entry.pid == IDLE_PID:
        pad = "    "
    elif entry.pid > 9:
        pad = "   "
    else:
        pad = "  "
    return f"{entry.time:<3d}{pad}"


def format_gantt_chart(logs: Sequence[LogEntry]) -> str:
    """Render a Gantt chart, at most twenty marks per row.

    A single mark left over after a full row is folded into that row.
    """
    total = len(logs)
    last_row = total // _MAX_IN_LINE
    parts = ["[Gantt chart]\n"]
    row = 0
    while row <= last_row:
        first = _MAX_IN_LINE * row
        last = total if row == last_row else _MAX_IN_LINE * (row + 1)
        if row == last_row - 1 and total % _MAX_IN_LINE == 1:
            last += 1
            row += 1
        chunk = logs[first:last]
        parts.append("".join(_label(e) for e in chunk) + "\n")
        parts.append("".join(_tick(e) for e in chunk) + "\n\n")
        row += 1
    return "".join(parts)