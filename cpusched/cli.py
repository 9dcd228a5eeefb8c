"""Command line entry: generate processes, run every scheduler, report."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Sequence

from cpusched.evaluation import format_evaluation, format_gantt_chart
from cpusched.process import (
    Process,
    copy_processes,
    create_processes,
    format_process_list,
    format_results,
)
from cpusched.queues import SortKey
from cpusched.scheduler import nonpreemptive_schedule, preemptive_schedule, rr_schedule

MAX_BURST = 15
NUM_OF_PROCESS = 15
MAX_PRIORITY = 20
MAX_ARRIVAL_TIME = 10
TIME_QUANTUM = 3


def run_all(processes: Sequence[Process], quantum: int = TIME_QUANTUM) -> str:
    """Schedule copies of ``processes`` with every algorithm and return the report."""
    algorithms = [
        ("FCFS", "FCFS", lambda ps: nonpreemptive_schedule(ps, SortKey.ARRIVAL)),
        ("SJF", "SJF", lambda ps: nonpreemptive_schedule(ps, SortKey.BURST)),
        (
            "Priority",
            "Priority scheduling",
            lambda ps: nonpreemptive_schedule(ps, SortKey.PRIORITY),
        ),
        ("RR", "Round-Robin", lambda ps: rr_schedule(ps, quantum)),
        ("P-SJF", "preemptive SJF", lambda ps: preemptive_schedule(ps, SortKey.BURST)),
        (
            "P-Pri.",
            "preemptive priority",
            lambda ps: preemptive_schedule(ps, SortKey.PRIORITY),
        ),
    ]
    parts: list[str] = []
    names: list[str] = []
    results: list[list[Process]] = []
    for name, title, schedule in algorithms:
        scheduled = copy_processes(processes)
        logs = schedule(scheduled)
        parts.append(f"\n[After {title}]\n")
        parts.append(format_results(processes, scheduled))
        parts.append(format_gantt_chart(logs))
        names.append(name)
        results.append(scheduled)
    parts.append(format_evaluation(results, names))
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare CPU scheduling algorithms.")
    parser.add_argument("--count", type=int, default=NUM_OF_PROCESS)
    parser.add_argument("--max-burst", type=int, default=MAX_BURST)
    parser.add_argument("--max-priority", type=int, default=MAX_PRIORITY)
    parser.add_argument("--max-arrival", type=int, default=MAX_ARRIVAL_TIME)
    parser.add_argument("--quantum", type=int, default=TIME_QUANTUM)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    if args.count <= 0 or args.max_burst <= 0 or args.max_priority <= 0:
        parser.error("count, max burst and max priority must be positive")
    if args.max_arrival < 0:
        parser.error("max arrival must not be negative")
    if args.quantum <= 0:
        parser.error("quantum must be positive")

    processes = create_processes(
        args.count,
        args.max_burst,
        args.max_priority,
        args.max_arrival,
        random.Random(args.seed),
    )
    sys.stdout.write("[Initial Processes]\n")
    sys.stdout.write(format_process_list(processes))
    sys.stdout.write(run_all(processes, args.quantum))
    return 0


if __name__ == "__main__":
    sys.exit(main())