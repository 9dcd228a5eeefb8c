# cpusched

A small simulator for classic CPU scheduling algorithms. It generates a random
set of processes and runs each one through six schedulers. For each run it
prints the waiting and turnaround time of every process and a Gantt chart.
It then prints a table that compares the averages.

Schedulers:

- FCFS (first come, first served)
- SJF (shortest job first, non-preemptive)
- Priority (non-preemptive; a smaller value means a higher priority)
- RR (round-robin with a fixed time quantum)
- P-SJF (preemptive shortest job first)
- P-Pri. (preemptive priority)

Ties in SJF and priority ordering go to the process that arrived first.

## Installation

```
pip install .
```

## Command line

```
cpusched
```

With no options this creates 15 random processes. Arrival times run from 0 to
10, burst times from 1 to 15 and priorities from 1 to 20. The round-robin
quantum is 3. Options:

- `--count N`: number of processes (default 15)
- `--max-burst N`: largest burst time (default 15)
- `--max-priority N`: largest priority value (default 20)
- `--max-arrival N`: latest arrival time (default 10)
- `--quantum N`: round-robin time quantum (default 3)
- `--seed N`: seed for the random generator, for repeatable runs

The count, the maximum burst, the maximum priority and the quantum must be
positive. The maximum arrival time must not be negative.

The output has three parts:

- the initial process table
- for each algorithm, the process table with that run's waiting and turnaround
  times, followed by its Gantt chart
- a comparison of average waiting time and average turnaround time across all
  algorithms

## Library use

```python
import random

from cpusched.process import create_processes, copy_processes, format_results
from cpusched.queues import SortKey
from cpusched.scheduler import nonpreemptive_schedule, preemptive_schedule, rr_schedule
from cpusched.evaluation import format_gantt_chart, format_evaluation
from cpusched.cli import run_all

processes = create_processes(5, 10, 5, 4, random.Random(1))

sjf = copy_processes(processes)
logs = nonpreemptive_schedule(sjf, SortKey.BURST)
print(format_results(processes, sjf))
print(format_gantt_chart(logs))

print(run_all(processes, quantum=2))
```

`SortKey` has three members: `ARRIVAL`, `BURST` and `PRIORITY`.
`preemptive_schedule(processes, key)` takes the same keys.
`rr_schedule(processes, quantum)` uses a FIFO ready queue. It raises
`ValueError` if the quantum is not positive.

Each scheduler works on the list of `Process` objects it is given and changes
them in place. Burst times count down to zero, and waiting and turnaround
times are filled in. A scheduler raises `ValueError` if a process has no CPU
burst or a negative arrival time. It returns a list of `LogEntry(pid, time)`
values. There is one entry for each point where a process starts running or
the CPU goes idle (pid `-1`), and a final entry that marks the end (pid `-2`).
To run several algorithms on the same workload, give each one its own copy.
Make the copy with `copy_processes` or `Process.copy`.

`format_process_list` and `format_results` return the process tables as text.
`format_evaluation(results, names)` returns the comparison table, with one
name for each result list. `format_gantt_chart(logs)` returns a chart with at
most twenty marks per row. `run_all` schedules copies of the processes with
all six algorithms and returns the whole report as one string.

`queues.FifoQueue` and `queues.PriorityQueue` are the bounded ready queues
that the schedulers use. Pushing to a full queue raises `QueueFullError`.
Popping from an empty queue, or peeking into it, raises `QueueEmptyError`.

## Limitations

The simulation models CPU bursts only. `Process` has an `io_list` field, but
no scheduler uses it, so I/O requests and blocking are not simulated. The
tables always show it as `(nil)` for generated processes. Reports are plain
text: there is no chart graphics and no export to files.