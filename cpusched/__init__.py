"""CPU scheduling simulator: FCFS, SJF, priority, round-robin and preemptive variants."""

__version__ = "0.1.0"