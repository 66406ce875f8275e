"""Cycle-by-cycle CPU scheduling simulation: FCFS, round robin and SJF."""

__version__ = "1.0.0"
__all__ = ["process", "queue", "scheduler"]