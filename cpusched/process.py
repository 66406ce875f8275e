"""Processes and their states in the scheduling simulation."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class State(enum.Enum):
    """Lifecycle state of a simulated process."""

    NEW = "new"
    READY = "ready"
    RUNNING = "running"
    BLOCKED = "blocked"
    TERMINATED = "terminated"


@dataclass(eq=False)
class Process:
    """A process that runs two CPU bursts separated by one I/O wait.

    The first burst is half the CPU time, rounded up; the second burst is
    what is left. Processes compare by identity, as each one is a distinct
    entity in the simulation.
    """

    pid: int
    cpu_time: int
    io_time: int
    arrival_time: int
    state: State = State.NEW
    turnaround_time: int = 0
    total_cycles_run: int = 0
    running_time: int = 0
    blocked_time: int = 0

    def __post_init__(self) -> None:
        if self.cpu_time < 1:
            raise ValueError(f"process {self.pid}: CPU time must be at least 1")
        if self.io_time < 0:
            raise ValueError(f"process {self.pid}: I/O time must not be negative")
        if self.arrival_time < 0:
            raise ValueError(f"process {self.pid}: arrival time must not be negative")

    def first_burst(self) -> int:
        """Length of the first CPU burst, before the process blocks for I/O."""
        return math.ceil(self.cpu_time / 2)

    def remaining(self) -> int:
        """CPU cycles the process still has to run."""
        return self.cpu_time - self.total_cycles_run