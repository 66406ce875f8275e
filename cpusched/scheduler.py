"""CPU scheduling simulation: first come first served, round robin and
shortest job first, with per-cycle snapshots and summary statistics."""

from __future__ import annotations

import argparse
import enum
import os
import re
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from .process import Process, State
from .queue import ProcessQueue

QUANTUM = 2
"""Cycles a process may run under round robin before it is preempted."""

_VISIBLE_STATES = (State.RUNNING, State.READY, State.BLOCKED)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Algorithm(enum.IntEnum):
    """Scheduling algorithms, numbered as on the command line."""

    FCFS = 0
    ROUND_ROBIN = 1
    SJF = 2


@dataclass(frozen=True)
class ScheduleResult:
    """Outcome of a simulation run."""

    snapshots: tuple[str, ...]
    clock: int
    busy_cycles: int
    turnarounds: tuple[tuple[int, int], ...]

    @property
    def finishing_time(self) -> int:
        return self.clock - 1

    @property
    def cpu_utilization(self) -> float:
        return self.busy_cycles / self.clock

    def format(self) -> str:
        """Render the snapshots followed by the statistical summary."""
        lines = [f"{snapshot}\n" for snapshot in self.snapshots]
        lines.append(f"\nFinishing time: {self.finishing_time}\n")
        lines.append(f"CPU utilization: {self.cpu_utilization:.2f}\n")
        lines.extend(
            f"Turaround process {pid}: {turnaround}\n"
            for pid, turnaround in self.turnarounds
        )
        return "".join(lines)


class Scheduler(ABC):
    """Cycle-by-cycle simulation shared by all algorithms."""

    algorithm: ClassVar[Algorithm]

    def __init__(self, processes: Iterable[Process]) -> None:
        self._initial = sorted(processes, key=lambda p: p.pid)
        if not self._initial:
            raise ValueError("no processes to schedule")
        self._processes: list[Process] = []
        self._queue = ProcessQueue(len(self._initial))

    def run(self) -> ScheduleResult:
        """Simulate until every process has terminated."""
        self._processes = [
            Process(p.pid, p.cpu_time, p.io_time, p.arrival_time)
            for p in self._initial
        ]
        self._queue = ProcessQueue(len(self._processes))
        snapshots = []
        clock = 0
        while not all(p.state is State.TERMINATED for p in self._processes):
            self._admit(clock)
            self._enqueue_ready()
            self._run_head()
            snapshots.append(self._snapshot(clock))
            clock += 1
            self._block_or_terminate(clock)
            self._after_cycle()
        return ScheduleResult(
            snapshots=tuple(snapshots),
            clock=clock,
            busy_cycles=sum(p.total_cycles_run for p in self._processes),
            turnarounds=tuple((p.pid, p.turnaround_time) for p in self._processes),
        )

    @abstractmethod
    def _enqueue_ready(self) -> None:
        """Put ready processes into the run queue."""

    def _after_cycle(self) -> None:
        """Hook run at the end of every cycle."""

    def _admit(self, clock: int) -> None:
        for process in self._processes:
            if process.arrival_time == clock:
                process.state = State.READY
            if (
                process.state is State.BLOCKED
                and process.blocked_time + process.io_time == clock
            ):
                process.state = State.READY

    def _run_head(self) -> None:
        if not self._queue:
            return
        front = self._queue.head()
        if front.state is State.READY:
            front.state = State.RUNNING
        if front.state is State.RUNNING and front.first_burst() != front.running_time:
            front.total_cycles_run += 1
            front.running_time += 1

    def _block_or_terminate(self, clock: int) -> None:
        if not self._queue:
            return
        front = self._queue.head()
        if front.state is not State.RUNNING:
            return
        if front.cpu_time == front.total_cycles_run:
            front.state = State.TERMINATED
            front.turnaround_time = clock - front.arrival_time
            front.running_time = 0
            self._queue.dequeue()
        if front.first_burst() == front.running_time:
            front.state = State.BLOCKED
            front.blocked_time = clock
            front.running_time = 0
            self._queue.dequeue()

    def _snapshot(self, clock: int) -> str:
        parts = [str(clock)]
        parts.extend(
            f"{p.pid}:{p.state.value}"
            for p in self._processes
            if p.state in _VISIBLE_STATES
        )
        return " ".join(parts)


class FCFSScheduler(Scheduler):
    """Runs processes in the order they become ready."""

    algorithm = Algorithm.FCFS

    def _enqueue_ready(self) -> None:
        for process in self._processes:
            if process.state is State.READY and process not in self._queue:
                self._queue.enqueue(process)


class RoundRobinScheduler(FCFSScheduler):
    """First come first served, preempting a process after QUANTUM cycles."""

    algorithm = Algorithm.ROUND_ROBIN

    def _after_cycle(self) -> None:
        if not self._queue:
            return
        front = self._queue.head()
        if front.running_time == QUANTUM and front.state is State.RUNNING:
            front.state = State.READY
            self._queue.dequeue()


class SJFScheduler(Scheduler):
    """When the CPU is idle, runs the ready process with the least work left."""

    algorithm = Algorithm.SJF

    def _enqueue_ready(self) -> None:
        if self._queue:
            return
        ready = [p for p in self._processes if p.state is State.READY]
        if ready:
            self._queue.enqueue(min(ready, key=Process.remaining))


_SCHEDULERS: dict[Algorithm, type[Scheduler]] = {
    Algorithm.FCFS: FCFSScheduler,
    Algorithm.ROUND_ROBIN: RoundRobinScheduler,
    Algorithm.SJF: SJFScheduler,
}


def schedule(processes: Iterable[Process], algorithm: int) -> ScheduleResult:
    """Simulate the processes under the given algorithm."""
    return _SCHEDULERS[Algorithm(algorithm)](processes).run()


def parse_processes(text: str) -> list[Process]:
    """Read a count followed by ``pid cpu_time io_time arrival_time`` lines."""
    tokens = text.split()
    if not tokens:
        raise ValueError("missing process count")
    count = int(tokens[0])
    if count <= 0:
        return []
    values = tokens[1 : 1 + 4 * count]
    if len(values) < 4 * count:
        raise ValueError(f"expected {4 * count} values for {count} processes")
    numbers = [int(value) for value in values]
    records = zip(*[iter(numbers)] * 4)
    return [Process(pid, cpu, io, arrival) for pid, cpu, io, arrival in records]


def output_path(input_path: str | os.PathLike[str], algorithm: int) -> str:
    """Name of the report file: the input name cut at its first dot,
    followed by ``-<algorithm>.txt``."""
    name = os.fspath(input_path)
    body = name.lstrip(".")
    prefix = name[: len(name) - len(body)]
    stem = prefix + body.split(".", 1)[0]
    return f"{stem}-{int(algorithm)}.txt"


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cpusched",
        description="Simulate CPU scheduling and write a timing report.",
    )
    parser.add_argument("input", help="file listing the processes")
    parser.add_argument(
        "algorithm", help="0 = first come first served, 1 = round robin, 2 = shortest job first"
    )
    args = parser.parse_args(argv)

    try:
        text = Path(args.input).read_text()
    except OSError as error:
        print(f"cpusched: {error}", file=sys.stderr)
        return 1
    try:
        processes = parse_processes(text)
    except ValueError as error:
        print(f"cpusched: {args.input}: {error}", file=sys.stderr)
        return 1
    if not processes:
        return 0
    try:
        algorithm = Algorithm(_leading_int(args.algorithm))
    except ValueError:
        return 0

    result = schedule(processes, algorithm)
    Path(output_path(args.input, algorithm)).write_text(result.format())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())