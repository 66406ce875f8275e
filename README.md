# cpusched

`cpusched` simulates how a single CPU schedules a set of processes, one clock
cycle at a time. It supports three algorithms:

| Number | Algorithm                                |
|--------|------------------------------------------|
| 0      | First come, first served (FCFS)          |
| 1      | Round robin, with a time quantum of 2    |
| 2      | Shortest job first (SJF)                 |

Every process runs in two CPU bursts with an I/O wait between them. The first
burst is half of the process's CPU time, rounded up. The second burst is the
rest. Between the bursts the process is blocked for its I/O time. The
simulation records a snapshot of every cycle, followed by a summary. The
summary gives the finishing time, the CPU utilization and the turnaround time
of each process.

## Installation

```
pip install .
```

To install the test dependencies as well, use `pip install .[test]`. Then run
`pytest`.

## Input format

The first number in the input file is the number of processes. Four integers
follow for each process:

```
<pid> <cpu time> <io time> <arrival time>
```

For example:

```
3
0 4 2 0
1 2 1 1
2 6 3 2
```

The numbers may be separated by any whitespace. The CPU time must be at least
1. The I/O time and the arrival time must not be negative. Processes are
simulated and reported in order of process id.

## Command line

```
cpusched processes.txt 1
```

The first argument is the input file. The second is the number of the
algorithm from the table above.

The report is written to a file, not to standard output. Its name is the input
path cut at its first `.`, with any leading dots kept, followed by `-`, the
algorithm number and `.txt`. The command above therefore writes
`processes-1.txt`.

In some cases the command writes nothing and exits with status 0:

- the process count is zero or negative;
- the algorithm number is not 0, 1 or 2.

It prints an error and exits with status 1 in these cases:

- the input file cannot be read;
- the input is malformed: the count is missing, there are too few values, or
  a value is not an integer or is out of range.

Each snapshot line starts with the clock cycle. It then lists each process
that is running, ready or blocked, as `pid:state`, in order of process id. A
blank line and a summary follow the snapshots:

```
Finishing time: <last cycle>
CPU utilization: <busy cycles / total cycles, two decimals>
Turaround process <pid>: <turnaround>
```

There is one turnaround line for each process.

## Library use

```python
from cpusched.scheduler import Algorithm, parse_processes, schedule

with open("processes.txt") as handle:
    processes = parse_processes(handle.read())

result = schedule(processes, Algorithm.SJF)
print(result.format())
```

### `cpusched.scheduler`

- `parse_processes(text)` reads the input format shown above and returns a
  list of `Process` objects. It returns an empty list for a count of zero or
  less.
- `schedule(processes, algorithm)` runs the chosen algorithm and returns a
  `ScheduleResult`. The algorithm is an `Algorithm` member or its number.
- `Algorithm` has the members `FCFS`, `ROUND_ROBIN` and `SJF`, numbered 0, 1
  and 2.
- `FCFSScheduler`, `RoundRobinScheduler` and `SJFScheduler` each take an
  iterable of processes and have a `run()` method. Each of them raises
  `ValueError` when given no processes. `run()` works on fresh copies of the
  processes, so it can be called more than once.
- `ScheduleResult` has these members:
  - `snapshots`, one line per cycle;
  - `clock`;
  - `busy_cycles`;
  - `turnarounds`, as `(pid, turnaround)` pairs;
  - `finishing_time` and `cpu_utilization`;
  - `format()`, which returns the same text that the command writes.
- `output_path(input_path, algorithm)` returns the name of the file the
  command would write.
- `main(argv=None)` is the command itself.

### `cpusched.process`

- `Process` is a dataclass holding a process's id, times and simulation
  counters.
- `Process.first_burst()` returns the length of the first CPU burst.
- `Process.remaining()` returns the CPU cycles the process has left to run.
- `State` has the members `NEW`, `READY`, `RUNNING`, `BLOCKED` and
  `TERMINATED`.

### `cpusched.queue`

`ProcessQueue(capacity)` is a bounded FIFO queue of processes.

- `enqueue(process)` returns `False` when the queue is full.
- `dequeue()` and `head()` raise `IndexError` when the queue is empty.
- It supports `in`, `len`, truth testing and iteration.