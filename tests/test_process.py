import pytest

from cpusched.process import Process, State


def test_new_process_defaults():
    process = Process(4, 6, 2, 1)
    assert process.state is State.NEW
    assert process.total_cycles_run == 0
    assert process.running_time == 0
    assert process.turnaround_time == 0


@pytest.mark.parametrize(
    "name, expected",
    [
        ("running", State.RUNNING),
        ("ready", State.READY),
        ("blocked", State.BLOCKED),
        ("terminated", State.TERMINATED),
    ],
)
def test_state_looked_up_by_snapshot_name(name, expected):
    state = State(name)
    assert state is expected
    assert state.value == name


def test_first_burst_rounds_up():
    assert Process(1, 5, 0, 0).first_burst() == 3


@pytest.mark.parametrize("cpu_time", range(1, 30))
def test_first_burst_is_ceiling_of_half(cpu_time):
    burst = Process(1, cpu_time, 0, 0).first_burst()
    assert burst * 2 >= cpu_time
    assert (burst - 1) * 2 < cpu_time
    assert cpu_time - burst <= burst


def test_remaining_tracks_cycles_run():
    process = Process(2, 7, 1, 0)
    assert process.remaining() == process.cpu_time
    process.total_cycles_run = 3
    assert process.remaining() == process.cpu_time - 3


def test_processes_compare_by_identity():
    first = Process(1, 2, 3, 4)
    second = Process(1, 2, 3, 4)
    assert first == first
    assert not (first == second)


@pytest.mark.parametrize(
    "cpu_time, io_time, arrival_time",
    [(0, 1, 0), (-3, 1, 0), (2, -1, 0), (2, 1, -5)],
)
def test_invalid_times_are_rejected(cpu_time, io_time, arrival_time):
    with pytest.raises(ValueError):
        Process(1, cpu_time, io_time, arrival_time)