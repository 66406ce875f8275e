import pytest

from cpusched.process import Process
from cpusched.queue import ProcessQueue


def _processes(count):
    return [Process(pid, 2, 1, 0) for pid in range(count)]


def test_fifo_order():
    queue = ProcessQueue(3)
    items = _processes(3)
    for item in items:
        assert queue.enqueue(item) is True
    assert [queue.dequeue() for _ in items] == items


def test_head_does_not_remove():
    queue = ProcessQueue(2)
    first, second = _processes(2)
    queue.enqueue(first)
    queue.enqueue(second)
    assert queue.head() is first
    assert len(queue) == 2


def test_full_queue_ignores_extra_process():
    queue = ProcessQueue(2)
    first, second, third = _processes(3)
    queue.enqueue(first)
    queue.enqueue(second)
    assert queue.enqueue(third) is False
    assert len(queue) == 2
    assert third not in queue


def test_space_is_reused_after_dequeue():
    queue = ProcessQueue(2)
    first, second, third = _processes(3)
    queue.enqueue(first)
    queue.enqueue(second)
    queue.dequeue()
    assert queue.enqueue(third) is True
    assert list(queue) == [second, third]


def test_membership_is_by_identity():
    queue = ProcessQueue(2)
    stored = Process(1, 2, 3, 0)
    twin = Process(1, 2, 3, 0)
    queue.enqueue(stored)
    assert stored in queue
    assert twin not in queue


def test_empty_queue_is_falsy():
    queue = ProcessQueue(1)
    assert not queue
    assert len(queue) == 0
    queue.enqueue(_processes(1)[0])
    assert queue


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        ProcessQueue(1).dequeue()


def test_head_empty_raises():
    with pytest.raises(IndexError):
        ProcessQueue(1).head()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ProcessQueue(-1)