import threading

import pytest

from timeping.timewheel import TaskRequest, TimeWheel
from timeping.tlist import TlistError


def test_task_fires_on_its_slot():
    fired = []
    wheel = TimeWheel(3, pool_size=4, executor=fired.append)
    wheel.add_task(TaskRequest(7, 1, 0))
    assert wheel.tick() == []
    assert wheel.tick() == [7]
    assert fired == [7]


def test_pending_is_ordered_by_rounds():
    wheel = TimeWheel(2, pool_size=5)
    wheel.add_task(TaskRequest(1, 1, 2))
    wheel.add_task(TaskRequest(2, 1, 0))
    wheel.add_task(TaskRequest(3, 1, 1))
    wheel.add_task(TaskRequest(4, 1, 0))
    rounds = [r.rounds for r in wheel.pending(1)]
    assert rounds == sorted(rounds)
    assert [r.task_id for r in wheel.pending(1)] == [2, 4, 3, 1]


def test_later_round_waits_a_lap():
    wheel = TimeWheel(2, pool_size=2)
    wheel.add_task(TaskRequest(5, 0, 1))
    assert wheel.tick() == []
    assert wheel.tick() == []
    assert wheel.wheel == 1
    assert wheel.index == 0
    assert wheel.tick() == [5]


def test_nodes_return_to_pool_after_firing():
    wheel = TimeWheel(1, pool_size=2)
    wheel.add_task(TaskRequest(1, 0, 0))
    wheel.add_task(TaskRequest(2, 0, 0))
    assert wheel.free == 0
    assert wheel.tick() == [1, 2]
    assert wheel.free == 2
    assert wheel.pending(0) == []


def test_delete_existing_task():
    wheel = TimeWheel(2, pool_size=3)
    wheel.add_task(TaskRequest(1, 0, 0))
    wheel.add_task(TaskRequest(2, 0, 0))
    assert wheel.delete_task(TaskRequest(1, 0, 0)) is True
    assert wheel.pending(0) == [TaskRequest(2, 0, 0)]
    assert wheel.free == 2


def test_delete_last_task_removes_round():
    wheel = TimeWheel(2, pool_size=3)
    wheel.add_task(TaskRequest(1, 0, 4))
    assert wheel.delete_task(TaskRequest(1, 0, 4)) is True
    assert wheel.pending(0) == []
    assert wheel.free == 3


def test_delete_missing_task():
    wheel = TimeWheel(2, pool_size=3)
    wheel.add_task(TaskRequest(1, 0, 0))
    assert wheel.delete_task(TaskRequest(9, 0, 0)) is False
    assert wheel.delete_task(TaskRequest(1, 0, 3)) is False
    assert wheel.pending(0) == [TaskRequest(1, 0, 0)]


def test_pool_exhaustion_raises():
    wheel = TimeWheel(2, pool_size=1)
    wheel.add_task(TaskRequest(1, 0, 0))
    with pytest.raises(TlistError):
        wheel.add_task(TaskRequest(2, 0, 0))


def test_position_out_of_range():
    wheel = TimeWheel(2, pool_size=1)
    with pytest.raises(IndexError):
        wheel.add_task(TaskRequest(1, 2, 0))
    with pytest.raises(IndexError):
        wheel.pending(-1)
    assert wheel.free == 1


def test_invalid_size():
    with pytest.raises(ValueError):
        TimeWheel(0)


def test_run_ticks_until_stopped():
    done = threading.Event()
    fired = []

    def execute(task_id):
        fired.append(task_id)
        done.set()

    wheel = TimeWheel(2, pool_size=2, executor=execute)
    wheel.add_task(TaskRequest(3, 1, 0))
    stop = threading.Event()
    worker = threading.Thread(target=wheel.run, args=(0.01, stop))
    worker.start()
    assert done.wait(5)
    stop.set()
    worker.join(5)
    assert not worker.is_alive()
    assert fired == [3]