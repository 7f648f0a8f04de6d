import threading

import pytest

from yaav.tasks import EventQueue, PeriodicTask


def test_periodic_task_starts_stopped():
    calls = []
    with PeriodicTask(lambda: calls.append(None), 1) as task:
        assert not task.is_running()
        assert not threading.Event().wait(0.05)
    assert calls == []


def test_periodic_task_runs_repeatedly_after_start():
    calls = []
    done = threading.Event()

    def action():
        calls.append(None)
        if len(calls) >= 3:
            done.set()

    with PeriodicTask(action, 1) as task:
        task.start()
        assert task.is_running()
        assert done.wait(2.0)
        task.stop()
        assert not task.is_running()
    assert len(calls) >= 3


def test_periodic_task_start_stop_toggles():
    with PeriodicTask(lambda: None, 1) as task:
        task.start_stop()
        assert task.is_running()
        task.start_stop()
        assert not task.is_running()


def test_periodic_task_survives_failing_action():
    calls = []
    done = threading.Event()

    def action():
        calls.append(None)
        if len(calls) == 1:
            raise ValueError("boom")
        done.set()

    with PeriodicTask(action, 1) as task:
        task.start()
        assert done.wait(2.0)
        assert task.is_running() is True
    assert len(calls) >= 2


def test_event_queue_handles_in_order():
    handled = []
    with EventQueue(handled.append) as events:
        for event in (1, 2, 3):
            events.post(event)
    assert handled == [1, 2, 3]


def test_event_queue_post_after_close():
    events = EventQueue(lambda event: None)
    events.close()
    with pytest.raises(RuntimeError):
        events.post(1)


def test_event_queue_default_handler_drains():
    events = EventQueue()
    events.post(7)
    events.close()
    with pytest.raises(RuntimeError):
        events.post(8)


def test_event_queue_handler_error_ends_handling():
    handled = []

    def handler(event):
        handled.append(event)
        if event == 1:
            raise ValueError("bad event")

    with EventQueue(handler) as events:
        events.post(1)
        events.post(2)
    assert handled == [1]
    with pytest.raises(RuntimeError):
        events.post(3)