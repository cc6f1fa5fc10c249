"""Tests for the FIFO write gate."""

import threading
import time

import pytest

from htmlblog.serializer import WriteSerializer


def wait_for(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition not reached")
        time.sleep(0.005)


def test_run_returns_result():
    assert WriteSerializer().run(lambda a, b=0: a + b, 2, b=3) == 5


def test_releases_after_exception():
    gate = WriteSerializer()

    def fail():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        gate.run(fail)
    assert gate.pending == 0
    assert gate.run(lambda: "ok") == "ok"


def test_admits_waiters_in_arrival_order():
    gate = WriteSerializer()
    order = []
    threads = []

    with gate.hold():
        for n in range(5):
            thread = threading.Thread(target=gate.run, args=(order.append, n))
            thread.start()
            threads.append(thread)
            wait_for(lambda n=n: gate.pending == n + 2)
        assert order == []

    for thread in threads:
        thread.join(timeout=5)
    assert order == [0, 1, 2, 3, 4]
    assert gate.pending == 0


def test_one_holder_at_a_time():
    gate = WriteSerializer()
    active = []
    peak = []

    def work():
        active.append(1)
        peak.append(len(active))
        time.sleep(0.01)
        active.pop()

    threads = [threading.Thread(target=gate.run, args=(work,)) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)
    assert max(peak) == 1


def test_stores_do_not_share_a_gate(tmp_path):
    from htmlblog.store import PostStore

    assert PostStore(tmp_path / "a").serializer is not PostStore(tmp_path / "b").serializer
