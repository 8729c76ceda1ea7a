import threading
import time

import pytest

from pastebin.snippet import SnippetStore
from pastebin.worker import Sweeper


def _wait_for(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


def test_sweeper_runs_task_until_stopped():
    calls = []
    sweeper = Sweeper(lambda: calls.append(1), interval_seconds=0.01)

    sweeper.start()
    assert _wait_for(lambda: len(calls) >= 3)
    sweeper.stop()

    assert not sweeper.running
    count = len(calls)
    time.sleep(0.05)
    assert len(calls) == count


def test_stop_wakes_a_long_interval_immediately():
    sweeper = Sweeper(lambda: None, interval_seconds=3600)
    sweeper.start()

    started = time.monotonic()
    sweeper.stop()

    assert time.monotonic() - started < 1.0
    assert not sweeper.running


def test_start_is_idempotent():
    sweeper = Sweeper(lambda: None, interval_seconds=3600, name="idempotent-sweeper")
    sweeper.start()
    sweeper.start()

    threads = [t for t in threading.enumerate() if t.name == sweeper.name]
    sweeper.stop()

    assert len(threads) == 1


def test_stop_without_start_is_a_no_op():
    sweeper = Sweeper(lambda: None, interval_seconds=1)

    sweeper.stop()

    assert not sweeper.running


def test_task_failures_are_logged_and_do_not_stop_the_loop(caplog):
    calls = []

    def flaky():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("boom")

    sweeper = Sweeper(flaky, interval_seconds=0.01, name="flaky-sweeper")
    with caplog.at_level("ERROR", logger="pastebin"):
        sweeper.start()
        assert _wait_for(lambda: len(calls) >= 2)
        sweeper.stop()

    assert any("flaky-sweeper task failed" in record.message for record in caplog.records)


def test_sweeper_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        Sweeper(lambda: None, interval_seconds=0)


def test_store_sweeper_purges_expired_snippets(clock):
    store = SnippetStore(clock=clock, sweep_interval_ms=10)
    store.insert("henry", "temporary", ttl_ms=100)
    store.start()
    try:
        clock.advance(100)
        assert _wait_for(lambda: store.owners() == [])
    finally:
        store.close()

    assert not store.sweeping


def test_restart_after_stop_timeout_does_not_revive_old_thread():
    entered = threading.Event()
    release = threading.Event()

    def slow_task():
        entered.set()
        release.wait(5)

    sweeper = Sweeper(slow_task, interval_seconds=0.01, name="slow-sweeper")
    sweeper.start()
    assert entered.wait(2)
    (old_thread,) = [t for t in threading.enumerate() if t.name == "slow-sweeper"]

    sweeper.stop(timeout=0.05)
    assert old_thread.is_alive()

    sweeper.start()
    release.set()
    old_thread.join(2)

    try:
        assert not old_thread.is_alive()
        assert sweeper.running
        assert _wait_for(
            lambda: len([t for t in threading.enumerate() if t.name == "slow-sweeper"]) == 1
        )
    finally:
        sweeper.stop()

    assert not sweeper.running
