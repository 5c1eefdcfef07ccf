import threading

import pytest

from wsikit.timed_semaphore import (
    WAIT_FOREVER,
    SemaphoreNotReady,
    SemaphoreTimeout,
    TimedSemaphore,
)


def test_initial_count_consumed_then_not_ready():
    sem = TimedSemaphore(2)
    sem.wait(0)
    sem.wait(0)
    with pytest.raises(SemaphoreNotReady):
        sem.wait(0)


def test_post_then_wait():
    sem = TimedSemaphore(0)
    sem.post()
    sem.wait(0)
    with pytest.raises(SemaphoreNotReady):
        sem.wait(0)


def test_timed_wait_expires():
    sem = TimedSemaphore(0)
    with pytest.raises(SemaphoreTimeout):
        sem.wait(10_000_000)
    with pytest.raises(TimeoutError):
        sem.wait(1)


def test_infinite_wait_released_by_post():
    sem = TimedSemaphore(0)
    done = threading.Event()

    def waiter():
        sem.wait(WAIT_FOREVER)
        done.set()

    thread = threading.Thread(target=waiter)
    thread.start()
    sem.post()
    thread.join(timeout=5)
    assert done.is_set()
    with pytest.raises(SemaphoreNotReady):
        sem.wait(0)


def test_timed_wait_released_by_post():
    sem = TimedSemaphore(0)
    timer = threading.Timer(0.05, sem.post)
    timer.start()
    sem.wait(5 * 1_000_000_000)
    timer.join()
    with pytest.raises(SemaphoreNotReady):
        sem.wait(0)


@pytest.mark.parametrize("timeout", [-1, 2**64])
def test_invalid_timeout(timeout):
    with pytest.raises(ValueError):
        TimedSemaphore(1).wait(timeout)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        TimedSemaphore(-1)