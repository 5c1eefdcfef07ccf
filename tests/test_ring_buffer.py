import pytest

from wsikit.ring_buffer import RingBuffer


def test_empty_buffer():
    rb = RingBuffer(3)
    assert len(rb) == 0
    assert rb.capacity == 3
    assert rb.front() is None
    assert rb.back() is None
    assert rb.pop_front() is None


def test_push_until_full():
    rb = RingBuffer(2)
    assert rb.push_back("a") is True
    assert rb.push_back("b") is True
    assert rb.push_back("c") is False
    assert len(rb) == 2
    assert rb.front() == "a"
    assert rb.back() == "b"


def test_fifo_order_and_wraparound():
    rb = RingBuffer(3)
    out = []
    for value in range(10):
        if not rb.push_back(value):
            out.append(rb.pop_front())
            assert rb.push_back(value)
    while len(rb):
        out.append(rb.pop_front())
    assert out == list(range(10))


def test_front_back_after_pop():
    rb = RingBuffer(2)
    rb.push_back(1)
    rb.push_back(2)
    assert rb.pop_front() == 1
    assert rb.front() == 2
    assert rb.back() == 2
    assert rb.pop_front() == 2
    assert rb.front() is None


def test_invalid_capacity():
    with pytest.raises(ValueError):
        RingBuffer(0)