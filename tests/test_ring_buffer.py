import pytest

from mspot.ring_buffer import RingBuffer, RingBufferError


def test_new_buffer_is_empty():
    rb = RingBuffer(8, "test")
    assert rb.is_empty() is True
    assert rb.has_data() is False
    assert rb.free_space() == rb.length
    assert rb.data_size() == 0


def test_add_and_get_preserves_order():
    rb = RingBuffer(16, "test")
    rb.add_data(b"abc")
    rb.add_data(b"def")
    assert rb.get_data(4) == b"abcd"
    assert rb.get_data(2) == b"ef"
    assert rb.is_empty() is True


def test_size_invariant():
    rb = RingBuffer(10, "test")
    rb.add_data(b"hello")
    assert rb.free_space() + rb.data_size() == rb.length
    assert rb.data_size() == len(b"hello")


def test_holds_at_most_length_minus_one():
    rb = RingBuffer(4, "test")
    rb.add_data(b"xyz")
    with pytest.raises(RingBufferError):
        rb.add_data(b"w")
    assert rb.get_data(3) == b"xyz"


def test_add_exactly_length_overflows():
    rb = RingBuffer(4, "test")
    with pytest.raises(RingBufferError):
        rb.add_data(b"abcd")
    assert rb.is_empty() is True


def test_underflow_raises():
    rb = RingBuffer(8, "test")
    rb.add_data(b"ab")
    with pytest.raises(RingBufferError):
        rb.get_data(3)
    with pytest.raises(RingBufferError):
        rb.peek(3)
    assert rb.get_data(2) == b"ab"


def test_peek_does_not_consume():
    rb = RingBuffer(8, "test")
    rb.add_data(b"data")
    assert rb.peek(2) == b"da"
    assert rb.data_size() == len(b"data")
    assert rb.get_data(4) == b"data"


def test_wraparound_keeps_order():
    rb = RingBuffer(5, "test")
    rb.add_data(b"1234")
    assert rb.get_data(3) == b"123"
    rb.add_data(b"567")
    assert rb.get_data(4) == b"4567"


def test_clear():
    rb = RingBuffer(8, "test")
    rb.add_data(b"abc")
    rb.clear()
    assert rb.is_empty() is True
    assert rb.free_space() == rb.length


def test_has_space():
    rb = RingBuffer(4, "test")
    assert rb.has_space(3) is True
    assert rb.has_space(4) is False


def test_zero_length_rejected():
    with pytest.raises(ValueError):
        RingBuffer(0, "test")