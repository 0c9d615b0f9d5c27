import pytest

from dsdrills.array_queue import ArrayIntQueue
from dsdrills.stack import EmptyError, FullError


def test_first_in_first_out():
    q = ArrayIntQueue(4)
    for value in (3, 1, 4):
        q.enqueue(value)
    assert q.dequeue() == 3
    assert list(q) == [1, 4]
    assert q.peek() == 1


def test_full_and_empty_errors():
    q = ArrayIntQueue(1)
    with pytest.raises(EmptyError):
        q.dequeue()
    q.enqueue(5)
    with pytest.raises(FullError):
        q.enqueue(6)
    assert q.is_full()


def test_search_gives_position_from_front():
    q = ArrayIntQueue(5)
    for value in (10, 20, 30, 20):
        q.enqueue(value)
    assert q.search(10) == 0
    index = q.search(20)
    assert list(q)[index] == 20
    assert 20 not in list(q)[:index]
    assert q.search(99) is None


def test_search_follows_dequeue():
    q = ArrayIntQueue(5)
    for value in (10, 20):
        q.enqueue(value)
    q.dequeue()
    assert q.search(20) == 0


def test_clear_capacity_and_str():
    q = ArrayIntQueue(64)
    q.enqueue(1)
    q.enqueue(2)
    assert str(q) == "1 2"
    q.clear()
    assert q.is_empty()
    assert q.capacity() == 64


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ArrayIntQueue(-1)