import pytest

from dsdrills.array_containers import ArrayQueue, ArrayStack, BaseArray
from dsdrills.stack import EmptyError, FullError


def test_base_array_put_get_round_trip():
    arr = BaseArray(10)
    arr.put(3, 42)
    assert arr.get(3) == 42
    assert arr.capacity() == 10


def test_base_array_default_capacity():
    assert BaseArray().capacity() == 100


@pytest.mark.parametrize("index", [-1, 10])
def test_base_array_out_of_range(index):
    arr = BaseArray(10)
    with pytest.raises(IndexError):
        arr.get(index)
    with pytest.raises(IndexError):
        arr.put(index, 1)


def test_queue_is_fifo():
    q = ArrayQueue(100)
    values = [5, 1, 4, 2, 3]
    for v in values:
        q.enqueue(v)
    assert len(q) == len(values)
    assert q.capacity() == 100
    out = [q.dequeue() for _ in range(len(values))]
    assert out == values
    assert len(q) == 0


def test_queue_empty_and_full():
    q = ArrayQueue(1)
    with pytest.raises(EmptyError):
        q.dequeue()
    q.enqueue(7)
    with pytest.raises(FullError):
        q.enqueue(8)


def test_stack_is_lifo():
    s = ArrayStack(100)
    values = [5, 1, 4, 2, 3]
    for v in values:
        s.push(v)
    assert len(s) == len(values)
    out = [s.pop() for _ in range(len(values))]
    assert out == list(reversed(values))
    assert len(s) == 0


def test_stack_empty_and_full():
    s = ArrayStack(1)
    with pytest.raises(EmptyError):
        s.pop()
    s.push(7)
    with pytest.raises(FullError):
        s.push(8)