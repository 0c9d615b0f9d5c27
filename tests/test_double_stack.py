import pytest

from dsdrills.double_stack import SharedStack, Side
from dsdrills.stack import EmptyError, FullError


def test_stacks_are_independent():
    s = SharedStack(10)
    s.push(Side.A, 1)
    s.push(Side.A, 2)
    s.push(Side.B, 10)
    assert s.size(Side.A) == 2
    assert s.size(Side.B) == 1
    assert s.pop(Side.B) == 10
    assert s.pop(Side.A) == 2
    assert s.peek(Side.A) == 1


def test_stacks_share_capacity():
    s = SharedStack(3)
    s.push(Side.A, 1)
    s.push(Side.B, 2)
    s.push(Side.B, 3)
    assert s.is_full()
    with pytest.raises(FullError):
        s.push(Side.A, 4)
    with pytest.raises(FullError):
        s.push(Side.B, 4)


def test_empty_stacks_raise():
    s = SharedStack(4)
    s.push(Side.A, 1)
    with pytest.raises(EmptyError):
        s.pop(Side.B)
    with pytest.raises(EmptyError):
        s.peek(Side.B)
    assert s.pop(Side.A) == 1
    with pytest.raises(EmptyError):
        s.pop(Side.A)


def test_items_run_bottom_to_top():
    s = SharedStack(8)
    for value in (1, 2, 3):
        s.push(Side.A, value)
        s.push(Side.B, value * 10)
    assert s.items(Side.A) == [1, 2, 3]
    assert s.items(Side.B) == [10, 20, 30]
    assert s.format(Side.A) == "1 2 3"


def test_search_returns_array_index():
    s = SharedStack(4)
    s.push(Side.B, 10)
    s.push(Side.B, 20)
    s.push(Side.A, 5)
    assert s.search(Side.B, 10) == s.capacity() - 1
    assert s.search(Side.A, 5) == 0
    assert s.search(Side.A, 10) is None


def test_clear_one_side_only():
    s = SharedStack(6)
    s.push(Side.A, 1)
    s.push(Side.B, 2)
    s.clear(Side.A)
    assert s.is_empty(Side.A)
    assert s.items(Side.B) == [2]


def test_side_accepts_enum_value_and_rejects_unknown():
    s = SharedStack(4)
    s.push(0, 7)
    assert s.peek(Side.A) == 7
    with pytest.raises(ValueError):
        s.push("C", 1)


def test_zero_capacity_is_full():
    s = SharedStack(0)
    assert s.is_full()
    assert s.is_empty(Side.A) and s.is_empty(Side.B)