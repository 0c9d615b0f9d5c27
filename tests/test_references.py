import pytest

from dsdrills.references import add_sub, average, bigger, find_char


def test_average_of_source_array():
    assert average([0, 1, 2, 3, 4, 5]) == 2


def test_average_of_equal_values():
    assert average([5, 5, 5]) == 5


def test_average_truncates_toward_zero():
    assert average([-1, -2]) == -average([1, 2])


def test_average_empty():
    with pytest.raises(ValueError):
        average([])


def test_bigger():
    assert bigger(3, 7) == 7
    assert bigger(7, 3) == 7
    assert bigger(4, 4) is None


def test_find_char_first_occurrence():
    assert find_char("Mike", "M") == 0
    assert find_char("abca", "a") == 0


def test_find_char_missing():
    assert find_char("Mike", "z") is None


def test_find_char_requires_single_character():
    with pytest.raises(ValueError):
        find_char("Mike", "Mi")


def test_add_sub_with_zero():
    assert add_sub(7, 0) == (7, 7)


@pytest.mark.parametrize("a,b", [(10, 20), (-3, 8), (0, 0)])
def test_add_sub_invariants(a, b):
    total, diff = add_sub(a, b)
    assert total + diff == 2 * a
    assert total - diff == 2 * b