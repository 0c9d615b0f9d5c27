import pytest

from dsdrills.matrix import (
    add_matrices,
    format_matrix,
    multiply_matrices,
    sequential_matrix,
)


def test_sequential_matrix_small():
    assert sequential_matrix(2, 3) == [[1, 2, 3], [4, 5, 6]]


def test_sequential_matrix_shape_and_steps():
    m = sequential_matrix(4, 5, 2, 2)
    assert len(m) == 4
    assert all(len(row) == 5 for row in m)
    flat = [v for row in m for v in row]
    assert flat[0] == 2
    assert all(b - a == 2 for a, b in zip(flat, flat[1:]))


def test_sequential_matrix_negative_raises():
    with pytest.raises(ValueError):
        sequential_matrix(-1, 3)


def test_practice_sum_is_triple_sequence():
    total = add_matrices(sequential_matrix(5, 5, 1, 1), sequential_matrix(5, 5, 2, 2))
    assert total == sequential_matrix(5, 5, 3, 3)
    assert format_matrix(total).splitlines()[0] == "3 6 9 12 15 "


def test_format_matrix_lines():
    m = sequential_matrix(3, 4)
    lines = format_matrix(m).split("\n")
    assert lines[-1] == ""
    assert [[int(v) for v in line.split()] for line in lines[:-1]] == m
    assert all(line.endswith(" ") for line in lines[:-1])


def test_add_shape_mismatch_raises():
    with pytest.raises(ValueError):
        add_matrices(sequential_matrix(2, 3), sequential_matrix(3, 2))


def test_multiply_by_identity():
    a = sequential_matrix(2, 3)
    identity = [[1 if r == c else 0 for c in range(3)] for r in range(3)]
    assert multiply_matrices(a, identity) == a


def test_multiply_distributes_over_addition():
    a = sequential_matrix(2, 3, 1, 1)
    b = sequential_matrix(3, 2, 2, 3)
    c = sequential_matrix(3, 2, -4, 1)
    assert multiply_matrices(a, add_matrices(b, c)) == add_matrices(
        multiply_matrices(a, b), multiply_matrices(a, c)
    )


def test_multiply_shape():
    product = multiply_matrices(sequential_matrix(2, 3), sequential_matrix(3, 4))
    assert len(product) == 2
    assert all(len(row) == 4 for row in product)


def test_multiply_mismatch_raises():
    with pytest.raises(ValueError):
        multiply_matrices(sequential_matrix(2, 3), sequential_matrix(2, 3))


def test_ragged_matrix_raises():
    with pytest.raises(ValueError):
        add_matrices([[1, 2], [3]], [[1, 2], [3]])