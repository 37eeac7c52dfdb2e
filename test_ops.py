import numpy as np
import pytest

from simple_matrix import DimensionMismatchError, Matrix, ops


def inc_dec():
    inc = Matrix.from_iter(3, 3, range(9))
    dec = Matrix.from_iter(3, 3, (8 - n for n in range(9)))
    return inc, dec


def test_add():
    inc, dec = inc_dec()
    res = inc + dec
    assert res == ops.add(inc, dec)
    assert all(n == 8 for n in res)
    # operands are untouched
    assert inc.to_list() == list(range(9))


def test_sub():
    inc = Matrix.from_iter(3, 3, range(9))
    res = inc - inc.copy()
    assert res == ops.subtract(inc, inc)
    assert all(n == 0 for n in res)

    a = Matrix.from_rows([[5, 5]])
    b = Matrix.from_rows([[1, 2]])
    assert (a - b).to_list() == [4, 3]
    assert (b - a).to_list() == [-4, -3]


def test_in_place_add_and_sub_mutate_left_operand():
    inc, dec = inc_dec()
    target = inc
    inc += dec
    assert inc is target
    assert all(n == 8 for n in inc)

    inc -= dec
    assert inc is target
    assert inc.to_list() == list(range(9))

    assert ops.add_assign(inc, dec) is inc
    assert ops.subtract_assign(inc, dec) is inc
    assert inc.to_list() == list(range(9))


def test_in_place_add_on_list_cells():
    m = Matrix.from_rows([[[1], [2]]])
    m += Matrix.from_rows([[[3], [4]]])
    assert m.to_list() == [[1, 3], [2, 4]]


def test_negate():
    m = Matrix.from_rows([[1, -2], [0, 3]])
    assert (-m).to_rows() == [[-1, 2], [0, -3]]
    assert ops.negate(m) == -m


def test_equality():
    a = Matrix.from_iter(2, 3, range(6))
    assert a == Matrix.from_iter(2, 3, range(6))
    assert a != Matrix.from_iter(3, 2, range(6))
    assert a != Matrix.from_iter(2, 3, range(1, 7))
    assert a != [0, 1, 2, 3, 4, 5]
    assert ops.equals(a, a.copy())
    assert not ops.equals(a, "matrix")


def test_equality_is_exact():
    a = Matrix.from_rows([[0.1 + 0.2]])
    b = Matrix.from_rows([[0.3]])
    assert a != b


def test_scalar_multiplication():
    m = Matrix.from_iter(2, 2, range(4))
    assert (m * 3).to_list() == [0, 3, 6, 9]
    assert (3 * m) == m * 3
    assert ops.scale(m, 0.5).to_list() == [0.0, 0.5, 1.0, 1.5]


def test_matrix_multiplication_square():
    m = Matrix.from_iter(3, 3, range(9))
    expected = [[15, 18, 21], [42, 54, 66], [69, 90, 111]]
    assert (m * m).to_rows() == expected
    assert (m @ m).to_rows() == expected
    assert ops.multiply(m, m).to_rows() == expected


def test_matrix_multiplication_by_transpose():
    m = Matrix.from_iter(2, 3, range(6))
    product = m * m.transpose()
    assert product.shape == (2, 2)
    assert product.to_rows() == [[5, 14], [14, 50]]


def test_matrix_multiplication_2x3_counting_from_one_to_six():
    # rows (0,1,2) and (3,4,5) vs (1,2,3) and (4,5,6)
    a = Matrix.from_iter(2, 3, range(1, 7))
    assert (a * a.transpose()).to_rows() == [[14, 32], [32, 77]]


def test_matrix_multiplication_by_same_cells_as_3x2():
    m = Matrix.from_iter(2, 3, range(6))
    reshaped = Matrix.from_iter(3, 2, m)
    assert reshaped.to_rows() == [[0, 1], [2, 3], [4, 5]]
    assert (m * reshaped).to_rows() == [[10, 13], [28, 40]]


def test_matrix_multiplication_shape():
    a = Matrix.from_iter(2, 4, range(8))
    b = Matrix.new(4, 5, 1)
    c = a * b
    assert c.shape == (2, 5)
    assert c.to_rows() == [[6] * 5, [22] * 5]


def test_matrix_multiplication_accumulates_left_to_right():
    # 1.0 is absorbed by 1e16 before -1e16 cancels it; summing from the right gives 1.0
    a = Matrix.from_rows([[1.0, 1e16, -1e16]])
    b = Matrix.from_rows([[1.0], [1.0], [1.0]])
    assert (a * b).to_list() == [0.0]


def test_matrix_multiplication_with_1x1():
    assert (Matrix.from_rows([[3]]) * Matrix.from_rows([[4]])).to_list() == [12]


MISMATCHED = [
    (Matrix.from_iter(3, 3, range(9)), Matrix.from_iter(6, 3, range(18))),
    (Matrix.from_iter(6, 3, range(18)), Matrix.from_iter(3, 3, range(9))),
    (Matrix.from_iter(3, 3, range(9)), Matrix.from_iter(3, 6, range(18))),
    (Matrix.from_iter(3, 6, range(18)), Matrix.from_iter(3, 3, range(9))),
]


@pytest.mark.parametrize("a, b", MISMATCHED)
def test_add_mismatch_raises(a, b):
    with pytest.raises(DimensionMismatchError):
        a + b
    with pytest.raises(DimensionMismatchError):
        ops.add(a, b)


@pytest.mark.parametrize("a, b", MISMATCHED)
def test_sub_mismatch_raises(a, b):
    with pytest.raises(DimensionMismatchError):
        a - b
    with pytest.raises(DimensionMismatchError):
        ops.subtract(a, b)


@pytest.mark.parametrize("a, b", MISMATCHED)
def test_in_place_mismatch_raises_and_leaves_operand(a, b):
    left = a.copy()
    with pytest.raises(DimensionMismatchError):
        left += b
    with pytest.raises(DimensionMismatchError):
        left -= b
    assert left == a


@pytest.mark.parametrize("a, b", [
    (Matrix.new(2, 3), Matrix.new(2, 3)),
    (Matrix.new(3, 2), Matrix.new(3, 2)),
    (Matrix.new(2, 3), Matrix.new(4, 2)),
    (Matrix.new(4, 2), Matrix.new(3, 4)),
])
def test_multiply_mismatch_raises(a, b):
    with pytest.raises(DimensionMismatchError):
        a * b
    with pytest.raises(DimensionMismatchError):
        a @ b
    with pytest.raises(DimensionMismatchError):
        ops.multiply(a, b)


def test_mismatch_error_details():
    with pytest.raises(ValueError) as excinfo:
        Matrix.new(2, 3) + Matrix.new(3, 2)
    err = excinfo.value
    assert err.op == "add"
    assert err.left == (2, 3)
    assert err.right == (3, 2)
    assert "2x3" in str(err) and "3x2" in str(err)


def test_operators_reject_non_matrix_operands():
    m = Matrix.new(2, 2)
    with pytest.raises(TypeError):
        m + 1
    with pytest.raises(TypeError):
        m - [1, 2]
    with pytest.raises(TypeError):
        m @ 2


def test_numpy_scalar_on_the_left_keeps_the_matrix():
    m = Matrix.from_iter(2, 2, range(4))
    r = np.int64(3) * m
    assert isinstance(r, Matrix)
    assert r.shape == (2, 2)
    assert [int(x) for x in r] == [0, 3, 6, 9]


def test_widened_cell_times_its_matrix():
    m = Matrix.from_iter(1, 2, (np.int8(v) for v in (1, 2))).widen(np.int32)
    r = m[0, 0] * m
    assert isinstance(r, Matrix)
    assert r.shape == (1, 2)
    assert [int(x) for x in r] == [1, 2]


def test_numpy_scalar_compared_to_matrix_is_not_equal():
    m = Matrix.new(1, 1, np.int64(0))
    assert not (np.int64(0) == m)
