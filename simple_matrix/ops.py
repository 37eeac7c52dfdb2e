"""
Arithmetic on matrices.

Named functions behind the Matrix operators. Element-wise operations pair
cells in row-major order and require identical shapes; a mismatch raises
DimensionMismatchError before any cell is read or written.
"""

from loguru import logger

from .errors import DimensionMismatchError


def _check_same_shape(op, a, b):
    if a.shape != b.shape:
        logger.debug(f"{op}: shape {a.shape} does not match {b.shape}")
        raise DimensionMismatchError(op, a.shape, b.shape)


def _zip_with(a, b, fn):
    return a._from_flat(a.rows, a.cols, [fn(x, y) for x, y in zip(a._data, b._data)])


def add(a, b):
    """Element-wise a + b as a new matrix."""
    _check_same_shape("add", a, b)
    return _zip_with(a, b, lambda x, y: x + y)


def subtract(a, b):
    """Element-wise a - b as a new matrix."""
    _check_same_shape("subtract", a, b)
    return _zip_with(a, b, lambda x, y: x - y)


def add_assign(a, b):
    """Add b into a cell by cell. Returns a."""
    _check_same_shape("add", a, b)
    data, other = a._data, b._data
    for i in range(len(data)):
        data[i] += other[i]
    a._touch()
    return a


def subtract_assign(a, b):
    """Subtract b from a cell by cell. Returns a."""
    _check_same_shape("subtract", a, b)
    data, other = a._data, b._data
    for i in range(len(data)):
        data[i] -= other[i]
    a._touch()
    return a


def negate(a):
    return a._from_flat(a.rows, a.cols, [-x for x in a._data])


def equals(a, b):
    """
    Exact equality: same shape and every cell pair equal, row-major.

    Returns False for anything that is not a matrix.
    """
    if not isinstance(b, type(a)) and not isinstance(a, type(b)):
        return False
    return a.shape == b.shape and all(x == y for x, y in zip(a._data, b._data))


def scale(a, scalar):
    """Multiply every cell by scalar; shape is unchanged."""
    return a._from_flat(a.rows, a.cols, [x * scalar for x in a._data])


def multiply(a, b):
    """
    Matrix product a * b.

    Args:
        a: matrix of shape (n, m)
        b: matrix of shape (m, p)

    Returns:
        matrix of shape (n, p) where cell (i, j) is
        a[i, 0] * b[0, j] + a[i, 1] * b[1, j] + ... accumulated left to right

    Raises:
        DimensionMismatchError: if a.cols != b.rows
    """
    if a.cols != b.rows:
        logger.debug(f"multiply: inner dimensions {a.cols} and {b.rows} differ")
        raise DimensionMismatchError("multiply", a.shape, b.shape)

    n, m, p = a.rows, a.cols, b.cols
    logger.debug(f"multiply {n}x{m} by {m}x{p}")
    lhs, rhs = a._data, b._data
    data = []
    for i in range(n):
        for j in range(p):
            # no universal zero for arbitrary cells, start from the first term
            total = lhs[i * m] * rhs[j]
            for k in range(1, m):
                total = total + lhs[i * m + k] * rhs[k * p + j]
            data.append(total)
    return a._from_flat(n, p, data)
