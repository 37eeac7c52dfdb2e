"""
Fixed-size dense matrix.

Cells live in one flat list in row-major order: cell (row, col) is stored at
index col + row * cols, so a row is contiguous and iteration goes row by row,
left to right. The shape never changes after construction and neither
dimension can be zero.
"""

import itertools
import operator

import numpy as np
from loguru import logger

from . import convert, ops
from .views import CellRef, ColView, RowView, _Borrow


# (d_row, d_col) in the order neighbours are reported
_ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))
_WITH_DIAGONALS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def _check_dims(rows, cols):
    rows, cols = operator.index(rows), operator.index(cols)
    if rows <= 0 or cols <= 0:
        logger.debug(f"rejected matrix shape {rows}x{cols}")
        raise ValueError(f"matrix dimensions must be positive, got {rows}x{cols}")
    return rows, cols


class Matrix:
    """
    A rows x cols grid of arbitrary Python values.

    Args:
        rows (int):         number of rows, > 0
        cols (int):         number of columns, > 0
        source (iterable):  cell values in row-major order; exactly
                            rows * cols of them are taken, the rest of the
                            iterable is left untouched (it may be infinite)

    Raises:
        ValueError: if a dimension is not positive or the source runs out

    Example:
        >>> m = Matrix(2, 3, itertools.count())
        >>> m.to_rows()
        [[0, 1, 2], [3, 4, 5]]
    """

    __hash__ = None
    # numpy scalars on the left of an operator defer to the Matrix dunders
    __array_ufunc__ = None

    def __init__(self, rows, cols, source):
        rows, cols = _check_dims(rows, cols)
        size = rows * cols
        data = list(itertools.islice(source, size))
        if len(data) != size:
            logger.debug(f"source for {rows}x{cols} matrix ran out after {len(data)} values")
            raise ValueError(f"source yielded {len(data)} values, {size} needed for a {rows}x{cols} matrix")
        self._rows = rows
        self._cols = cols
        self._data = data
        self._version = 0

    @classmethod
    def _from_flat(cls, rows, cols, data):
        """Wrap an already validated row-major list without copying it."""
        obj = cls.__new__(cls)
        obj._rows = rows
        obj._cols = cols
        obj._data = data
        obj._version = 0
        return obj

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, rows, cols, default=0):
        """Matrix with every cell set to `default`."""
        return cls(rows, cols, itertools.repeat(default))

    @classmethod
    def from_iter(cls, rows, cols, source):
        return cls(rows, cols, source)

    @classmethod
    def from_rows(cls, rows_of_values):
        """
        Build a matrix from a sequence of rows.

        Raises:
            ValueError: if there are no rows, the rows are empty, or the
                        rows differ in length
        """
        rows = [list(row) for row in rows_of_values]
        if not rows:
            raise ValueError("cannot build a matrix from zero rows")
        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {r} has {len(row)} values, expected {width}")
        return cls(len(rows), width, itertools.chain.from_iterable(rows))

    @classmethod
    def identity(cls, n, one=1, zero=0):
        m = cls.new(n, n, zero)
        for i in range(n):
            m._data[i + i * n] = one
        return m

    @classmethod
    def from_numpy(cls, array):
        """Matrix holding the numpy scalars of a 2-D array, row-major."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"expected a 2-D array, got {array.ndim} dimensions")
        return cls(array.shape[0], array.shape[1], array.flat)

    def to_numpy(self, dtype=None):
        return np.array(self._data, dtype=dtype).reshape(self._rows, self._cols)

    def copy(self):
        return self._from_flat(self._rows, self._cols, list(self._data))

    __copy__ = copy

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def rows(self):
        return self._rows

    @property
    def cols(self):
        return self._cols

    @property
    def shape(self):
        return (self._rows, self._cols)

    def __len__(self):
        return len(self._data)

    def _touch(self):
        """Record a mutation; every outstanding view becomes stale."""
        self._version += 1

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _offset(self, row, col):
        """Flat index of (row, col), or None when out of range. Coordinates must be integers."""
        row, col = operator.index(row), operator.index(col)
        if 0 <= row < self._rows and 0 <= col < self._cols:
            return col + row * self._cols
        return None

    def get(self, row, col, default=None):
        """
        Value at (row, col), or `default` when out of range.

        Raises:
            TypeError: if a coordinate is not an integer
        """
        i = self._offset(row, col)
        return default if i is None else self._data[i]

    def get_mut(self, row, col):
        """
        Writable reference to one cell, or None when out of range.

        Issuing the reference counts as a mutation: views taken earlier are
        invalidated.
        """
        if self._offset(row, col) is None:
            return None
        self._touch()
        return CellRef(self, row, col)

    def set(self, row, col, value):
        """Write one cell. Returns False, leaving the matrix untouched, when out of range."""
        i = self._offset(row, col)
        if i is None:
            return False
        self._data[i] = value
        self._touch()
        return True

    def _checked_offset(self, key):
        if not isinstance(key, (tuple, list)) or len(key) != 2:
            raise TypeError(f"matrix indices must be (row, col) pairs, not {key!r}")
        row, col = operator.index(key[0]), operator.index(key[1])
        i = self._offset(row, col)
        if i is None:
            raise IndexError(f"index ({row}, {col}) out of range for a {self._rows}x{self._cols} matrix")
        return i

    def __getitem__(self, key):
        return self._data[self._checked_offset(key)]

    def __setitem__(self, key, value):
        self._data[self._checked_offset(key)] = value
        self._touch()

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def row_view(self, row):
        if not 0 <= row < self._rows:
            return None
        return RowView(self, row)

    def col_view(self, col):
        if not 0 <= col < self._cols:
            return None
        return ColView(self, col)

    def _neighbors(self, row, col, offsets):
        if self._offset(row, col) is None:
            return
        borrow = _Borrow(self)
        for d_row, d_col in offsets:
            r, c = row + d_row, col + d_col
            i = self._offset(r, c)
            if i is not None:
                yield (r, c), borrow.read(i)

    def neighbors(self, row, col):
        """Yield ((row, col), value) for each in-range neighbour: up, down, left, right."""
        return self._neighbors(row, col, _ORTHOGONAL)

    def neighbors_with_diagonals(self, row, col):
        """Like neighbors() but over all eight surrounding cells, top-left to bottom-right."""
        return self._neighbors(row, col, _WITH_DIAGONALS)

    # ------------------------------------------------------------------
    # Transformation
    # ------------------------------------------------------------------

    def transpose(self):
        rows, cols, data = self._rows, self._cols, self._data
        logger.debug(f"transpose {rows}x{cols}")
        return self._from_flat(cols, rows, [data[i + j * cols] for i in range(cols) for j in range(rows)])

    @property
    def T(self):
        return self.transpose()

    def apply(self, func):
        """Call func(value) on every cell, row-major. The matrix is not modified."""
        for value in self:
            func(value)

    def apply_mut(self, func):
        """Replace every cell with func(value), row-major."""
        data = self._data
        try:
            for i in range(len(data)):
                data[i] = func(data[i])
        finally:
            self._touch()

    def widen(self, target):
        """See simple_matrix.convert.widen."""
        return convert.widen(self, target)

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def __iter__(self):
        borrow = _Borrow(self)
        for i in range(len(self._data)):
            yield borrow.read(i)

    def iter_mut(self):
        """Yield a CellRef for every cell, row-major."""
        self._touch()
        borrow = _Borrow(self)

        def refs():
            for row in range(self._rows):
                for col in range(self._cols):
                    yield CellRef(self, row, col, borrow)

        return refs()

    def into_iter(self):
        """Iterator over a snapshot of the cells; unaffected by later mutation."""
        return iter(list(self._data))

    def to_list(self):
        return list(self._data)

    def to_rows(self):
        cols = self._cols
        return [self._data[r * cols:(r + 1) * cols] for r in range(self._rows)]

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return ops.equals(self, other)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return ops.add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return ops.subtract(self, other)

    def __iadd__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return ops.add_assign(self, other)

    def __isub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return ops.subtract_assign(self, other)

    def __neg__(self):
        return ops.negate(self)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return ops.multiply(self, other)
        return ops.scale(self, other)

    def __rmul__(self, other):
        return ops.scale(self, other)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return ops.multiply(self, other)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __repr__(self):
        return f"Matrix.from_rows({self.to_rows()!r})"

    def __str__(self):
        cells = [str(x) for x in self._data]
        width = max(len(c) for c in cells)
        lines = []
        for r in range(self._rows):
            row = cells[r * self._cols:(r + 1) * self._cols]
            lines.append("[" + " ".join(c.rjust(width) for c in row) + "]")
        return "\n".join(lines)
