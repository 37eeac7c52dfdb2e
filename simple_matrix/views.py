"""
Non-owning access to a Matrix: row/column views and single-cell references.

None of these copy cells. Each one holds a borrow token stamped with the
matrix version it was issued at; any mutation of the matrix that did not go
through the same token makes it stale, and using a stale object raises
StaleViewError.
"""

import operator

from .errors import StaleViewError


class _Borrow:
    """Version stamp shared by everything issued from one borrow of a matrix."""

    __slots__ = ("matrix", "version")

    def __init__(self, matrix):
        self.matrix = matrix
        self.version = matrix._version

    def check(self):
        if self.matrix._version != self.version:
            raise StaleViewError(
                f"matrix was mutated (version {self.version} -> {self.matrix._version})"
            )

    def read(self, index):
        self.check()
        return self.matrix._data[index]

    def write(self, index, value):
        self.check()
        self.matrix._data[index] = value
        self.matrix._version += 1
        # the writer itself stays valid
        self.version = self.matrix._version


class _LineView:
    """A lazily evaluated row or column; restartable, sized and indexable."""

    __slots__ = ("_borrow", "_fixed")

    def __init__(self, matrix, fixed):
        self._borrow = _Borrow(matrix)
        self._fixed = fixed

    def _offset(self, i):
        raise NotImplementedError

    def __len__(self):
        raise NotImplementedError

    def __getitem__(self, i):
        i = operator.index(i)
        if not 0 <= i < len(self):
            raise IndexError(f"{self.__class__.__name__} index {i!r} out of range")
        return self._borrow.read(self._offset(i))

    def __iter__(self):
        for i in range(len(self)):
            yield self._borrow.read(self._offset(i))

    def __repr__(self):
        self._borrow.check()
        return f"{self.__class__.__name__}({self._fixed}, {list(self)})"


class RowView(_LineView):
    """Cells of one row, left to right."""

    __slots__ = ()

    @property
    def row(self):
        return self._fixed

    def _offset(self, i):
        return i + self._fixed * self._borrow.matrix.cols

    def __len__(self):
        return self._borrow.matrix.cols


class ColView(_LineView):
    """Cells of one column, top to bottom."""

    __slots__ = ()

    @property
    def col(self):
        return self._fixed

    def _offset(self, i):
        return self._fixed + i * self._borrow.matrix.cols

    def __len__(self):
        return self._borrow.matrix.rows


class CellRef:
    """
    Read/write handle on a single cell.

    Args:
        matrix: the owning Matrix
        row, col (int): coordinates, already bounds-checked by the caller
        borrow (_Borrow, optional): token to share with sibling refs
    """

    __slots__ = ("row", "col", "_index", "_borrow")

    def __init__(self, matrix, row, col, borrow=None):
        self.row = row
        self.col = col
        self._index = col + row * matrix.cols
        self._borrow = borrow if borrow is not None else _Borrow(matrix)

    @property
    def value(self):
        return self._borrow.read(self._index)

    @value.setter
    def value(self, value):
        self._borrow.write(self._index, value)

    def __repr__(self):
        return f"CellRef(({self.row}, {self.col}), value={self.value!r})"
