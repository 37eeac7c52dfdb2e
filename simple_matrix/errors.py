"""
Exceptions raised by simple_matrix.

Out-of-range reads through the checked accessors (get, get_mut, set,
row_view, col_view) are not errors and never raise. Everything here marks a
broken precondition on the caller's side.
"""


class MatrixError(Exception):
    """Base class for all matrix errors."""


class DimensionMismatchError(MatrixError, ValueError):
    """
    Operand shapes are incompatible for the requested operation.

    Args:
        op (str):       name of the operation ("add", "multiply", ...)
        left (tuple):   shape of the left operand
        right (tuple):  shape of the right operand
    """

    def __init__(self, op, left, right):
        self.op = op
        self.left = tuple(left)
        self.right = tuple(right)
        super().__init__(
            f"cannot {op} matrices of shape {self.left[0]}x{self.left[1]} "
            f"and {self.right[0]}x{self.right[1]}"
        )


class StaleViewError(MatrixError, RuntimeError):
    """A view, iterator or cell reference was used after its matrix was mutated."""
