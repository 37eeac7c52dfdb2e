"""
simple_matrix: a small generic dense matrix for Python values.

    >>> from simple_matrix import Matrix
    >>> a = Matrix.from_iter(2, 3, range(6))
    >>> (a * a.transpose()).to_rows()
    [[5, 14], [14, 50]]

The package logs through loguru but stays silent until setup_logging() is
called.
"""

from loguru import logger

from . import ops
from .convert import WIDENING, can_widen, widen
from .errors import DimensionMismatchError, MatrixError, StaleViewError
from .logging_config import setup_logging
from .matrix import Matrix
from .views import CellRef, ColView, RowView

__version__ = "0.1.0"

logger.disable("simple_matrix")

__all__ = [
    "Matrix",
    "RowView",
    "ColView",
    "CellRef",
    "ops",
    "widen",
    "can_widen",
    "WIDENING",
    "MatrixError",
    "DimensionMismatchError",
    "StaleViewError",
    "setup_logging",
    "__version__",
]
