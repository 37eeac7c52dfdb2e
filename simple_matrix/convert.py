"""
Lossless numeric widening between numpy scalar types.

Only the pairs listed in WIDENING are offered. numpy's own "safe" casting is
not used because it allows lossy pairs such as int64 -> float64.
"""

import numpy as np
from loguru import logger


# source dtype name -> names of the dtypes that hold every source value exactly
WIDENING = {
    # unsigned -> unsigned, signed, float
    "uint8": frozenset({"uint16", "uint32", "uint64", "int16", "int32", "int64",
                        "float16", "float32", "float64"}),
    "uint16": frozenset({"uint32", "uint64", "int32", "int64", "float32", "float64"}),
    "uint32": frozenset({"uint64", "int64", "float64"}),
    # signed -> signed, float
    "int8": frozenset({"int16", "int32", "int64", "float16", "float32", "float64"}),
    "int16": frozenset({"int32", "int64", "float32", "float64"}),
    "int32": frozenset({"int64", "float64"}),
    # float -> float
    "float16": frozenset({"float32", "float64"}),
    "float32": frozenset({"float64"}),
}


def _dtype_name(t):
    """Normalise a numpy type, dtype or dtype string to its canonical name."""
    return np.dtype(t).name


def can_widen(source, target):
    """True if every value of `source` converts to `target` without loss."""
    return _dtype_name(target) in WIDENING.get(_dtype_name(source), frozenset())


def widen(matrix, target):
    """
    Convert every cell of `matrix` to the numpy scalar type `target`.

    Args:
        matrix: Matrix whose cells all share one numpy scalar type
        target: numpy scalar type, dtype or dtype string

    Returns:
        new Matrix of the same shape holding `target` scalars

    Raises:
        TypeError: if the cells are not all of one numpy scalar type, or
                   the (source, target) pair is not a lossless widening
    """
    kinds = {type(x) for x in matrix._data}
    if len(kinds) != 1:
        raise TypeError(f"cells must share one numpy scalar type, found {sorted(k.__name__ for k in kinds)}")
    kind = kinds.pop()
    if not issubclass(kind, np.generic):
        raise TypeError(f"cells of type {kind.__name__} are not numpy scalars")

    source_name = _dtype_name(kind)
    target_name = _dtype_name(target)
    if not can_widen(source_name, target_name):
        raise TypeError(f"no lossless conversion from {source_name} to {target_name}")

    logger.debug(f"widen {matrix.rows}x{matrix.cols} from {source_name} to {target_name}")
    to = np.dtype(target).type
    return matrix._from_flat(matrix.rows, matrix.cols, [to(x) for x in matrix._data])
