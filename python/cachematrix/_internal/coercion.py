from __future__ import annotations

import numbers
from typing import Any

import numpy as np


def empty_matrix() -> np.ndarray:
    """Placeholder base value: a read-only 0x0 float matrix."""
    out = np.empty((0, 0), dtype=np.float64)
    out.flags.writeable = False
    return out


def as_matrix(candidate: Any) -> np.ndarray:
    """Coerce ``candidate`` into an owned, read-only 2D float64 array.

    Accepts NumPy arrays and anything ``numpy.asarray`` understands (nested
    sequences, matrix-likes implementing ``__array__``). The result is always a
    fresh copy, so later writes to ``candidate`` never reach the returned array.
    Squareness is not checked here.
    """

    try:
        array = np.asarray(candidate)
    except ValueError as exc:
        raise ValueError("Matrix data must be rectangular (all rows the same length).") from exc

    if array.ndim != 2:
        raise ValueError(f"Matrix input must be 2D, got {array.ndim}D data.")

    kind = array.dtype.kind
    if kind == "c":
        raise TypeError("Complex matrices are not supported; entries must be real numbers.")
    if kind == "O":
        # Object arrays (e.g. Fraction entries) convert only when every entry is a real number.
        if not all(isinstance(value, numbers.Real) for value in array.flat):
            raise TypeError("Matrix entries must be real numbers.")
    elif kind not in "biuf":
        # Strings, bytes, datetimes and structured records are rejected even when parseable.
        raise TypeError(f"Matrix entries must be real numbers, got dtype {array.dtype}.")

    out = np.array(array, dtype=np.float64, copy=True)
    out.flags.writeable = False
    return out
