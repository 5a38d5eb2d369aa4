from __future__ import annotations

import numpy as np


class InvalidMatrixError(np.linalg.LinAlgError):
    """Raised when a matrix cannot be inverted.

    Covers non-square, singular, non-finite and too ill-conditioned input.
    Subclasses ``numpy.linalg.LinAlgError`` (itself a ``ValueError``) so code
    written against NumPy's error type keeps working.
    """
