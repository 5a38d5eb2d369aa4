from __future__ import annotations

import logging
import warnings
from typing import Any

import numpy as np
import scipy.linalg

from . import runtime as _runtime
from .coercion import as_matrix
from .errors import InvalidMatrixError
from .options import InversionOptions
from .warnings import CacheMatrixConditionWarning

logger = logging.getLogger(__name__)


def _invert_lu(a: np.ndarray, *, check_finite: bool) -> np.ndarray:
    with warnings.catch_warnings():
        # lu_factor only warns on an exactly zero pivot; turn that into an error below.
        warnings.simplefilter("ignore", scipy.linalg.LinAlgWarning)
        lu, piv = scipy.linalg.lu_factor(a, check_finite=check_finite)
    if np.any(np.diag(lu) == 0):
        raise np.linalg.LinAlgError("Singular matrix")
    return scipy.linalg.lu_solve((lu, piv), np.eye(a.shape[0]), check_finite=False)


def _invert_pinv(a: np.ndarray, *, tol: float | None, rcond: float | None) -> np.ndarray:
    rank = int(np.linalg.matrix_rank(a, tol=tol))
    if rank < a.shape[0]:
        raise np.linalg.LinAlgError(f"Singular matrix (numerical rank {rank} < {a.shape[0]})")
    if rcond is None:
        return np.linalg.pinv(a)
    return np.linalg.pinv(a, rcond=rcond)


def _run_method(a: np.ndarray, opts: InversionOptions) -> np.ndarray:
    if opts.method == "inv":
        return np.linalg.inv(a)
    if opts.method == "solve":
        return np.linalg.solve(a, np.eye(a.shape[0]))
    if opts.method == "lu":
        return _invert_lu(a, check_finite=opts.check_finite)
    return _invert_pinv(a, tol=opts.tol, rcond=opts.rcond)


def _check_condition(a_norm: float, inverse: np.ndarray, opts: InversionOptions) -> None:
    if opts.max_condition is None and opts.warn_condition is None:
        return

    # 1-norm condition number from the inverse we already have; no extra SVD.
    cond = float(a_norm * np.linalg.norm(inverse, 1))
    if opts.max_condition is not None and not cond <= opts.max_condition:
        raise InvalidMatrixError(
            f"matrix condition number {cond:.3g} exceeds max_condition={opts.max_condition:g}"
        )
    if opts.warn_condition is not None and cond > opts.warn_condition:
        warnings.warn(
            f"matrix is ill-conditioned (condition number {cond:.3g}); its inverse may be inaccurate",
            CacheMatrixConditionWarning,
            stacklevel=3,
        )


def invert(matrix: Any, options: InversionOptions | None = None) -> np.ndarray:
    """Return the inverse of a square matrix.

    Raises InvalidMatrixError for non-square, non-finite, singular or (with
    ``max_condition``) too ill-conditioned input, and when the inverse comes
    out non-finite. When ``options`` is None the defaults come from the
    environment (see ``runtime``).
    """

    opts = options if options is not None else _runtime.default_options()
    a = as_matrix(matrix)

    rows, cols = a.shape
    if rows != cols:
        raise InvalidMatrixError(f"cannot invert a non-square matrix of shape ({rows}, {cols})")
    if rows == 0:
        return np.empty((0, 0), dtype=np.float64)
    if opts.check_finite and not np.all(np.isfinite(a)):
        raise InvalidMatrixError("matrix contains NaN or infinite entries")

    logger.debug("inverting %dx%d matrix with method=%s", rows, cols, opts.method)
    try:
        inverse = _run_method(a, opts)
    except np.linalg.LinAlgError as exc:
        raise InvalidMatrixError(f"matrix is singular and cannot be inverted: {exc}") from exc

    # Without check_finite, NaN/inf input can get through LAPACK unreported.
    a_norm = float(np.linalg.norm(a, 1))
    if not np.isfinite(a_norm) or not np.all(np.isfinite(inverse)):
        raise InvalidMatrixError("matrix or its inverse contains NaN or infinite entries")

    _check_condition(a_norm, inverse, opts)
    return inverse
