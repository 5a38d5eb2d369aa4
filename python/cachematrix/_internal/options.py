from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

METHODS: tuple[str, ...] = ("inv", "solve", "lu", "pinv")

DEFAULT_WARN_CONDITION = 1e12


def _check_positive(name: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number or None, got {value!r}")
    if not value > 0:
        raise ValueError(f"{name} must be positive, got {value!r}")


@dataclass(frozen=True)
class InversionOptions:
    """Enumerated knobs for the inversion routine.

    method:
        "inv" (numpy.linalg.inv), "solve" (numpy.linalg.solve against the
        identity), "lu" (scipy.linalg LU factorization) or "pinv"
        (numpy.linalg.pinv, rank-checked).
    check_finite:
        Reject NaN or inf entries before inverting. Non-finite input that
        gets through is still rejected once the inverse is computed.
    max_condition:
        Reject matrices whose 1-norm condition number exceeds this value.
    warn_condition:
        Emit CacheMatrixConditionWarning above this condition number.
    tol:
        Rank tolerance for the "pinv" full-rank check.
    rcond:
        Cutoff for small singular values in "pinv".
    """

    method: str = "inv"
    check_finite: bool = True
    max_condition: float | None = None
    warn_condition: float | None = DEFAULT_WARN_CONDITION
    tol: float | None = None
    rcond: float | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.method, str):
            raise ValueError(f"method must be a string, got {self.method!r}")
        method = self.method.strip().lower()
        if method not in METHODS:
            raise ValueError(f"unknown inversion method {self.method!r}; expected one of {METHODS}")
        object.__setattr__(self, "method", method)

        if not isinstance(self.check_finite, bool):
            raise ValueError(f"check_finite must be a bool, got {self.check_finite!r}")
        _check_positive("max_condition", self.max_condition)
        _check_positive("warn_condition", self.warn_condition)
        _check_positive("tol", self.tol)
        _check_positive("rcond", self.rcond)

    def replace(self, **changes: Any) -> "InversionOptions":
        return dataclasses.replace(self, **changes)
