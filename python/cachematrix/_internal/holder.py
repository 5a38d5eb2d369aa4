from __future__ import annotations

from typing import Any

import numpy as np

from .coercion import as_matrix, empty_matrix


class CachedMatrixHolder:
    """A matrix plus its lazily computed, cached inverse.

    The holder never computes anything. It only guarantees that replacing the
    base matrix discards the cached inverse in the same call, so a present
    inverse always belongs to the current base.

    Both fields are stored as read-only copies. The base can only change by
    wholesale replacement through ``set_base``.
    """

    def __init__(self, base: Any = None):
        self._base: np.ndarray = empty_matrix() if base is None else as_matrix(base)
        self._derived: np.ndarray | None = None
        self._version = 0

    def set_base(self, new_matrix: Any) -> None:
        base = as_matrix(new_matrix)
        self._base = base
        self._derived = None
        self._version += 1

    def get_base(self) -> np.ndarray:
        return self._base

    def set_derived(self, new_derived: Any) -> None:
        # No cross-check against the base; the resolver only calls this right
        # after inverting the current base.
        self._derived = None if new_derived is None else as_matrix(new_derived)

    def get_derived(self) -> np.ndarray | None:
        return self._derived

    def has_derived(self) -> bool:
        return self._derived is not None

    def clear_derived(self) -> None:
        self._derived = None

    @property
    def version(self) -> int:
        """Number of ``set_base`` calls since construction."""
        return self._version

    @property
    def shape(self) -> tuple[int, int]:
        rows, cols = self._base.shape
        return int(rows), int(cols)

    # Names used by the list-of-functions interface this class replaces.
    set = set_base
    get = get_base
    set_inverse = set_derived
    get_inverse = get_derived

    def __repr__(self) -> str:
        state = "cached" if self._derived is not None else "empty"
        rows, cols = self.shape
        return f"CachedMatrixHolder(shape=({rows}, {cols}), version={self._version}, inverse={state})"


def make_cache_matrix(x: Any = None) -> CachedMatrixHolder:
    """Create a holder wrapping ``x`` (default: an empty 0x0 placeholder)."""
    return CachedMatrixHolder(x)
