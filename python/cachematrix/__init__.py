"""Matrix holder with a lazily computed, invalidate-on-write cached inverse."""
from __future__ import annotations

from ._version import version as __version__

import logging
from typing import Any

from ._internal import observability as _observability
from ._internal.errors import InvalidMatrixError
from ._internal.holder import CachedMatrixHolder, make_cache_matrix
from ._internal.inversion import invert
from ._internal.options import METHODS, InversionOptions
from ._internal.resolver import cache_solve, resolve_inverse
from ._internal.runtime import default_options
from ._internal.warnings import CacheMatrixConditionWarning, CacheMatrixWarning

logging.getLogger(__name__).addHandler(logging.NullHandler())


def last_resolve_record(outcome: str | None = None) -> dict[str, Any] | None:
    """Most recent successful resolution ("hit" or "miss"), or None."""
    return _observability.default_instance().last(outcome)


def clear_resolve_records() -> None:
    _observability.default_instance().clear()


__all__ = [
    "CachedMatrixHolder",
    "CacheMatrixConditionWarning",
    "CacheMatrixWarning",
    "InvalidMatrixError",
    "InversionOptions",
    "METHODS",
    "cache_solve",
    "clear_resolve_records",
    "default_options",
    "invert",
    "last_resolve_record",
    "make_cache_matrix",
    "resolve_inverse",
]
