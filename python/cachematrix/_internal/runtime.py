from __future__ import annotations

import os
from typing import Mapping

from .options import DEFAULT_WARN_CONDITION, InversionOptions


class Runtime:
    """Environment-driven defaults for inversion options.

    The environment is read on every call, so changes take effect without
    re-importing the package.
    """

    def __init__(
        self,
        *,
        method_env: str = "CACHEMATRIX_METHOD",
        max_condition_env: str = "CACHEMATRIX_MAX_CONDITION",
        warn_condition_env: str = "CACHEMATRIX_WARN_CONDITION",
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._method_env = method_env
        self._max_condition_env = max_condition_env
        self._warn_condition_env = warn_condition_env
        self._environ = environ

    def _env(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def _float(self, name: str, default: float | None) -> float | None:
        raw = self._env().get(name)
        if raw is None or not raw.strip():
            return default
        try:
            return float(raw)
        except ValueError:
            raise ValueError(f"{name} must be a number, got {raw!r}") from None

    def default_options(self) -> InversionOptions:
        method = self._env().get(self._method_env) or "inv"
        max_condition = self._float(self._max_condition_env, None)
        warn_condition = self._float(self._warn_condition_env, DEFAULT_WARN_CONDITION)
        try:
            return InversionOptions(
                method=method,
                max_condition=max_condition,
                warn_condition=warn_condition,
            )
        except ValueError as exc:
            names = ", ".join((self._method_env, self._max_condition_env, self._warn_condition_env))
            raise ValueError(f"invalid cachematrix configuration ({names}): {exc}") from exc


_default_runtime = Runtime()


def default_instance() -> Runtime:
    return _default_runtime


def default_options() -> InversionOptions:
    return _default_runtime.default_options()
