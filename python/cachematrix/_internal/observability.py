from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Tuple


@dataclass
class ResolveRecord:
    outcome: str
    trace_tag: str
    shape: Tuple[int, int]
    version: int
    method: str | None
    elapsed: float
    timestamp: float


class ResolveObservability:
    """Keeps the most recent resolution record, overall and per outcome."""

    def __init__(self) -> None:
        self._counter = 0
        self._last: dict[str, dict[str, Any]] = {}

    def clear(self) -> None:
        self._last.clear()

    def record(
        self,
        outcome: str,
        holder: Any,
        *,
        method: str | None = None,
        elapsed: float = 0.0,
    ) -> dict[str, Any]:
        self._counter += 1
        rec = ResolveRecord(
            outcome=outcome,
            trace_tag=f"{outcome}:{self._counter}",
            shape=tuple(holder.shape),
            version=int(holder.version),
            method=method,
            elapsed=float(elapsed),
            timestamp=time.time(),
        )
        payload = asdict(rec)
        self._last["__latest__"] = payload
        self._last[outcome] = payload
        return payload

    def last(self, outcome: str | None = None) -> dict[str, Any] | None:
        key = outcome or "__latest__"
        payload = self._last.get(key)
        if payload is None:
            return None
        return dict(payload)


# Module-level singleton helpers
_default_observability = ResolveObservability()


def default_instance() -> ResolveObservability:
    return _default_observability
