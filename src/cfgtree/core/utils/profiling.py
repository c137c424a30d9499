"""Lightweight hierarchical profiler.

``span()`` is a no-op until a ``Profiler`` is enabled for the current context,
so library code can wrap source loading without paying for it by default.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Dict, Iterator, List


_ACTIVE_PROFILER: ContextVar["Profiler | None"] = ContextVar("_ACTIVE_PROFILER", default=None)


@dataclass(frozen=True)
class SpanRecord:
    name: str
    duration_ms: float
    depth: int
    meta: Dict[str, Any]


class Profiler:
    """Collects nested spans."""

    def __init__(self) -> None:
        self._spans: List[SpanRecord] = []
        self._depth = 0

    @property
    def spans(self) -> List[SpanRecord]:
        return list(self._spans)

    @contextmanager
    def span(self, name: str, **meta: Any) -> Iterator[None]:
        start = perf_counter()
        depth = self._depth
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
            self._spans.append(
                SpanRecord(
                    name=name,
                    duration_ms=(perf_counter() - start) * 1000.0,
                    depth=depth,
                    meta=dict(meta),
                )
            )

    def summary_ms(self) -> Dict[str, float]:
        totals: Dict[str, float] = {}
        for record in self._spans:
            totals[record.name] = totals.get(record.name, 0.0) + record.duration_ms
        return totals


@contextmanager
def enable_profiler(profiler: Profiler) -> Iterator[Profiler]:
    token = _ACTIVE_PROFILER.set(profiler)
    try:
        yield profiler
    finally:
        _ACTIVE_PROFILER.reset(token)


@contextmanager
def span(name: str, **meta: Any) -> Iterator[None]:
    profiler = _ACTIVE_PROFILER.get()
    if profiler is None:
        yield
        return
    with profiler.span(name, **meta):
        yield


__all__ = ["Profiler", "SpanRecord", "enable_profiler", "span"]
