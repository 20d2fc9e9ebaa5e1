"""Per-call timing for service methods.

``@traced`` costs one ContextVar read while telemetry is off. With
``--verbose`` it times the call, lets the method attach counts through
:func:`annotate`, logs a ``service.timed`` event, and returns the result
with ``meta["telemetry"]`` set.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from mokareads.services.result import ServiceResult

log = structlog.get_logger("mokareads.telemetry")

_telemetry_on: ContextVar[bool] = ContextVar("_telemetry_on", default=False)
_active: ContextVar[Span | None] = ContextVar("_active", default=None)


@dataclass
class Span:
    """Timing and annotations for one service call."""

    name: str
    started_ns: int = field(default_factory=time.perf_counter_ns)
    finished_ns: int | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.finished_ns is None:
            return 0.0
        return (self.finished_ns - self.started_ns) / 1_000_000

    def finish(self) -> None:
        self.finished_ns = time.perf_counter_ns()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            data["annotations"] = dict(self.annotations)
        return data


def _with_span(result: ServiceResult, span: Span) -> ServiceResult:
    # ServiceResult is frozen; copy with merged meta.
    return result.model_copy(update={"meta": {**(result.meta or {}), "telemetry": span.to_dict()}})


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:
    """Time *func* when telemetry is on; otherwise call straight through."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _telemetry_on.get():
            return func(*args, **kwargs)

        span = Span(name=func.__qualname__)
        token = _active.set(span)
        try:
            result = func(*args, **kwargs)
        finally:
            span.finish()
            _active.reset(token)

        ok = result.ok if isinstance(result, ServiceResult) else True
        log.debug("service.timed", span=span.name, duration_ms=round(span.duration_ms, 2), ok=ok)
        if isinstance(result, ServiceResult):
            return _with_span(result, span)  # type: ignore[return-value]
        return result

    return wrapper


def annotate(key: str, value: Any) -> None:
    """Record *value* on the running span; ignored when telemetry is off."""
    span = _active.get()
    if span is not None:
        span.annotations[key] = value


def enable_telemetry() -> None:
    _telemetry_on.set(True)


def disable_telemetry() -> None:
    _telemetry_on.set(False)
