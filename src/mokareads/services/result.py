"""ServiceResult and ServiceError — what every service method returns.

Commands never see exceptions from the layers below; they receive a
result and hand it to the output layer.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    NOT_FOUND = "NOT_FOUND"
    MALFORMED_INPUT = "MALFORMED_INPUT"
    FETCH_FAILED = "FETCH_FAILED"
    IO_ERROR = "IO_ERROR"


class ServiceError(BaseModel):
    """Why an operation failed, plus the identifiers it was called with."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    Attributes:
        ok: False exactly when ``error`` is set.
        op: Operation name such as ``"search"`` or ``"build_snapshot"``;
            renderers dispatch on it.
        data: JSON-ready payload.
        warnings: Problems that did not stop the operation, e.g. an
            empty remote snapshot.
        meta: ``{"telemetry": ...}`` in verbose mode, else None.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    def with_warning(self, message: str) -> ServiceResult:
        return self.model_copy(update={"warnings": [*self.warnings, message]})


def failure(op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
    """Build a failed result for *op*."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )
