"""Structured return value shared by every NetworkService query.

The CLI renders these; nothing above the service layer sees raw hop counts
or UnknownMemberError.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why a query failed: a machine-readable code plus a human message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one query.

    ``data`` is filled on success, ``error`` on failure.  ``meta`` carries
    optional timing when verbose output is on.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(cls, op: str, **data: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data)

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
