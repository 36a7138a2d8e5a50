"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: All service-layer methods return ServiceResult. Domain errors
are converted into a ServiceError; they never escape a service.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"near"``).
        data: Operation-specific payload on success.
        warnings: Advisory notices, such as DST ambiguity.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (inputs echoed back, settings used).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
