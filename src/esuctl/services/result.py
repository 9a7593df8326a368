"""ServiceResult and ServiceError — the contract every service returns.

The CLI formatters consume this type; services never print or exit.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Error codes shared across services
INVALID_ARGUMENT = "INVALID_ARGUMENT"
NOT_FOUND = "NOT_FOUND"
LOAD_ERROR = "LOAD_ERROR"


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
        op: Operation name, used to pick a renderer (e.g. ``"enumerate"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues such as ignored edges or truncated input.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing, graph shape).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
