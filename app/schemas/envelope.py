"""Response envelope models shared by every endpoint."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class SuccessEnvelope(BaseModel):
    """Envelope for successful outcomes."""

    status: Literal["success"] = "success"
    message: str
    data: dict[str, Any] = Field(default_factory=dict)


class ErrorEnvelope(BaseModel):
    """Envelope for domain errors (duplicate, not found, forbidden, ...)."""

    status: Literal["error"] = "error"
    code: str
    message: str
    errors: dict[str, str] | list[dict[str, Any]] | None = None


class OtherEnvelope(BaseModel):
    """Envelope for unexpected failures; ``error`` is only filled when detail exposure is enabled."""

    status: Literal["error"] = "error"
    code: Literal["other"] = "other"
    message: str
    error: str | None = None
