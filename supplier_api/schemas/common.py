"""Shared Pydantic schema base."""

from __future__ import annotations

from pydantic import BaseModel


class ApiModel(BaseModel):
    """All API schemas inherit from this; fields go over the wire in snake_case."""

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class HealthResponse(BaseModel):
    """Health-check response returned by /health."""
    status: str = "ok"
    app: str
    env: str


class ErrorDetail(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Body of every non-2xx JSON response."""
    code: str
    message: str
    errors: list[ErrorDetail] | None = None
