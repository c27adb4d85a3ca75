"""Shared Pydantic schema base."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class ApiModel(BaseModel):
    """All API schemas inherit from this; fields serialize in snake_case."""

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class FieldError(BaseModel):
    field: str
    message: str


class HealthResponse(BaseModel):
    """Health-check response returned by /health."""
    status: str = "OK"
    timestamp: datetime
    version: str
    environment: str
    storage: str
