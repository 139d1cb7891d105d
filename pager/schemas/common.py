"""Shared Pydantic schemas for the reference application."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health-check response returned by /health."""
    status: str = "ok"
    app: str
    env: str


class UserOut(BaseModel):
    id: int
    username: str
