"""Heading model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Heading(BaseModel):
    """An ATX heading recognized on a single line."""

    model_config = ConfigDict(frozen=True)

    depth: int = Field(..., ge=1, le=6)
    content: str
