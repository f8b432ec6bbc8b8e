"""Base class for domain value objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable value object with strict validation."""

    model_config = ConfigDict(frozen=True, extra="forbid")
