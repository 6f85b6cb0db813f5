"""Auth-related data models."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, field_validator


class TokenResponse(BaseModel):
    """``data`` payload of the BankHub token endpoint."""
    access_token: str
    ttl: int

    @field_validator("ttl", mode="before")
    @classmethod
    def truncate_ttl(cls, value: Any) -> Any:
        """Fractional TTLs (``120.5`` or ``"120.5"``) are truncated to whole seconds."""
        if isinstance(value, str):
            try:
                value = float(value)
            except ValueError:
                return value
        if isinstance(value, float) and math.isfinite(value):
            return int(value)
        return value


class TokenStatus(BaseModel):
    """Current state of the cached access token."""
    has_token: bool
    cache_key: str
    seconds_remaining: int | None = None
