"""Bank catalog data models."""

from __future__ import annotations

from pydantic import BaseModel


class Bank(BaseModel):
    id: str | int
    brand_name: str | None = None
    full_name: str | None = None
    short_name: str | None = None
    code: str | None = None
    bin: str | None = None
    logo_path: str | None = None
    icon: str | None = None
    active: str | int | None = None

    model_config = {"extra": "allow"}
