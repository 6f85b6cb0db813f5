"""Response envelopes returned by BankHub endpoints."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageMeta(BaseModel):
    per_page: int = 0
    total: int = 0
    has_more: bool = False
    current_page: int = 1
    page_count: int = 0


class Page(BaseModel, Generic[T]):
    """``{data: [...], meta: {...}}`` list envelope."""
    data: list[T] = Field(default_factory=list)
    meta: PageMeta = Field(default_factory=PageMeta)


class ApiResponse(BaseModel):
    """Whole response body for endpoints that answer with a status envelope.

    Link/create calls use ``code`` 2011 when an OTP is still required and
    2012 when the account is already linked.
    """
    code: int | str | None = None
    message: str | None = None
    data: Any = None

    model_config = {"extra": "allow"}

    @property
    def requires_otp(self) -> bool:
        return str(self.code) == "2011"
