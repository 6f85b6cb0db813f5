"""Virtual account (VA) data models."""

from __future__ import annotations

from pydantic import BaseModel


class VirtualAccount(BaseModel):
    id: str | int
    company_id: str | int | None = None
    bank_account_id: str | int | None = None
    va: str | None = None
    label: str | None = None
    active: str | int | None = None
    created_at: str | None = None
    updated_at: str | None = None

    model_config = {"extra": "allow"}


class OcbVaPayload(BaseModel):
    bank_account_id: str
    company_id: str
    merchant_name: str
    email: str
    merchant_address: str
    va: str
    label: str | None = None


class KlbVaPayload(BaseModel):
    bank_account_id: str
    company_id: str
    label: str | None = None
