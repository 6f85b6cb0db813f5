"""Bank account data models."""

from __future__ import annotations

from pydantic import BaseModel


class BankAccount(BaseModel):
    id: str | int
    company_id: str | int | None = None
    bank_id: str | int | None = None
    account_holder_name: str | None = None
    account_number: str | None = None
    accumulated: str | int | float | None = None
    label: str | None = None
    bank_api_connected: str | int | None = None
    last_transaction: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    model_config = {"extra": "allow"}


class AccountHolder(BaseModel):
    account_holder_name: str

    model_config = {"extra": "allow"}


class RequestTicket(BaseModel):
    """First half of an OTP flow; pass ``request_id`` to the confirm call."""
    request_id: str

    model_config = {"extra": "allow"}


class BankAccountPayload(BaseModel):
    company_id: str
    account_number: str
    account_holder_name: str | None = None
    identification_number: str | None = None
    phone_number: str | None = None
    label: str | None = None


class BankAccountUpdatePayload(BaseModel):
    identification_number: str | None = None
    phone_number: str | None = None


class AccountNumberPayload(BaseModel):
    account_number: str


class OtpPayload(BaseModel):
    otp: str
