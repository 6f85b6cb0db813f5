"""Transaction history data models."""

from __future__ import annotations

from pydantic import BaseModel

TRANSFER_TYPES = ("credit", "debit")


class Transaction(BaseModel):
    id: str | int
    transaction_id: str | None = None
    transaction_date: str | None = None
    bank_account_id: str | int | None = None
    account_number: str | None = None
    company_id: str | int | None = None
    bank_id: str | int | None = None
    va_id: str | int | None = None
    va: str | None = None
    reference_number: str | None = None
    transaction_content: str | None = None
    payment_code: str | None = None
    transfer_type: str | None = None
    amount: str | int | float | None = None

    model_config = {"extra": "allow"}
