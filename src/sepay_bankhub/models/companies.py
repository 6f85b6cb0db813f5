"""Company (merchant organisation) data models."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Pending, Active, Suspended, Terminated, Cancelled, Fraud
COMPANY_STATUSES = ("Pending", "Active", "Suspended", "Terminated", "Cancelled", "Fraud")


class Company(BaseModel):
    id: str | int
    full_name: str | None = None
    short_name: str | None = None
    status: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    model_config = {"extra": "allow"}


class CompanyConfiguration(BaseModel):
    payment_code: str | None = None
    payment_code_prefix: str | None = None
    payment_code_suffix_from: int | None = None
    payment_code_suffix_to: int | None = None
    payment_code_suffix_character_type: str | None = None
    transaction_amount: int | str | None = None

    model_config = {"extra": "allow"}


class CounterDay(BaseModel):
    company_id: str | int | None = None
    date: str
    transaction: int | str = 0
    transaction_in: int | str = 0
    transaction_out: int | str = 0


class CounterTotal(BaseModel):
    transaction: int = 0
    transaction_in: int = 0
    transaction_out: int = 0


class Counter(BaseModel):
    """Per-day and total transaction counts (merchant or company scope)."""
    dates: list[CounterDay] = Field(default_factory=list)
    total: CounterTotal = Field(default_factory=CounterTotal)


class CompanyPayload(BaseModel):
    full_name: str
    short_name: str


class CompanyUpdatePayload(BaseModel):
    full_name: str
    short_name: str
    status: str
