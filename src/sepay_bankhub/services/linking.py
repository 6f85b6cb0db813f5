"""Shared bank-brand operations: holder lookup, OTP linking, force delete.

Linking is a caller-driven protocol. ``request_*`` returns a
``RequestTicket``; the OTP sent out-of-band is then passed with its
``request_id`` to the matching ``confirm_*`` call. Nothing here chains the
two steps or retries them.
"""

from __future__ import annotations

from sepay_bankhub.client import BankhubClient, ResponseShape
from sepay_bankhub.models.bank_accounts import (
    AccountHolder,
    AccountNumberPayload,
    OtpPayload,
    RequestTicket,
)
from sepay_bankhub.models.result import Result
from sepay_bankhub.models.virtual_accounts import VirtualAccount


class BrandBankAccountService:
    """Operations every supported bank brand exposes."""

    brand = ""
    account_path = ""

    def __init__(self, client: BankhubClient) -> None:
        self._client = client

    def lookup_account_holder_name(self, account_number: str) -> Result:
        """Look up the holder name registered for ``account_number``."""
        return self._client.post(
            f"lookup {self.brand} account holder name",
            f"{self.account_path}/lookUpAccountHolderName",
            body=AccountNumberPayload(account_number=account_number),
            context={"account_number": account_number},
            model=AccountHolder,
        )

    def force_delete(self, bank_account_id: str) -> Result:
        """Delete an account that was never confirmed as API-linked."""
        return self._client.post(
            f"force delete {self.brand} bank account",
            f"{self.account_path}/forceDelete/{bank_account_id}",
            context={"bank_account_id": bank_account_id},
            shape=ResponseShape.BARE,
        )


class ApiLinkedBankAccountService(BrandBankAccountService):
    """Brands whose accounts are linked through an OTP-confirmed request."""

    def request_api_connection(self, bank_account_id: str) -> Result:
        """Start (or restart) API linking; the bank sends an OTP."""
        return self._client.post(
            f"request {self.brand} API connection",
            f"{self.account_path}/requestApiConnection/{bank_account_id}",
            context={"bank_account_id": bank_account_id},
            model=RequestTicket,
        )

    def confirm_api_connection(self, request_id: str, otp: str) -> Result:
        """Finish API linking with the ``request_id`` from the request call."""
        return self._client.post(
            f"confirm {self.brand} API connection",
            f"{self.account_path}/confirmApiConnection",
            body=OtpPayload(otp=otp),
            request_id=request_id,
            context={"request_id": request_id},
            shape=ResponseShape.BARE,
        )


class UnlinkableBankAccountService(ApiLinkedBankAccountService):
    """Brands that also remove linked accounts through an OTP flow."""

    def request_delete(self, bank_account_id: str) -> Result:
        """Ask to unlink a bank account; the bank sends an OTP."""
        return self._client.post(
            f"request {self.brand} delete",
            f"{self.account_path}/requestDelete/{bank_account_id}",
            context={"bank_account_id": bank_account_id},
            model=RequestTicket,
        )

    def confirm_delete(self, request_id: str, otp: str) -> Result:
        """Confirm unlinking with the ``request_id`` from ``request_delete``."""
        return self._client.post(
            f"confirm {self.brand} delete",
            f"{self.account_path}/confirmDelete",
            body=OtpPayload(otp=otp),
            request_id=request_id,
            context={"request_id": request_id},
            shape=ResponseShape.BARE,
        )


def list_vas(
    client: BankhubClient,
    brand: str,
    va_path: str,
    per_page: int | None = None,
    query: str | None = None,
    company_id: str | None = None,
    bank_account_id: str | None = None,
) -> Result:
    """List a brand's virtual accounts as a ``Page[VirtualAccount]``."""
    params = {
        "per_page": per_page,
        "q": query,
        "company_id": company_id,
        "bank_account_id": bank_account_id,
    }
    return client.get(
        f"list {brand} VAs", va_path,
        params=params, context=params,
        shape=ResponseShape.PAGE, model=VirtualAccount,
    )


def get_va(client: BankhubClient, brand: str, va_path: str, va_id: str) -> Result:
    """Get one virtual account of a brand."""
    return client.get(
        f"get {brand} VA details", f"{va_path}/details/{va_id}",
        context={"va_id": va_id},
        model=VirtualAccount,
    )
