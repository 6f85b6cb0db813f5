"""OCB (Orient Commercial Bank) individual accounts and VAs."""

from __future__ import annotations

from sepay_bankhub.client import ResponseShape
from sepay_bankhub.models.bank_accounts import (
    BankAccount,
    BankAccountPayload,
    BankAccountUpdatePayload,
    OtpPayload,
    RequestTicket,
)
from sepay_bankhub.models.result import Result
from sepay_bankhub.models.virtual_accounts import OcbVaPayload
from sepay_bankhub.services.linking import BrandBankAccountService, get_va, list_vas


class OcbService(BrandBankAccountService):
    """OCB accounts are created directly; VA creation is OTP-gated."""

    brand = "OCB"
    account_path = "/ocb/individual/bankAccount"
    va_path = "/ocb/individual/VA"

    def create_bank_account(
        self,
        company_id: str,
        account_holder_name: str,
        account_number: str,
        identification_number: str,
        phone_number: str,
        label: str,
    ) -> Result:
        """Create an OCB individual bank account."""
        payload = BankAccountPayload(
            company_id=company_id,
            account_holder_name=account_holder_name,
            account_number=account_number,
            identification_number=identification_number,
            phone_number=phone_number,
            label=label,
        )
        return self._client.post(
            "create OCB bank account", f"{self.account_path}/create",
            body=payload,
            context={"company_id": company_id, "account_number": account_number},
            model=BankAccount,
        )

    def edit_bank_account(
        self,
        bank_account_id: str,
        identification_number: str | None = None,
        phone_number: str | None = None,
    ) -> Result:
        """Update identification and/or phone number; unset fields are not sent."""
        payload = BankAccountUpdatePayload(
            identification_number=identification_number,
            phone_number=phone_number,
        )
        return self._client.post(
            "edit OCB bank account", f"{self.account_path}/edit/{bank_account_id}",
            body=payload,
            context={"bank_account_id": bank_account_id},
            shape=ResponseShape.BARE,
        )

    # ── virtual accounts ──────────────────────────────────────────────

    def request_va_create(
        self,
        bank_account_id: str,
        company_id: str,
        merchant_name: str,
        email: str,
        merchant_address: str,
        va: str,
        label: str | None = None,
    ) -> Result:
        """Ask to create a VA; the bank sends an OTP. Returns a ``RequestTicket``."""
        payload = OcbVaPayload(
            bank_account_id=bank_account_id,
            company_id=company_id,
            merchant_name=merchant_name,
            email=email,
            merchant_address=merchant_address,
            va=va,
            label=label,
        )
        return self._client.post(
            "request OCB VA create", f"{self.va_path}/requestCreate",
            body=payload,
            context={"bank_account_id": bank_account_id, "company_id": company_id},
            model=RequestTicket,
        )

    def confirm_va_create(self, request_id: str, otp: str) -> Result:
        """Confirm VA creation with the ``request_id`` from ``request_va_create``."""
        return self._client.post(
            "confirm OCB VA create", f"{self.va_path}/confirmCreate",
            body=OtpPayload(otp=otp),
            request_id=request_id,
            context={"request_id": request_id},
            shape=ResponseShape.BARE,
        )

    def list_vas(
        self,
        per_page: int | None = None,
        query: str | None = None,
        company_id: str | None = None,
        bank_account_id: str | None = None,
    ) -> Result:
        return list_vas(
            self._client, self.brand, self.va_path,
            per_page=per_page, query=query,
            company_id=company_id, bank_account_id=bank_account_id,
        )

    def get_va(self, va_id: str) -> Result:
        return get_va(self._client, self.brand, self.va_path, va_id)
