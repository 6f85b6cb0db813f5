"""KienLongBank (KLB) accounts and VAs."""

from __future__ import annotations

from sepay_bankhub.client import ResponseShape
from sepay_bankhub.models.bank_accounts import BankAccountPayload
from sepay_bankhub.models.result import Result
from sepay_bankhub.models.virtual_accounts import KlbVaPayload
from sepay_bankhub.services.linking import ApiLinkedBankAccountService, get_va, list_vas


class KlbService(ApiLinkedBankAccountService):
    """KLB accounts link through OTP; VAs are created without one."""

    brand = "KLB"
    account_path = "/klb/bankAccount"
    va_path = "/klb/VA"

    def create_bank_account(
        self,
        company_id: str,
        account_number: str,
        label: str | None = None,
    ) -> Result:
        """Add a KLB account for an individual or business (code 2011 needs OTP)."""
        payload = BankAccountPayload(
            company_id=company_id,
            account_number=account_number,
            label=label,
        )
        return self._client.post(
            "create KLB bank account", f"{self.account_path}/create",
            body=payload,
            context={"company_id": company_id, "account_number": account_number},
            shape=ResponseShape.BARE,
        )

    # ── virtual accounts ──────────────────────────────────────────────

    def create_va(self, bank_account_id: str, company_id: str, label: str | None = None) -> Result:
        """Create a VA on a linked KLB account."""
        return self._client.post(
            "create KLB VA", f"{self.va_path}/create",
            body=KlbVaPayload(bank_account_id=bank_account_id, company_id=company_id, label=label),
            context={"bank_account_id": bank_account_id, "company_id": company_id},
            shape=ResponseShape.BARE,
        )

    def enable_va(self, va_id: str) -> Result:
        """Re-enable a disabled VA."""
        return self._client.post(
            "enable KLB VA", f"{self.va_path}/enable/{va_id}",
            context={"va_id": va_id},
            shape=ResponseShape.BARE,
        )

    def disable_va(self, va_id: str) -> Result:
        return self._client.post(
            "disable KLB VA", f"{self.va_path}/disable/{va_id}",
            context={"va_id": va_id},
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
