"""MB (Military Bank) individual accounts."""

from __future__ import annotations

from sepay_bankhub.client import ResponseShape
from sepay_bankhub.models.bank_accounts import BankAccountPayload
from sepay_bankhub.models.result import Result
from sepay_bankhub.services.linking import UnlinkableBankAccountService


class MbService(UnlinkableBankAccountService):
    brand = "MB"
    account_path = "/mb/individual/bankAccount"

    def create_bank_account(
        self,
        company_id: str,
        account_holder_name: str,
        account_number: str,
        identification_number: str,
        phone_number: str,
        label: str | None = None,
    ) -> Result:
        """Add an MB account (code 2011 needs an 8-digit OTP, 2012 is linked)."""
        payload = BankAccountPayload(
            company_id=company_id,
            account_holder_name=account_holder_name,
            account_number=account_number,
            identification_number=identification_number,
            phone_number=phone_number,
            label=label,
        )
        return self._client.post(
            "create MB bank account", f"{self.account_path}/create",
            body=payload,
            context={"company_id": company_id, "account_number": account_number},
            shape=ResponseShape.BARE,
        )
