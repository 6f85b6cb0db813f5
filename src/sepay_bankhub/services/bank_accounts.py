"""Bank account listing across all banks."""

from __future__ import annotations

from sepay_bankhub.client import BankhubClient, ResponseShape
from sepay_bankhub.models.bank_accounts import BankAccount
from sepay_bankhub.models.result import Result


class BankAccountService:
    def __init__(self, client: BankhubClient) -> None:
        self._client = client

    def list(
        self,
        per_page: int | None = None,
        query: str | None = None,
        company_id: str | None = None,
        bank_id: str | None = None,
    ) -> Result:
        """List bank accounts as a ``Page[BankAccount]``."""
        params = {
            "per_page": per_page,
            "q": query,
            "company_id": company_id,
            "bank_id": bank_id,
        }
        return self._client.get(
            "list bank accounts", "/bankAccount",
            params=params, context=params,
            shape=ResponseShape.PAGE, model=BankAccount,
        )

    def get(self, bank_account_id: str) -> Result:
        """Get one bank account."""
        return self._client.get(
            "get bank account details", f"/bankAccount/details/{bank_account_id}",
            context={"bank_account_id": bank_account_id},
            model=BankAccount,
        )
