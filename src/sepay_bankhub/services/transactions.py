"""Transaction history service."""

from __future__ import annotations

from sepay_bankhub.client import BankhubClient, ResponseShape
from sepay_bankhub.models.result import Result
from sepay_bankhub.models.transactions import Transaction


class TransactionService:
    """Service for querying transactions received on linked accounts."""

    def __init__(self, client: BankhubClient) -> None:
        self._client = client

    def list(
        self,
        per_page: int | None = None,
        query: str | None = None,
        company_id: str | None = None,
        bank_id: str | None = None,
        bank_account_id: str | None = None,
        transaction_date: str | None = None,
        start_transaction_date: str | None = None,
        end_transaction_date: str | None = None,
        transfer_type: str | None = None,
        va_id: str | None = None,
    ) -> Result:
        """List transactions as a ``Page[Transaction]``.

        Dates accept ``Y-m-d`` or ``Y-m-d H:i:s``; ``transfer_type`` is
        ``credit`` or ``debit``. Unset filters are not sent.
        """
        params = {
            "per_page": per_page,
            "q": query,
            "company_id": company_id,
            "bank_id": bank_id,
            "bank_account_id": bank_account_id,
            "transaction_date": transaction_date,
            "start_transaction_date": start_transaction_date,
            "end_transaction_date": end_transaction_date,
            "transfer_type": transfer_type,
            "va_id": va_id,
        }
        return self._client.get(
            "list transactions", "/transaction",
            params=params, context=params,
            shape=ResponseShape.PAGE, model=Transaction,
        )

    def get(self, transaction_id: str) -> Result:
        """Get one transaction."""
        return self._client.get(
            "get transaction details", f"/transaction/details/{transaction_id}",
            context={"transaction_id": transaction_id},
            model=Transaction,
        )
