"""Merchant-level counters."""

from __future__ import annotations

from sepay_bankhub.client import BankhubClient
from sepay_bankhub.models.companies import Counter
from sepay_bankhub.models.result import Result


class MerchantService:
    def __init__(self, client: BankhubClient) -> None:
        self._client = client

    def counter(self, date: str | None = None) -> Result:
        """Transaction counters for the whole merchant, optionally for one day (Y-m-d)."""
        return self._client.get(
            "get merchant counter", "/merchant/counter",
            params={"date": date},
            context={"date": date},
            model=Counter,
        )
