"""Bank catalog service."""

from __future__ import annotations

from sepay_bankhub.client import BankhubClient
from sepay_bankhub.models.banks import Bank
from sepay_bankhub.models.result import Result


class BankService:
    """Service for the list of banks supported by BankHub."""

    def __init__(self, client: BankhubClient) -> None:
        self._client = client

    def list(self) -> Result:
        """List supported banks. ``Ok([])`` when the upstream sends no data."""
        return self._client.get("get banks", "/bank", model=list[Bank], default=[])
