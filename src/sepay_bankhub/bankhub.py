"""One-stop entry point wiring config, token cache, client and services."""

from __future__ import annotations

import httpx

from sepay_bankhub.auth import TokenManager
from sepay_bankhub.client import BankhubClient
from sepay_bankhub.config import Config, get_config
from sepay_bankhub.services.acb import AcbService
from sepay_bankhub.services.bank_accounts import BankAccountService
from sepay_bankhub.services.banks import BankService
from sepay_bankhub.services.companies import CompanyService
from sepay_bankhub.services.klb import KlbService
from sepay_bankhub.services.mb import MbService
from sepay_bankhub.services.merchant import MerchantService
from sepay_bankhub.services.ocb import OcbService
from sepay_bankhub.services.transactions import TransactionService
from sepay_bankhub.utils.cache import TokenCache, build_token_cache


class Bankhub:
    """BankHub API facade.

    Usage::

        with Bankhub.from_config() as hub:
            page = hub.bank_accounts.list(per_page=20, company_id="c1").unwrap_or(None)
    """

    def __init__(
        self,
        config: Config,
        cache: TokenCache | None = None,
        http: httpx.Client | None = None,
        verbose: bool = False,
    ) -> None:
        self.config = config
        if cache is None:
            cache = build_token_cache(config.settings)

        # Shared by token and business calls
        self._owns_http = http is None
        if http is None:
            http = httpx.Client(timeout=config.settings.timeout)
        self._http = http

        self.auth = TokenManager(config, cache, http=http)
        self.client = BankhubClient(config, self.auth, http=http, verbose=verbose)

        self.banks = BankService(self.client)
        self.companies = CompanyService(self.client)
        self.merchant = MerchantService(self.client)
        self.bank_accounts = BankAccountService(self.client)
        self.transactions = TransactionService(self.client)
        self.acb = AcbService(self.client)
        self.mb = MbService(self.client)
        self.ocb = OcbService(self.client)
        self.klb = KlbService(self.client)

    @classmethod
    def from_config(cls, verbose: bool = False) -> "Bankhub":
        """Build from environment / .env / config/bankhub.yaml."""
        return cls(get_config(), verbose=verbose)

    def get_access_token(self) -> str | None:
        return self.auth.get_access_token()

    def clear_token_cache(self) -> None:
        self.auth.clear_token_cache()

    def close(self) -> None:
        self.client.close()
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "Bankhub":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
