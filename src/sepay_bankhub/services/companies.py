"""Company (organisation) management service."""

from __future__ import annotations

from typing import Any

from sepay_bankhub.client import BankhubClient, ResponseShape
from sepay_bankhub.models.companies import (
    Company,
    CompanyConfiguration,
    CompanyPayload,
    CompanyUpdatePayload,
    Counter,
)
from sepay_bankhub.models.result import Result


class CompanyService:
    """Service for company CRUD, configuration and counters."""

    def __init__(self, client: BankhubClient) -> None:
        self._client = client

    def create(self, full_name: str, short_name: str) -> Result:
        """Create a new company."""
        return self._client.post(
            "create company", "/company/create",
            body=CompanyPayload(full_name=full_name, short_name=short_name),
            context={"full_name": full_name, "short_name": short_name},
            model=Company,
        )

    def edit(self, company_id: str, full_name: str, short_name: str, status: str) -> Result:
        """Update a company's names and status (Pending, Active, Suspended, ...)."""
        return self._client.post(
            "edit company", f"/company/edit/{company_id}",
            body=CompanyUpdatePayload(full_name=full_name, short_name=short_name, status=status),
            context={
                "company_id": company_id,
                "full_name": full_name,
                "short_name": short_name,
                "status": status,
            },
            model=Company,
        )

    def list(
        self,
        per_page: int | None = None,
        query: str | None = None,
        status: str | None = None,
        sort_created_at: str | None = None,
    ) -> Result:
        """List companies as a ``Page[Company]``.

        Supports server-side filtering by keyword and status, and sorting by
        creation date (asc or desc).
        """
        params = {
            "per_page": per_page,
            "q": query,
            "status": status,
            "sort[created_at]": sort_created_at,
        }
        return self._client.get(
            "list companies", "/company",
            params=params, context=params,
            shape=ResponseShape.PAGE, model=Company,
        )

    def get(self, company_id: str) -> Result:
        """Get one company."""
        return self._client.get(
            "get company details", f"/company/details/{company_id}",
            context={"company_id": company_id},
            model=Company,
        )

    def get_configuration(self, company_id: str) -> Result:
        """Get a company's payment-code configuration."""
        return self._client.get(
            "get company configuration", f"/company/configuration/{company_id}",
            context={"company_id": company_id},
            model=CompanyConfiguration,
        )

    def update_configuration(self, company_id: str, settings: dict[str, Any]) -> Result:
        """Update a company's configuration. Returns the whole ``ApiResponse``."""
        return self._client.post(
            "update company configuration", f"/company/configuration/{company_id}",
            body=settings,
            context={"company_id": company_id, "config": settings},
            shape=ResponseShape.BARE,
        )

    def counter(self, company_id: str, date: str | None = None) -> Result:
        """Transaction counters for one company, optionally for one day (Y-m-d)."""
        return self._client.get(
            "get company counter", f"/company/counter/{company_id}",
            params={"date": date},
            context={"company_id": company_id, "date": date},
            model=Counter,
        )
