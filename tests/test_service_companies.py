"""Tests for services/companies.py, services/banks.py and services/merchant.py."""
import json

import httpx

from sepay_bankhub.client import ResponseShape
from sepay_bankhub.models.companies import Company, CompanyConfiguration, Counter
from sepay_bankhub.models.envelopes import ApiResponse, Page
from sepay_bankhub.models.result import ErrorKind, Ok
from sepay_bankhub.services.companies import CompanyService


def _last(server):
    return server.business_requests()[-1]


# ── CompanyService with a mocked client ──────────────────────────────

def test_create_sends_both_names(mock_client):
    mock_client.post.return_value = Ok(value=None)
    CompanyService(mock_client).create("Acme Trading", "ACME")

    args, kwargs = mock_client.post.call_args
    assert args == ("create company", "/company/create")
    assert kwargs["body"].model_dump() == {"full_name": "Acme Trading", "short_name": "ACME"}
    assert kwargs["model"] is Company


def test_list_uses_page_shape(mock_client):
    CompanyService(mock_client).list(per_page=5)

    kwargs = mock_client.get.call_args[1]
    assert kwargs["shape"] == ResponseShape.PAGE
    assert kwargs["model"] is Company


def test_update_configuration_returns_bare(mock_client):
    CompanyService(mock_client).update_configuration("c1", {"payment_code": "on"})

    args, kwargs = mock_client.post.call_args
    assert args[1] == "/company/configuration/c1"
    assert kwargs["shape"] == ResponseShape.BARE
    assert kwargs["body"] == {"payment_code": "on"}


# ── Companies against the fake server ────────────────────────────────

def test_create_company(hub, server):
    server.routes[("POST", "/company/create")] = httpx.Response(
        200, json={"data": {"id": "c9", "full_name": "Acme", "short_name": "AC", "status": "Pending"}},
    )

    result = hub.companies.create("Acme", "AC")

    assert result.ok
    assert result.value.id == "c9"
    assert result.value.status == "Pending"
    assert json.loads(_last(server).content) == {"full_name": "Acme", "short_name": "AC"}


def test_edit_company_path_and_body(hub, server):
    server.routes[("POST", "/company/edit/c1")] = httpx.Response(200, json={"data": {"id": "c1"}})

    result = hub.companies.edit("c1", "Acme", "AC", "Suspended")

    assert result.ok
    assert json.loads(_last(server).content)["status"] == "Suspended"


def test_list_companies_filters(hub, server):
    server.routes[("GET", "/company")] = httpx.Response(200, json={
        "data": [{"id": "c1", "full_name": "Acme"}],
        "meta": {"per_page": 10, "total": 1, "has_more": False, "current_page": 1, "page_count": 1},
    })

    result = hub.companies.list(per_page=10, status="Active", sort_created_at="desc")

    assert isinstance(result.value, Page)
    assert result.value.data[0].full_name == "Acme"
    params = _last(server).url.params
    assert params["per_page"] == "10"
    assert params["status"] == "Active"
    assert params["sort[created_at]"] == "desc"
    assert "q" not in params


def test_get_company_configuration(hub, server):
    server.routes[("GET", "/company/configuration/c1")] = httpx.Response(200, json={
        "data": {"payment_code": "on", "payment_code_prefix": "DH", "transaction_amount": "unlimited"},
    })

    result = hub.companies.get_configuration("c1")

    assert isinstance(result.value, CompanyConfiguration)
    assert result.value.payment_code_prefix == "DH"


def test_update_configuration_keeps_envelope(hub, server):
    server.routes[("POST", "/company/configuration/c1")] = httpx.Response(
        200, json={"code": 200, "message": "updated"},
    )

    result = hub.companies.update_configuration("c1", {"payment_code": "off"})

    assert isinstance(result.value, ApiResponse)
    assert result.value.message == "updated"


def test_company_counter_date_param(hub, server):
    server.routes[("GET", "/company/counter/c1")] = httpx.Response(200, json={
        "data": {
            "dates": [{"date": "2024-01-02", "transaction": 3, "transaction_in": 2, "transaction_out": 1}],
            "total": {"transaction": 3, "transaction_in": 2, "transaction_out": 1},
        },
    })

    result = hub.companies.counter("c1", date="2024-01-02")

    assert isinstance(result.value, Counter)
    assert result.value.total.transaction == 3
    assert _last(server).url.params["date"] == "2024-01-02"


def test_get_company_not_found(hub, server, caplog):
    result = hub.companies.get("missing")

    assert result.kind == ErrorKind.UPSTREAM
    assert result.status == 404
    assert "company_id=missing" in caplog.text


# ── Banks and merchant ───────────────────────────────────────────────

def test_list_banks(hub, server):
    server.routes[("GET", "/bank")] = httpx.Response(200, json={"data": [
        {"id": "1", "brand_name": "ACB", "code": "ACB", "bin": "970416"},
        {"id": "2", "brand_name": "MBBank", "code": "MB"},
    ]})

    banks = hub.banks.list().unwrap_or([])

    assert [b.code for b in banks] == ["ACB", "MB"]


def test_list_banks_failure_unwraps_to_empty(hub, server):
    server.routes[("GET", "/bank")] = httpx.Response(503, text="maintenance")

    result = hub.banks.list()

    assert result.ok is False
    assert result.unwrap_or([]) == []


def test_merchant_counter_without_date(hub, server):
    server.routes[("GET", "/merchant/counter")] = httpx.Response(200, json={
        "data": {"dates": [], "total": {"transaction": 0, "transaction_in": 0, "transaction_out": 0}},
    })

    result = hub.merchant.counter()

    assert result.ok
    assert result.value.dates == []
    assert "date" not in _last(server).url.params
