"""Tests for services/bank_accounts.py and services/transactions.py."""
import httpx

from sepay_bankhub.models.bank_accounts import BankAccount
from sepay_bankhub.models.result import ErrorKind
from sepay_bankhub.models.transactions import Transaction


def _page(items, total=None):
    return {
        "data": items,
        "meta": {
            "per_page": 20,
            "total": len(items) if total is None else total,
            "has_more": False,
            "current_page": 1,
            "page_count": 1,
        },
    }


# ── Bank accounts ────────────────────────────────────────────────────

def test_list_sends_only_set_filters(hub, server):
    server.routes[("GET", "/bankAccount")] = httpx.Response(200, json=_page([
        {"id": "ba1", "company_id": "c1", "account_number": "0123", "bank_api_connected": 1},
    ]))

    page = hub.bank_accounts.list(per_page=20, company_id="c1").value

    request = server.business_requests()[-1]
    assert request.url.query == b"per_page=20&company_id=c1"
    assert isinstance(page.data[0], BankAccount)
    assert page.meta.total == 1


def test_list_preserves_filter_order(hub, server):
    server.routes[("GET", "/bankAccount")] = httpx.Response(200, json=_page([]))

    hub.bank_accounts.list(per_page=5, query="abc", company_id="c1", bank_id="b1")

    assert server.business_requests()[-1].url.query == b"per_page=5&q=abc&company_id=c1&bank_id=b1"


def test_list_sends_bearer_token(hub, server):
    server.routes[("GET", "/bankAccount")] = httpx.Response(200, json=_page([]))

    hub.bank_accounts.list()

    request = server.business_requests()[-1]
    assert request.headers["Authorization"] == "Bearer T1"
    assert request.headers["Client-Message-Id"]


def test_get_bank_account(hub, server):
    server.routes[("GET", "/bankAccount/details/ba1")] = httpx.Response(
        200, json={"data": {"id": "ba1", "label": "Main", "accumulated": "150000"}},
    )

    result = hub.bank_accounts.get("ba1")

    assert result.value.label == "Main"


def test_list_failure_is_err(hub, server, caplog):
    server.routes[("GET", "/bankAccount")] = httpx.Response(500, text="db down")

    result = hub.bank_accounts.list(company_id="c1")

    assert result.kind == ErrorKind.UPSTREAM
    assert result.unwrap_or([]) == []
    assert "company_id=c1" in caplog.text


# ── Transactions ─────────────────────────────────────────────────────

def test_list_transactions_filters(hub, server):
    server.routes[("GET", "/transaction")] = httpx.Response(200, json=_page([
        {"id": "t1", "transfer_type": "credit", "amount": "250000", "transaction_content": "DH123"},
    ]))

    result = hub.transactions.list(
        bank_account_id="ba1",
        start_transaction_date="2024-01-01",
        end_transaction_date="2024-01-31 23:59:59",
        transfer_type="credit",
    )

    params = server.business_requests()[-1].url.params
    assert params["bank_account_id"] == "ba1"
    assert params["end_transaction_date"] == "2024-01-31 23:59:59"
    assert params["transfer_type"] == "credit"
    assert "va_id" not in params
    assert isinstance(result.value.data[0], Transaction)


def test_get_transaction(hub, server):
    server.routes[("GET", "/transaction/details/t1")] = httpx.Response(
        200, json={"data": {"id": "t1", "reference_number": "FT123"}},
    )

    assert hub.transactions.get("t1").value.reference_number == "FT123"


def test_transactions_transport_error(hub, server, caplog):
    server.raise_on.add("/transaction")

    result = hub.transactions.list(company_id="c1")

    assert result.kind == ErrorKind.TRANSPORT
    assert "list transactions" in caplog.text
