"""CLI tests for the bank-accounts and vas command groups."""
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from sepay_bankhub.main import app
from sepay_bankhub.models.bank_accounts import RequestTicket
from sepay_bankhub.models.envelopes import ApiResponse
from sepay_bankhub.models.result import Err, ErrorKind, Ok
from sepay_bankhub.services.acb import AcbService
from sepay_bankhub.services.klb import KlbService
from sepay_bankhub.services.mb import MbService
from sepay_bankhub.services.ocb import OcbService

runner = CliRunner()


def _hub():
    """Hub whose brand services only expose their real operations."""
    hub = MagicMock()
    hub.acb = MagicMock(spec=AcbService)
    hub.mb = MagicMock(spec=MbService)
    hub.ocb = MagicMock(spec=OcbService)
    hub.klb = MagicMock(spec=KlbService)
    return hub


def _patch(module, hub):
    return patch(f"sepay_bankhub.commands.{module}._build_hub", return_value=hub)


# ── bank-accounts ────────────────────────────────────────────────────

def test_list_bank_accounts_filters():
    hub = _hub()
    hub.bank_accounts.list.return_value = Ok(value=[])

    with _patch("bank_accounts_cmd", hub):
        result = runner.invoke(app, ["bank-accounts", "list", "--per-page", "20", "--company-id", "c1"])

    assert result.exit_code == 0
    hub.bank_accounts.list.assert_called_once_with(
        per_page=20, query=None, company_id="c1", bank_id=None,
    )


def test_create_acb_requires_holder_and_phone():
    hub = _hub()
    with _patch("bank_accounts_cmd", hub):
        result = runner.invoke(app, [
            "bank-accounts", "create", "--bank", "acb", "--company-id", "c1", "--account-number", "0123",
        ])

    assert result.exit_code == 2
    assert "--holder-name" in result.output
    hub.acb.create_bank_account.assert_not_called()


def test_create_acb_otp_required():
    hub = _hub()
    hub.acb.create_bank_account.return_value = Ok(value=ApiResponse(code=2011, message="OTP sent"))

    with _patch("bank_accounts_cmd", hub):
        result = runner.invoke(app, [
            "bank-accounts", "create", "--bank", "acb", "--company-id", "c1",
            "--account-number", "0123", "--holder-name", "NGUYEN VAN A", "--phone", "0900",
            "-o", "json",
        ])

    assert result.exit_code == 0
    hub.acb.create_bank_account.assert_called_once_with("c1", "NGUYEN VAN A", "0123", "0900", None)
    assert "2011" in result.output


def test_create_klb_needs_only_account_number():
    hub = _hub()
    hub.klb.create_bank_account.return_value = Ok(value=ApiResponse(code=2011))

    with _patch("bank_accounts_cmd", hub):
        result = runner.invoke(app, [
            "bank-accounts", "create", "-b", "klb", "--company-id", "c1", "--account-number", "0123",
        ])

    assert result.exit_code == 0
    hub.klb.create_bank_account.assert_called_once_with("c1", "0123", None)


def test_link_request_and_confirm():
    hub = _hub()
    hub.mb.request_api_connection.return_value = Ok(value=RequestTicket(request_id="req-1"))
    hub.mb.confirm_api_connection.return_value = Ok(value=ApiResponse(code=200, message="linked"))

    with _patch("bank_accounts_cmd", hub):
        first = runner.invoke(app, ["bank-accounts", "link-request", "-b", "mb", "ba1", "-o", "json"])
        second = runner.invoke(app, [
            "bank-accounts", "link-confirm", "-b", "mb", "--request-id", "req-1", "--otp", "12345678",
        ])

    assert first.exit_code == 0
    assert "req-1" in first.output
    assert second.exit_code == 0
    hub.mb.confirm_api_connection.assert_called_once_with("req-1", "12345678")


def test_link_confirm_rejected():
    hub = _hub()
    hub.acb.confirm_api_connection.return_value = Err(
        kind=ErrorKind.UPSTREAM, message="Failed to confirm ACB API connection (HTTP 400)",
        status=400, body="invalid otp",
    )

    with _patch("bank_accounts_cmd", hub):
        result = runner.invoke(app, [
            "bank-accounts", "link-confirm", "-b", "acb", "--request-id", "r1", "--otp", "0",
        ])

    assert result.exit_code == 1
    assert "OTP rejected" in result.output


def test_unlink_unsupported_for_klb():
    hub = _hub()
    with _patch("bank_accounts_cmd", hub):
        result = runner.invoke(app, ["bank-accounts", "unlink-request", "-b", "klb", "ba1"])

    assert result.exit_code == 2
    assert "does not support" in result.output
    hub.close.assert_called_once()


def test_link_unsupported_for_ocb():
    hub = _hub()
    with _patch("bank_accounts_cmd", hub):
        result = runner.invoke(app, ["bank-accounts", "link-request", "-b", "ocb", "ba1"])

    assert result.exit_code == 2


def test_edit_defaults_to_ocb():
    hub = _hub()
    hub.ocb.edit_bank_account.return_value = Ok(value=ApiResponse(code=200))

    with _patch("bank_accounts_cmd", hub):
        result = runner.invoke(app, ["bank-accounts", "edit", "ba5", "--phone", "0911"])

    assert result.exit_code == 0
    hub.ocb.edit_bank_account.assert_called_once_with(
        "ba5", identification_number=None, phone_number="0911",
    )


def test_force_delete_aborts_without_confirmation():
    hub = _hub()
    with _patch("bank_accounts_cmd", hub):
        result = runner.invoke(app, ["bank-accounts", "force-delete", "-b", "acb", "ba1"], input="n\n")

    assert result.exit_code == 1
    hub.acb.force_delete.assert_not_called()


def test_force_delete_with_yes():
    hub = _hub()
    hub.mb.force_delete.return_value = Ok(value=ApiResponse(code=200))

    with _patch("bank_accounts_cmd", hub):
        result = runner.invoke(app, ["bank-accounts", "force-delete", "-b", "mb", "ba1", "--yes"])

    assert result.exit_code == 0
    hub.mb.force_delete.assert_called_once_with("ba1")


# ── vas ──────────────────────────────────────────────────────────────

def test_list_vas_routes_by_bank():
    hub = _hub()
    hub.klb.list_vas.return_value = Ok(value=[])

    with _patch("vas_cmd", hub):
        result = runner.invoke(app, ["vas", "list", "-b", "klb", "--bank-account-id", "ba1"])

    assert result.exit_code == 0
    hub.klb.list_vas.assert_called_once_with(
        per_page=None, query=None, company_id=None, bank_account_id="ba1",
    )
    hub.ocb.list_vas.assert_not_called()


def test_ocb_va_request_create():
    hub = _hub()
    hub.ocb.request_va_create.return_value = Ok(value=RequestTicket(request_id="va-req"))

    with _patch("vas_cmd", hub):
        result = runner.invoke(app, [
            "vas", "request-create", "--bank-account-id", "ba5", "--company-id", "c1",
            "--merchant-name", "Shop", "--email", "a@b.vn", "--merchant-address", "Hanoi",
            "--va", "SHOP01", "-o", "json",
        ])

    assert result.exit_code == 0
    assert "va-req" in result.output


def test_klb_disable_failure():
    hub = _hub()
    hub.klb.disable_va.return_value = Err(kind=ErrorKind.TRANSPORT, message="Error during disable KLB VA: connection refused")

    with _patch("vas_cmd", hub):
        result = runner.invoke(app, ["vas", "disable", "va9"])

    assert result.exit_code == 1
    assert "TRANSPORT" in result.output
