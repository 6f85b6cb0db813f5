"""CLI commands for virtual accounts (OCB, KLB)."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

import typer

from sepay_bankhub.bankhub import Bankhub
from sepay_bankhub.utils.output import OutputFormat, print_result

app = typer.Typer(name="vas", help="Manage virtual accounts.")

COLUMNS = ["id", "va", "label", "bank_account_id", "company_id", "active", "created_at"]


class VaBrand(str, Enum):
    OCB = "ocb"
    KLB = "klb"


def _build_hub(verbose: bool = False) -> Bankhub:
    return Bankhub.from_config(verbose=verbose)


BankOpt = Annotated[VaBrand, typer.Option("--bank", "-b", help="Bank brand")]
OutputOpt = Annotated[OutputFormat, typer.Option("--output", "-o")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v")]


@app.command("list")
def list_vas(
    bank: BankOpt,
    per_page: Annotated[int | None, typer.Option("--per-page", help="Records per page")] = None,
    query: Annotated[str | None, typer.Option("--query", "-q", help="Search keyword")] = None,
    company_id: Annotated[str | None, typer.Option("--company-id", help="Filter by company")] = None,
    bank_account_id: Annotated[str | None, typer.Option("--bank-account-id", help="Filter by bank account")] = None,
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """List a bank's virtual accounts."""
    hub = _build_hub(verbose)
    try:
        service = hub.ocb if bank == VaBrand.OCB else hub.klb
        result = service.list_vas(
            per_page=per_page, query=query, company_id=company_id, bank_account_id=bank_account_id,
        )
        if not print_result(result, output, columns=COLUMNS, title=f"{bank.value.upper()} VAs"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("show")
def show_va(
    bank: BankOpt,
    va_id: Annotated[str, typer.Argument(help="VA ID")],
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """Show one virtual account."""
    hub = _build_hub(verbose)
    try:
        service = hub.ocb if bank == VaBrand.OCB else hub.klb
        if not print_result(service.get_va(va_id), output, title="Virtual Account"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("request-create")
def request_create(
    bank_account_id: Annotated[str, typer.Option("--bank-account-id")],
    company_id: Annotated[str, typer.Option("--company-id")],
    merchant_name: Annotated[str, typer.Option("--merchant-name")],
    email: Annotated[str, typer.Option("--email")],
    merchant_address: Annotated[str, typer.Option("--merchant-address")],
    va: Annotated[str, typer.Option("--va", help="Requested VA number")],
    label: Annotated[str | None, typer.Option("--label")] = None,
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """Request an OCB VA; prints the request id to confirm with."""
    hub = _build_hub(verbose)
    try:
        result = hub.ocb.request_va_create(
            bank_account_id, company_id, merchant_name, email, merchant_address, va, label,
        )
        if not print_result(result, output, title="VA Requested"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("confirm-create")
def confirm_create(
    request_id: Annotated[str, typer.Option("--request-id", help="Request id from request-create")],
    otp: Annotated[str, typer.Option("--otp", help="One-time code sent by the bank")],
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """Confirm an OCB VA request with the OTP."""
    hub = _build_hub(verbose)
    try:
        if not print_result(hub.ocb.confirm_va_create(request_id, otp), output, title="VA Created"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("create")
def create_va(
    bank_account_id: Annotated[str, typer.Option("--bank-account-id")],
    company_id: Annotated[str, typer.Option("--company-id")],
    label: Annotated[str | None, typer.Option("--label")] = None,
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """Create a KLB VA directly."""
    hub = _build_hub(verbose)
    try:
        if not print_result(hub.klb.create_va(bank_account_id, company_id, label), output, title="VA Created"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("enable")
def enable_va(
    va_id: Annotated[str, typer.Argument(help="VA ID")],
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """Re-enable a KLB VA."""
    hub = _build_hub(verbose)
    try:
        if not print_result(hub.klb.enable_va(va_id), output, title="VA Enabled"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("disable")
def disable_va(
    va_id: Annotated[str, typer.Argument(help="VA ID")],
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """Disable a KLB VA."""
    hub = _build_hub(verbose)
    try:
        if not print_result(hub.klb.disable_va(va_id), output, title="VA Disabled"):
            raise typer.Exit(1)
    finally:
        hub.close()
