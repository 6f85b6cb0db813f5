"""CLI commands for bank accounts and the OTP linking flow."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

import typer
from rich.console import Console

from sepay_bankhub.bankhub import Bankhub
from sepay_bankhub.utils.output import OutputFormat, print_result

console = Console(stderr=True)
app = typer.Typer(name="bank-accounts", help="Manage and link bank accounts.")

COLUMNS = [
    "id", "bank_id", "account_number", "account_holder_name",
    "label", "bank_api_connected", "last_transaction",
]


class BankBrand(str, Enum):
    ACB = "acb"
    MB = "mb"
    OCB = "ocb"
    KLB = "klb"


def _build_hub(verbose: bool = False) -> Bankhub:
    return Bankhub.from_config(verbose=verbose)


def _brand_method(hub: Bankhub, bank: BankBrand, name: str) -> Any:
    """Resolve ``hub.<bank>.<name>``, exiting if that bank lacks the operation."""
    service = getattr(hub, bank.value)
    method = getattr(service, name, None)
    if method is None:
        console.print(f"[red]{bank.value.upper()} does not support '{name}'.[/red]")
        raise typer.Exit(2)
    return method


def _require(bank: BankBrand, **values: Any) -> None:
    missing = [f"--{k.replace('_', '-')}" for k, v in values.items() if v is None]
    if missing:
        console.print(f"[red]{bank.value.upper()} requires {', '.join(missing)}[/red]")
        raise typer.Exit(2)


BankOpt = Annotated[BankBrand, typer.Option("--bank", "-b", help="Bank brand")]
OutputOpt = Annotated[OutputFormat, typer.Option("--output", "-o")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v")]


@app.command("list")
def list_bank_accounts(
    per_page: Annotated[int | None, typer.Option("--per-page", help="Records per page")] = None,
    query: Annotated[str | None, typer.Option("--query", "-q", help="Search keyword")] = None,
    company_id: Annotated[str | None, typer.Option("--company-id", help="Filter by company")] = None,
    bank_id: Annotated[str | None, typer.Option("--bank-id", help="Filter by bank")] = None,
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """List bank accounts across all banks."""
    hub = _build_hub(verbose)
    try:
        result = hub.bank_accounts.list(
            per_page=per_page, query=query, company_id=company_id, bank_id=bank_id,
        )
        if not print_result(result, output, columns=COLUMNS, title="Bank Accounts"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("show")
def show_bank_account(
    bank_account_id: Annotated[str, typer.Argument(help="Bank account ID")],
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """Show one bank account."""
    hub = _build_hub(verbose)
    try:
        if not print_result(hub.bank_accounts.get(bank_account_id), output, title="Bank Account"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("create")
def create_bank_account(
    bank: BankOpt,
    company_id: Annotated[str, typer.Option("--company-id", help="Owning company")],
    account_number: Annotated[str, typer.Option("--account-number", help="Account number")],
    holder_name: Annotated[str | None, typer.Option("--holder-name", help="Account holder name")] = None,
    identification_number: Annotated[str | None, typer.Option("--identification-number", help="National ID")] = None,
    phone: Annotated[str | None, typer.Option("--phone", help="Registered phone number")] = None,
    label: Annotated[str | None, typer.Option("--label", help="Display label")] = None,
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """Add a bank account. ACB, MB and KLB answer 2011 when an OTP must be confirmed."""
    if bank == BankBrand.ACB:
        _require(bank, holder_name=holder_name, phone=phone)
    elif bank == BankBrand.MB:
        _require(bank, holder_name=holder_name, identification_number=identification_number, phone=phone)
    elif bank == BankBrand.OCB:
        _require(
            bank, holder_name=holder_name, identification_number=identification_number,
            phone=phone, label=label,
        )

    hub = _build_hub(verbose)
    try:
        if bank == BankBrand.ACB:
            result = hub.acb.create_bank_account(company_id, holder_name, account_number, phone, label)
        elif bank == BankBrand.MB:
            result = hub.mb.create_bank_account(
                company_id, holder_name, account_number, identification_number, phone, label,
            )
        elif bank == BankBrand.OCB:
            result = hub.ocb.create_bank_account(
                company_id, holder_name, account_number, identification_number, phone, label,
            )
        else:
            result = hub.klb.create_bank_account(company_id, account_number, label)

        if not print_result(result, output, title=f"{bank.value.upper()} Bank Account"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("edit")
def edit_bank_account(
    bank_account_id: Annotated[str, typer.Argument(help="Bank account ID")],
    bank: BankOpt = BankBrand.OCB,
    identification_number: Annotated[str | None, typer.Option("--identification-number")] = None,
    phone: Annotated[str | None, typer.Option("--phone")] = None,
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """Edit identification or phone number (OCB only)."""
    hub = _build_hub(verbose)
    try:
        edit = _brand_method(hub, bank, "edit_bank_account")
        result = edit(bank_account_id, identification_number=identification_number, phone_number=phone)
        if not print_result(result, output, title="Bank Account Updated"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("lookup")
def lookup_holder_name(
    bank: BankOpt,
    account_number: Annotated[str, typer.Argument(help="Account number")],
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """Look up the account holder name for an account number."""
    hub = _build_hub(verbose)
    try:
        lookup = _brand_method(hub, bank, "lookup_account_holder_name")
        if not print_result(lookup(account_number), output, title="Account Holder"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("link-request")
def link_request(
    bank: BankOpt,
    bank_account_id: Annotated[str, typer.Argument(help="Bank account ID")],
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """Request API linking; prints the request id to confirm with."""
    hub = _build_hub(verbose)
    try:
        request = _brand_method(hub, bank, "request_api_connection")
        if not print_result(request(bank_account_id), output, title="Link Requested"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("link-confirm")
def link_confirm(
    bank: BankOpt,
    request_id: Annotated[str, typer.Option("--request-id", help="Request id from link-request or create")],
    otp: Annotated[str, typer.Option("--otp", help="One-time code sent by the bank")],
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """Confirm API linking with the OTP."""
    hub = _build_hub(verbose)
    try:
        confirm = _brand_method(hub, bank, "confirm_api_connection")
        if not print_result(confirm(request_id, otp), output, title="Link Confirmed"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("unlink-request")
def unlink_request(
    bank: BankOpt,
    bank_account_id: Annotated[str, typer.Argument(help="Bank account ID")],
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """Request removal of a linked account (ACB, MB)."""
    hub = _build_hub(verbose)
    try:
        request = _brand_method(hub, bank, "request_delete")
        if not print_result(request(bank_account_id), output, title="Unlink Requested"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("unlink-confirm")
def unlink_confirm(
    bank: BankOpt,
    request_id: Annotated[str, typer.Option("--request-id", help="Request id from unlink-request")],
    otp: Annotated[str, typer.Option("--otp", help="One-time code sent by the bank")],
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """Confirm removal with the OTP (ACB, MB)."""
    hub = _build_hub(verbose)
    try:
        confirm = _brand_method(hub, bank, "confirm_delete")
        if not print_result(confirm(request_id, otp), output, title="Unlink Confirmed"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("force-delete")
def force_delete(
    bank: BankOpt,
    bank_account_id: Annotated[str, typer.Argument(help="Bank account ID")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
    output: OutputOpt = OutputFormat.TABLE,
    verbose: VerboseOpt = False,
) -> None:
    """Delete an account that was never API-linked."""
    if not yes:
        typer.confirm(f"Force delete {bank.value.upper()} bank account {bank_account_id}?", abort=True)

    hub = _build_hub(verbose)
    try:
        delete = _brand_method(hub, bank, "force_delete")
        if not print_result(delete(bank_account_id), output, title="Bank Account Deleted"):
            raise typer.Exit(1)
    finally:
        hub.close()
