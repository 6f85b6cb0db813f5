"""CLI commands for transaction history."""

from __future__ import annotations

from typing import Annotated

import typer

from sepay_bankhub.bankhub import Bankhub
from sepay_bankhub.utils.output import OutputFormat, print_result

app = typer.Typer(name="transactions", help="Query transaction history.")

COLUMNS = [
    "id", "transaction_date", "account_number", "transfer_type",
    "amount", "va", "payment_code", "transaction_content",
]


def _build_hub(verbose: bool = False) -> Bankhub:
    return Bankhub.from_config(verbose=verbose)


@app.command("list")
def list_transactions(
    per_page: Annotated[int | None, typer.Option("--per-page", help="Records per page")] = None,
    query: Annotated[str | None, typer.Option("--query", "-q", help="Search keyword")] = None,
    company_id: Annotated[str | None, typer.Option("--company-id", help="Filter by company")] = None,
    bank_id: Annotated[str | None, typer.Option("--bank-id", help="Filter by bank")] = None,
    bank_account_id: Annotated[str | None, typer.Option("--bank-account-id", help="Filter by bank account")] = None,
    date: Annotated[str | None, typer.Option("--date", help="Transaction date (Y-m-d or Y-m-d H:i:s)")] = None,
    start: Annotated[str | None, typer.Option("--from", help="Start of date range")] = None,
    end: Annotated[str | None, typer.Option("--to", help="End of date range")] = None,
    transfer_type: Annotated[str | None, typer.Option("--type", help="credit or debit")] = None,
    va_id: Annotated[str | None, typer.Option("--va-id", help="Filter by VA")] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List transactions."""
    hub = _build_hub(verbose)
    try:
        result = hub.transactions.list(
            per_page=per_page,
            query=query,
            company_id=company_id,
            bank_id=bank_id,
            bank_account_id=bank_account_id,
            transaction_date=date,
            start_transaction_date=start,
            end_transaction_date=end,
            transfer_type=transfer_type,
            va_id=va_id,
        )
        if not print_result(result, output, columns=COLUMNS, title="Transactions"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("show")
def show_transaction(
    transaction_id: Annotated[str, typer.Argument(help="Transaction ID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show one transaction."""
    hub = _build_hub(verbose)
    try:
        if not print_result(hub.transactions.get(transaction_id), output, title="Transaction"):
            raise typer.Exit(1)
    finally:
        hub.close()
