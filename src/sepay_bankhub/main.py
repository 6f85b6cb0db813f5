"""SePay BankHub CLI: entry point.

Operator CLI for companies, bank accounts, virtual accounts and
transactions on the SePay BankHub partner API.
"""

from __future__ import annotations

import logging

import typer

from sepay_bankhub.commands.auth_cmd import app as auth_app
from sepay_bankhub.commands.banks_cmd import app as banks_app
from sepay_bankhub.commands.companies_cmd import app as companies_app
from sepay_bankhub.commands.merchant_cmd import app as merchant_app
from sepay_bankhub.commands.bank_accounts_cmd import app as bank_accounts_app
from sepay_bankhub.commands.vas_cmd import app as vas_app
from sepay_bankhub.commands.transactions_cmd import app as transactions_app

app = typer.Typer(
    name="bankhub",
    help="CLI for the SePay BankHub partner API.",
    no_args_is_help=True,
)

# Register command groups
app.add_typer(auth_app, name="auth")
app.add_typer(banks_app, name="banks")
app.add_typer(companies_app, name="companies")
app.add_typer(merchant_app, name="merchant")
app.add_typer(bank_accounts_app, name="bank-accounts")
app.add_typer(vas_app, name="vas")
app.add_typer(transactions_app, name="transactions")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """SePay BankHub CLI: companies, bank accounts, VAs and transactions."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


if __name__ == "__main__":
    app()
