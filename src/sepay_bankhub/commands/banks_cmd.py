"""CLI commands for the bank catalog."""

from __future__ import annotations

from typing import Annotated

import typer

from sepay_bankhub.bankhub import Bankhub
from sepay_bankhub.utils.output import OutputFormat, print_result

app = typer.Typer(name="banks", help="List banks supported by BankHub.")


def _build_hub(verbose: bool = False) -> Bankhub:
    return Bankhub.from_config(verbose=verbose)


@app.command("list")
def list_banks(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List supported banks."""
    hub = _build_hub(verbose)
    try:
        columns = ["id", "short_name", "brand_name", "code", "bin", "active"]
        if not print_result(hub.banks.list(), output, columns=columns, title="Banks"):
            raise typer.Exit(1)
    finally:
        hub.close()
