"""CLI commands for merchant-level counters."""

from __future__ import annotations

from typing import Annotated

import typer

from sepay_bankhub.bankhub import Bankhub
from sepay_bankhub.utils.errors import handle_error
from sepay_bankhub.utils.output import OutputFormat, print_output

app = typer.Typer(name="merchant", help="Merchant-wide statistics.")


def _build_hub(verbose: bool = False) -> Bankhub:
    return Bankhub.from_config(verbose=verbose)


@app.command("counter")
def counter(
    date: Annotated[str | None, typer.Option("--date", "-d", help="Day to count (YYYY-MM-DD)")] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show transaction counters for the merchant."""
    hub = _build_hub(verbose)
    try:
        result = hub.merchant.counter(date=date)
        if not result.ok:
            handle_error(result)
            raise typer.Exit(1)

        stats = result.value
        if output == OutputFormat.JSON:
            print_output(stats, output)
        else:
            print_output(stats.dates if stats else [], output, title="Merchant Counter")
    finally:
        hub.close()
