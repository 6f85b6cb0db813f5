"""CLI commands for company management."""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.console import Console

from sepay_bankhub.bankhub import Bankhub
from sepay_bankhub.models.companies import COMPANY_STATUSES
from sepay_bankhub.utils.errors import handle_error
from sepay_bankhub.utils.output import OutputFormat, print_output, print_result

console = Console(stderr=True)
app = typer.Typer(name="companies", help="Manage companies (organisations).")

COLUMNS = ["id", "full_name", "short_name", "status", "created_at"]


def _build_hub(verbose: bool = False) -> Bankhub:
    return Bankhub.from_config(verbose=verbose)


def _parse_settings(pairs: list[str], raw_json: str | None) -> dict[str, object]:
    """Merge ``--json`` and repeated ``--set key=value`` into one dict."""
    settings: dict[str, object] = {}
    if raw_json:
        loaded = json.loads(raw_json)
        if not isinstance(loaded, dict):
            raise typer.BadParameter("--json must be a JSON object")
        settings.update(loaded)
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got '{pair}'")
        settings[key.strip()] = value.strip()
    return settings


@app.command("list")
def list_companies(
    per_page: Annotated[int | None, typer.Option("--per-page", help="Records per page")] = None,
    query: Annotated[str | None, typer.Option("--query", "-q", help="Search keyword")] = None,
    status: Annotated[str | None, typer.Option("--status", "-s", help=f"One of {', '.join(COMPANY_STATUSES)}")] = None,
    sort: Annotated[str | None, typer.Option("--sort", help="Sort by created_at: asc or desc")] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List companies."""
    hub = _build_hub(verbose)
    try:
        result = hub.companies.list(per_page=per_page, query=query, status=status, sort_created_at=sort)
        if not print_result(result, output, columns=COLUMNS, title="Companies"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("show")
def show_company(
    company_id: Annotated[str, typer.Argument(help="Company ID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show one company."""
    hub = _build_hub(verbose)
    try:
        if not print_result(hub.companies.get(company_id), output, title="Company"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("create")
def create_company(
    full_name: Annotated[str, typer.Option("--full-name", help="Full legal name")],
    short_name: Annotated[str, typer.Option("--short-name", help="Short name")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Create a company."""
    hub = _build_hub(verbose)
    try:
        if not print_result(hub.companies.create(full_name, short_name), output, title="Company Created"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("edit")
def edit_company(
    company_id: Annotated[str, typer.Argument(help="Company ID")],
    full_name: Annotated[str, typer.Option("--full-name")],
    short_name: Annotated[str, typer.Option("--short-name")],
    status: Annotated[str, typer.Option("--status", "-s", help=f"One of {', '.join(COMPANY_STATUSES)}")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Edit a company's names and status."""
    if status not in COMPANY_STATUSES:
        console.print(f"[red]Invalid status '{status}'.[/red] Use one of: {', '.join(COMPANY_STATUSES)}")
        raise typer.Exit(2)

    hub = _build_hub(verbose)
    try:
        result = hub.companies.edit(company_id, full_name, short_name, status)
        if not print_result(result, output, title="Company Updated"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("config")
def show_configuration(
    company_id: Annotated[str, typer.Argument(help="Company ID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show a company's payment-code configuration."""
    hub = _build_hub(verbose)
    try:
        result = hub.companies.get_configuration(company_id)
        if not print_result(result, output, title="Company Configuration"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("set-config")
def set_configuration(
    company_id: Annotated[str, typer.Argument(help="Company ID")],
    pairs: Annotated[list[str] | None, typer.Option("--set", help="key=value (repeatable)")] = None,
    raw_json: Annotated[str | None, typer.Option("--json", help="Settings as a JSON object")] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Update a company's configuration."""
    settings = _parse_settings(pairs or [], raw_json)
    if not settings:
        console.print("[red]Nothing to update.[/red] Pass --set key=value or --json.")
        raise typer.Exit(2)

    hub = _build_hub(verbose)
    try:
        result = hub.companies.update_configuration(company_id, settings)
        if not print_result(result, output, title="Configuration Updated"):
            raise typer.Exit(1)
    finally:
        hub.close()


@app.command("counter")
def company_counter(
    company_id: Annotated[str, typer.Argument(help="Company ID")],
    date: Annotated[str | None, typer.Option("--date", "-d", help="Day to count (YYYY-MM-DD)")] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show transaction counters for one company."""
    hub = _build_hub(verbose)
    try:
        result = hub.companies.counter(company_id, date=date)
        if not result.ok:
            handle_error(result)
            raise typer.Exit(1)

        stats = result.value
        if output == OutputFormat.JSON:
            print_output(stats, output)
        else:
            print_output(stats.dates if stats else [], output, title=f"Counter ({company_id})")
    finally:
        hub.close()
