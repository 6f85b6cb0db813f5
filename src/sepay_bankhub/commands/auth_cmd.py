"""CLI commands for access token management."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from sepay_bankhub.bankhub import Bankhub
from sepay_bankhub.utils.errors import handle_error
from sepay_bankhub.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="auth", help="Manage the cached access token.")


def _build_hub() -> Bankhub:
    return Bankhub.from_config()


@app.command()
def token(
    show: Annotated[bool, typer.Option("--show", help="Print the raw bearer token")] = False,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """Obtain an access token (from cache or a fresh issuance)."""
    hub = _build_hub()
    try:
        console.print("Authenticating...", style="yellow")
        result = hub.auth.acquire()
        if not result.ok:
            handle_error(result)
            raise typer.Exit(1)

        status = hub.auth.get_status()
        info = {
            "status": "authenticated",
            "seconds_remaining": status.seconds_remaining,
        }
        if show:
            info["access_token"] = result.value
        print_output(info, output, title="Authentication")
    finally:
        hub.close()


@app.command()
def status(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """Show whether a token is cached."""
    hub = _build_hub()
    try:
        token_status = hub.auth.get_status()
        result = {
            "has_token": token_status.has_token,
            "cache_key": token_status.cache_key,
            "seconds_remaining": token_status.seconds_remaining or 0,
        }
        print_output(result, output, title="Token Status")
    finally:
        hub.close()


@app.command()
def clear() -> None:
    """Evict the cached token so the next call re-authenticates."""
    hub = _build_hub()
    try:
        hub.clear_token_cache()
        console.print("[green]Token cache cleared.[/green]")
    finally:
        hub.close()
