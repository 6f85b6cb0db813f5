"""Output formatting for BankHub CLI results."""

from __future__ import annotations

import csv
import json
import sys
from enum import Enum
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from sepay_bankhub.models.envelopes import Page

console = Console(stderr=True)


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"
    CSV = "csv"


def to_plain(data: Any) -> Any:
    """Convert models (and lists of models) to JSON-ready dicts."""
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, list):
        return [to_plain(item) for item in data]
    return data


def print_output(
    data: Any,
    fmt: OutputFormat = OutputFormat.TABLE,
    columns: list[str] | None = None,
    title: str | None = None,
) -> None:
    """Print an operation's value in the requested format.

    Args:
        data: A model, a ``Page``, a list of models, or plain dicts.
        fmt: Output format (table, json, csv).
        columns: Which columns to show in table/csv mode. None = all.
        title: Optional title for table output.
    """
    if fmt == OutputFormat.JSON:
        print_json(to_plain(data))
        return

    rows = data.data if isinstance(data, Page) else data
    rows = to_plain(rows)

    if fmt == OutputFormat.CSV:
        print_csv(rows, columns)
    else:
        print_table(rows, columns, title)
        if isinstance(data, Page):
            meta = data.meta
            console.print(
                f"[dim]Page {meta.current_page}/{meta.page_count} · "
                f"{meta.total} total · has_more={meta.has_more}[/dim]"
            )


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    json.dump(data, sys.stdout, indent=2, default=str, ensure_ascii=False)
    sys.stdout.write("\n")


def print_table(
    data: list[dict[str, Any]] | dict[str, Any] | None,
    columns: list[str] | None = None,
    title: str | None = None,
) -> None:
    """Print data as a Rich table."""
    if isinstance(data, dict):
        data = [data]

    if not data:
        console.print("[dim]No results.[/dim]")
        return

    # Auto-detect columns from first row if not specified
    if columns is None:
        columns = list(data[0].keys())

    table = Table(title=title, show_lines=False)
    for col in columns:
        table.add_column(col, overflow="fold")

    for row in data:
        table.add_row(*["" if row.get(col) is None else str(row[col]) for col in columns])

    console.print(table)


def print_csv(
    data: list[dict[str, Any]] | dict[str, Any] | None,
    columns: list[str] | None = None,
) -> None:
    """Print data as CSV to stdout."""
    if isinstance(data, dict):
        data = [data]

    if not data:
        return

    if columns is None:
        columns = list(data[0].keys())

    writer = csv.DictWriter(sys.stdout, fieldnames=columns, extrasaction="ignore")
    writer.writeheader()
    for row in data:
        writer.writerow({k: row.get(k, "") for k in columns})


def print_result(
    result: Any,
    fmt: OutputFormat = OutputFormat.TABLE,
    columns: list[str] | None = None,
    title: str | None = None,
) -> bool:
    """Print an ``Ok`` value, or report an ``Err``. Returns ``result.ok``."""
    from sepay_bankhub.utils.errors import handle_error

    if not result.ok:
        handle_error(result)
        return False
    print_output(result.value, fmt, columns=columns, title=title)
    return True
