"""Structured error reporting for failed BankHub operations."""

from __future__ import annotations

import json
import sys

from rich.console import Console

from sepay_bankhub.models.result import Err, ErrorKind

console = Console(stderr=True)

_AUTH_HINT = "Check SEPAY_BANKHUB_API_KEY / SEPAY_BANKHUB_API_SECRET, then run `bankhub auth clear`"

# Actionable hints keyed by HTTP status
_STATUS_HINTS: dict[int, str] = {
    400: "Bad request: check parameter values and formats",
    401: _AUTH_HINT,
    403: "Forbidden: the API key may not have access to this company or bank",
    404: "Not found: verify the ID",
    409: "Conflict: the resource already exists or is in another state",
    422: "Validation failed: see the response body for the offending fields",
    429: "Rate limited: wait a moment and retry",
}

# Hints keyed by message substring
_MESSAGE_HINTS: list[tuple[str, str]] = [
    ("otp", "OTP rejected: request a new code and confirm with the new request id"),
    ("request_id", "Confirm calls need the request id returned by the matching request call"),
    ("timeout", "Request timed out: try again or raise SEPAY_BANKHUB_TIMEOUT"),
    ("timed out", "Request timed out: try again or raise SEPAY_BANKHUB_TIMEOUT"),
    ("connect", "Connection error: check network connectivity and SEPAY_BANKHUB_API_URL"),
]


def _get_hint(err: Err) -> str | None:
    """Match a failure to an actionable hint."""
    if err.kind in (ErrorKind.AUTHENTICATION, ErrorKind.MISSING_TOKEN):
        return _AUTH_HINT

    text = f"{err.message} {err.body or ''}".lower()
    for pattern, hint in _MESSAGE_HINTS:
        if pattern in text:
            return hint

    if err.status is not None:
        if err.status in _STATUS_HINTS:
            return _STATUS_HINTS[err.status]
        if err.status >= 500:
            return "BankHub server error: try again later"
    return None


def handle_error(err: Err) -> None:
    """Report a failure as JSON on stdout and a readable line on stderr.

    Outputs a JSON error object to stdout for scripts:
    {"error": true, "code": "UPSTREAM", "status": 422, "message": "...", "hint": "..."}
    """
    hint = _get_hint(err)

    error_obj: dict[str, object] = {
        "error": True,
        "code": err.kind.value,
        "message": err.message,
    }
    if err.status is not None:
        error_obj["status"] = err.status
    if err.body:
        error_obj["body"] = err.body
    if hint:
        error_obj["hint"] = hint

    json.dump(error_obj, sys.stdout)
    sys.stdout.write("\n")

    # Human-readable to stderr
    status = f" (HTTP {err.status})" if err.status is not None else ""
    console.print(f"[red]Error:[/red] {err.message}{status}")
    if hint:
        console.print(f"[dim]Hint: {hint}[/dim]")
