"""Tagged outcome returned by every BankHub operation."""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


class ErrorKind(str, Enum):
    AUTHENTICATION = "AUTHENTICATION"  # token issuance failed or raised
    MISSING_TOKEN = "MISSING_TOKEN"  # operation skipped, no token available
    UPSTREAM = "UPSTREAM"  # business endpoint returned a non-2xx status
    TRANSPORT = "TRANSPORT"  # network, timeout or decoding fault


class Ok(BaseModel, Generic[T]):
    """Successful call carrying the decoded payload."""
    value: T

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    @property
    def ok(self) -> bool:
        return True

    def unwrap_or(self, default: Any) -> T:
        return self.value


class Err(BaseModel):
    """Failed call. ``status`` and ``body`` are set when the upstream answered."""
    kind: ErrorKind
    message: str = ""
    status: int | None = None
    body: str | None = None

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None

    def unwrap_or(self, default: Any) -> Any:
        return default


Result = Union[Ok[Any], Err]
