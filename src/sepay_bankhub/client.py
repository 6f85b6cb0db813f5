"""Authenticated request pipeline shared by every BankHub operation.

Handles token lookup, header injection, query building, response decoding
and the uniform never-raise failure contract.
"""

from __future__ import annotations

import logging
import uuid
from enum import Enum
from typing import Any, Mapping

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from sepay_bankhub.auth import TokenManager
from sepay_bankhub.config import Config
from sepay_bankhub.models.envelopes import ApiResponse, Page
from sepay_bankhub.models.result import Err, ErrorKind, Ok, Result

logger = logging.getLogger(__name__)


class ResponseShape(str, Enum):
    DATA = "data"  # body["data"], validated into the operation's model
    PAGE = "page"  # {data: [...], meta: {...}}
    BARE = "bare"  # whole body as ApiResponse


def build_query(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Drop unset filters and stringify the rest."""
    if not params:
        return {}
    query: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[key] = "1" if value else "0"
        else:
            query[key] = str(value)
    return query


def format_context(context: Mapping[str, Any] | None) -> str:
    """Render business identifiers as ``key=value`` pairs for log lines."""
    if not context:
        return ""
    pairs = " ".join(f"{k}={v}" for k, v in context.items() if v is not None)
    return f" [{pairs}]" if pairs else ""


class BankhubClient:
    """HTTP client for the BankHub API with token and error handling."""

    def __init__(
        self,
        config: Config,
        auth: TokenManager,
        http: httpx.Client | None = None,
        verbose: bool = False,
    ) -> None:
        self._config = config
        self._auth = auth
        self._verbose = verbose
        self._owns_http = http is None
        self._http = http or httpx.Client(timeout=config.settings.timeout)

    def call(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: BaseModel | dict[str, Any] | None = None,
        request_id: str | None = None,
        context: Mapping[str, Any] | None = None,
        shape: ResponseShape = ResponseShape.DATA,
        model: Any = None,
        default: Any = None,
    ) -> Result:
        """Run one authenticated BankHub operation.

        Args:
            operation: Human name used in log lines (e.g. "create company").
            method: HTTP method (GET or POST).
            path: API path appended to the configured base URL.
            params: Query filters; None values are omitted.
            body: JSON body, a pydantic payload (dumped without None fields) or dict.
            request_id: Value for the Request-Id header of OTP confirm calls.
            context: Caller-supplied identifiers included in failure logs.
            shape: How to decode a successful response.
            model: Pydantic type (or ``list[Model]``) to validate DATA/PAGE payloads.
            default: DATA value returned when the body has no ``data``.

        Returns:
            ``Ok(value)`` or ``Err(kind, status, body)``. Never raises.
        """
        suffix = format_context(context)

        token_result = self._auth.acquire()
        if not token_result.ok:
            logger.error(f"Cannot {operation} without access token{suffix}")
            return Err(
                kind=ErrorKind.MISSING_TOKEN,
                message=f"Cannot {operation} without access token",
                status=token_result.status,
                body=token_result.body,
            )

        url = self._config.base_url + path

        try:
            headers = self._build_headers(token_result.value, request_id)
            payload = body.model_dump(exclude_none=True) if isinstance(body, BaseModel) else body

            if self._verbose:
                logger.info(f"{method} {url} params={build_query(params)}")

            response = self._http.request(
                method=method,
                url=url,
                headers=headers,
                params=build_query(params),
                json=payload,
            )

            if self._verbose:
                logger.info(f"Response: {response.status_code}")

            if not response.is_success:
                logger.error(
                    f"Failed to {operation} (HTTP {response.status_code}): {response.text}{suffix}"
                )
                if response.status_code == 401:
                    logger.warning("Got 401, evicting cached access token")
                    self._auth.clear_token_cache()
                return Err(
                    kind=ErrorKind.UPSTREAM,
                    message=f"Failed to {operation} (HTTP {response.status_code})",
                    status=response.status_code,
                    body=response.text,
                )

            value = self._decode(response, shape, model, default)
        except (httpx.HTTPError, ValueError, ValidationError, TypeError, OSError) as e:
            logger.error(f"Exception while trying to {operation}: {e}{suffix}", exc_info=True)
            return Err(kind=ErrorKind.TRANSPORT, message=f"Error during {operation}: {e}")

        return Ok(value=value)

    def get(self, operation: str, path: str, **kwargs: Any) -> Result:
        """Convenience method for GET operations."""
        return self.call(operation, "GET", path, **kwargs)

    def post(self, operation: str, path: str, **kwargs: Any) -> Result:
        """Convenience method for POST operations."""
        return self.call(operation, "POST", path, **kwargs)

    def _build_headers(self, token: str, request_id: str | None = None) -> dict[str, str]:
        """Build request headers with auth and a fresh correlation id."""
        headers = {
            "Authorization": f"Bearer {token}",
            "Client-Message-Id": str(uuid.uuid4()),
            "Accept": "application/json",
        }
        if request_id is not None:
            headers["Request-Id"] = request_id
        return headers

    @staticmethod
    def _decode(response: httpx.Response, shape: ResponseShape, model: Any, default: Any) -> Any:
        """Validate a successful response body against its declared shape."""
        payload = response.json()

        if shape == ResponseShape.BARE:
            return ApiResponse.model_validate(payload)

        if not isinstance(payload, dict):
            raise TypeError(f"Expected a JSON object, got {type(payload).__name__}")

        if shape == ResponseShape.PAGE:
            page_type = Page[model] if model is not None else Page[dict[str, Any]]
            return page_type.model_validate(payload)

        data = payload.get("data")
        if data is None:
            return default
        if model is None:
            return data
        return TypeAdapter(model).validate_python(data)

    def close(self) -> None:
        """Close the HTTP client if this client created it, then the token manager."""
        if self._owns_http:
            self._http.close()
        self._auth.close()
