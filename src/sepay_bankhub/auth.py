"""Access token issuance and caching for the BankHub API.

Tokens are fetched with HTTP Basic auth and cached under one process-wide
key, expiring SAFETY_BUFFER seconds before the upstream TTL runs out.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from sepay_bankhub.config import Config
from sepay_bankhub.models.auth import TokenResponse, TokenStatus
from sepay_bankhub.models.result import Err, ErrorKind, Ok, Result
from sepay_bankhub.utils.cache import MemoryTokenCache, TokenCache

logger = logging.getLogger(__name__)


CACHE_TOKEN_KEY = "bankhub_access_token"

# Evict the cached token this many seconds before the upstream expiry
SAFETY_BUFFER = 60

TOKEN_PATH = "/token/create"


def cache_lifetime(ttl: int) -> int:
    """Cache TTL for a token the server says is valid for ``ttl`` seconds."""
    return max(0, ttl - SAFETY_BUFFER)


class TokenManager:
    """Produces bearer tokens for BankHub calls, reusing cached ones."""

    def __init__(
        self,
        config: Config,
        cache: TokenCache | None = None,
        http: httpx.Client | None = None,
    ) -> None:
        self._config = config
        self._cache = cache if cache is not None else MemoryTokenCache()
        self._owns_http = http is None
        self._http = http or httpx.Client(timeout=config.settings.timeout)

    def get_access_token(self) -> str | None:
        """Return a valid access token, or None if one cannot be obtained."""
        return self.acquire().value

    def acquire(self) -> Result:
        """Return ``Ok(token)`` from cache or a fresh issuance, else ``Err``.

        The cache TTL is trusted as the only validity check. Failures,
        including an unreadable or unwritable cache, are logged here and
        never raised.
        """
        url = self._config.base_url + TOKEN_PATH

        try:
            cached = self._cache.get(CACHE_TOKEN_KEY)
            if cached is not None:
                return Ok(value=cached)

            api_key, api_secret = self._config.credentials
            response = self._http.post(url, auth=httpx.BasicAuth(api_key, api_secret))

            if not response.is_success:
                logger.error(
                    f"Failed to get access token (HTTP {response.status_code}): {response.text}"
                )
                return Err(
                    kind=ErrorKind.AUTHENTICATION,
                    message=f"Token issuance failed (HTTP {response.status_code})",
                    status=response.status_code,
                    body=response.text,
                )

            token = TokenResponse.model_validate(response.json().get("data") or {})
            self._cache.put(CACHE_TOKEN_KEY, token.access_token, cache_lifetime(token.ttl))
        except (httpx.HTTPError, ValueError, ValidationError, AttributeError, OSError) as e:
            logger.error(f"Exception while getting access token: {e}", exc_info=True)
            return Err(kind=ErrorKind.AUTHENTICATION, message=f"Token issuance error: {e}")

        return Ok(value=token.access_token)

    def clear_token_cache(self) -> None:
        """Drop the cached token so the next call re-authenticates."""
        try:
            self._cache.forget(CACHE_TOKEN_KEY)
        except OSError as e:
            logger.error(f"Could not clear token cache: {e}", exc_info=True)

    def get_status(self) -> TokenStatus:
        """Get the current token status."""
        token = self._cache.get(CACHE_TOKEN_KEY)
        remaining = None
        if token is not None and hasattr(self._cache, "remaining"):
            remaining = self._cache.remaining(CACHE_TOKEN_KEY)
        return TokenStatus(
            has_token=token is not None,
            cache_key=CACHE_TOKEN_KEY,
            seconds_remaining=remaining,
        )

    def close(self) -> None:
        """Close the HTTP client if this manager created it."""
        if self._owns_http:
            self._http.close()
