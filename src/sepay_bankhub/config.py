"""Configuration management for the SePay BankHub client.

Loads credentials from .env and optional non-secret defaults from
config/bankhub.yaml. Environment variables always win over the file.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from dotenv import load_dotenv


DEFAULT_API_URL = "https://partner-api.sepay.vn/merchant/v1"


class Settings(BaseModel):
    """Application settings loaded from environment variables."""
    api_key: str = Field(description="BankHub API key (HTTP Basic username)")
    api_secret: str = Field(description="BankHub API secret (HTTP Basic password)")
    api_url: str = Field(default=DEFAULT_API_URL, description="BankHub API base URL")
    ipn_token: str = Field(default="", description="IPN verification token (not used by the client)")
    timeout: float = Field(default=30.0, description="HTTP timeout in seconds")
    token_cache: str = Field(default="memory", description="Token cache backend: memory or file")
    token_cache_path: str = Field(default="./data/token_cache.json", description="Token cache file")


class Config(BaseModel):
    """Full application configuration."""
    settings: Settings

    @property
    def base_url(self) -> str:
        """API base URL without a trailing slash."""
        return self.settings.api_url.rstrip("/")

    @property
    def credentials(self) -> tuple[str, str]:
        """(api_key, api_secret) pair for HTTP Basic token issuance."""
        return self.settings.api_key, self.settings.api_secret


def _find_project_root() -> Path:
    """Walk up from the cwd to find the project root (where config/ lives)."""
    current = Path.cwd().resolve()
    for parent in [current, *current.parents]:
        if (parent / "config" / "bankhub.yaml").exists():
            return parent
    # Fallback: cwd
    return current


def _load_file_settings(project_root: Path) -> dict[str, Any]:
    """Load non-secret defaults from config/bankhub.yaml, if present."""
    path = project_root / "config" / "bankhub.yaml"
    if not path.exists():
        return {}

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")

    cache = data.get("token_cache") or {}
    flat: dict[str, Any] = {
        "api_url": data.get("api_url"),
        "timeout": data.get("timeout"),
        "token_cache": cache.get("backend"),
        "token_cache_path": cache.get("path"),
    }
    return {k: v for k, v in flat.items() if v is not None}


def _env(*keys: str, default: str = "") -> str:
    """Try multiple env var names, return the first one found."""
    for key in keys:
        val = os.environ.get(key, "")
        if val:
            return val.strip().strip('"')
    return default


def _load_settings(file_settings: dict[str, Any] | None = None) -> Settings:
    """Load settings from environment variables on top of file defaults.

    Supports both SEPAY_BANKHUB_* and the shorter BANKHUB_* names.
    """
    defaults = file_settings or {}
    return Settings(
        api_key=_env("SEPAY_BANKHUB_API_KEY", "BANKHUB_API_KEY"),
        api_secret=_env("SEPAY_BANKHUB_API_SECRET", "BANKHUB_API_SECRET"),
        api_url=_env(
            "SEPAY_BANKHUB_API_URL", "BANKHUB_API_URL",
            default=str(defaults.get("api_url", DEFAULT_API_URL)),
        ),
        ipn_token=_env("SEPAY_BANKHUB_IPN_TOKEN", "BANKHUB_IPN_TOKEN"),
        timeout=float(_env("SEPAY_BANKHUB_TIMEOUT", default=str(defaults.get("timeout", 30.0)))),
        token_cache=_env(
            "SEPAY_BANKHUB_TOKEN_CACHE", default=str(defaults.get("token_cache", "memory")),
        ).lower(),
        token_cache_path=_env(
            "SEPAY_BANKHUB_TOKEN_CACHE_PATH",
            default=str(defaults.get("token_cache_path", "./data/token_cache.json")),
        ),
    )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Load and cache the full application configuration."""
    project_root = _find_project_root()

    # Load .env from project root if it exists
    env_path = project_root / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    settings = _load_settings(_load_file_settings(project_root))
    return Config(settings=settings)
