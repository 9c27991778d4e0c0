"""Project configuration.

This module reads settings from environment variables. For local development, it also
loads a `.env` file from the working directory (if present).

IMPORTANT:
- Do NOT commit `.env` to git. It holds your WIENER_LINIEN_API_KEY.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from . import __version__


DEFAULT_USER_AGENT = f"wiener-linien/{__version__}"


class SettingsError(RuntimeError):
    """Raised when required settings are missing or invalid."""


def _as_float(value: str, *, name: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise SettingsError(f"Environment variable {name} must be a number. Got: {value!r}") from exc


def _get_env(name: str, *, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    value = os.getenv(name, default)
    if required and (value is None or value.strip() == ""):
        raise SettingsError(
            f"Missing required environment variable: {name}. "
            f"Add it to your .env file or export it in your shell."
        )
    return value


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the client."""

    api_key: Optional[str]
    http_timeout_seconds: float
    user_agent: str


_SETTINGS: Optional[Settings] = None


def get_settings(*, reload: bool = False) -> Settings:
    """Load and return Settings (cached by default)."""

    global _SETTINGS
    if _SETTINGS is not None and not reload:
        return _SETTINGS

    # Load .env if available (does nothing if missing)
    load_dotenv()

    api_key = _get_env("WIENER_LINIEN_API_KEY", default=None, required=False) or None

    http_timeout_seconds_raw = _get_env("HTTP_TIMEOUT_SECONDS", default="30", required=False)
    http_timeout_seconds = _as_float(http_timeout_seconds_raw or "30", name="HTTP_TIMEOUT_SECONDS")

    user_agent = _get_env("USER_AGENT", default=DEFAULT_USER_AGENT, required=False) or DEFAULT_USER_AGENT

    _SETTINGS = Settings(
        api_key=api_key,
        http_timeout_seconds=http_timeout_seconds,
        user_agent=user_agent,
    )
    return _SETTINGS


def require_api_key(settings: Settings) -> str:
    if not settings.api_key:
        raise SettingsError(
            "Missing required environment variable: WIENER_LINIEN_API_KEY. "
            "Pass api_key explicitly or add it to your .env file."
        )
    return settings.api_key
