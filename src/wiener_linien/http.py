"""Shared HTTP utilities (requests.Session + status check + JSON parsing)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import requests


JsonType = Union[Dict[str, Any], list]

logger = logging.getLogger(__name__)


class ApiError(RuntimeError):
    """Raised when an API request fails."""


class TransportError(ApiError):
    """The request never produced a response (DNS, connection, timeout)."""


class StatusError(ApiError):
    """The response status was outside [200, 300)."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ApiError):
    """The response body was not valid JSON."""


@dataclass(frozen=True)
class HttpClient:
    """A thin wrapper around requests.Session with sensible defaults."""

    session: requests.Session
    timeout_seconds: float


@dataclass(frozen=True)
class ApiResult:
    """Outcome of one API call: either the unwrapped payload or the error."""

    data: Any = None
    error: Optional[ApiError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Any) -> "ApiResult":
        return cls(data=data)

    @classmethod
    def failure(cls, error: ApiError) -> "ApiResult":
        return cls(error=error)


def build_session(*, user_agent: str) -> requests.Session:
    """Create a requests session that identifies itself with `user_agent`."""

    session = requests.Session()
    session.headers.update({"User-Agent": user_agent})
    return session


def check_status(resp: requests.Response) -> requests.Response:
    """Pass a 2xx response through, raise StatusError with its status text otherwise."""

    if 200 <= resp.status_code < 300:
        return resp
    raise StatusError(resp.reason or f"HTTP {resp.status_code}", status_code=resp.status_code)


def parse_json(resp: requests.Response) -> JsonType:
    try:
        return resp.json()
    except ValueError as exc:
        # Keep error messages short to avoid leaking data in logs.
        body_preview = (resp.text or "")[:500]
        raise DecodeError(f"Failed to parse JSON (HTTP {resp.status_code}). Body: {body_preview}") from exc


def request_json(http: HttpClient, url: str) -> JsonType:
    """GET a fully assembled URL and parse the JSON response.

    The URL already carries its query string; nothing is added or re-encoded here.
    """

    try:
        resp = http.session.get(url, timeout=http.timeout_seconds)
    except requests.RequestException as exc:
        raise TransportError(f"Request failed for {url}: {exc}") from exc

    return parse_json(check_status(resp))


def unwrap_data(payload: JsonType) -> Any:
    """Return the envelope's `data` field, or None when the payload has none."""

    if isinstance(payload, dict):
        return payload.get("data")
    return None


def fetch(http: HttpClient, url: str) -> ApiResult:
    """GET `url` and return an ApiResult instead of raising."""

    try:
        payload = request_json(http, url)
    except ApiError as exc:
        return ApiResult.failure(exc)
    return ApiResult.success(unwrap_data(payload))


def call_api(http: HttpClient, url: str) -> Any:
    """GET `url` and return the `data` payload.

    Any failure is logged once and resolves to None, so callers cannot tell
    "no data" apart from "request failed". Use `fetch` when that matters.
    """

    result = fetch(http, url)
    if not result.ok:
        logger.error("Wiener Linien request failed: %s", result.error)
        return None
    return result.data
