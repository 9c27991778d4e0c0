"""Wiener Linien OGD realtime API client.

Endpoints (all GET, JSON, payload under the top-level `data` key):
- /monitor          departures for one or more stops (RBL numbers)
- /newsList         news, elevator maintenance and other information
- /trafficInfoList  interruptions of operations and elevator outages

Authentication:
- The API key is sent as the `sender` query parameter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .config import Settings, get_settings, require_api_key
from .http import ApiResult, HttpClient, build_session, call_api, fetch
from .query import RawValue, build_url, is_present


BASE_URL = "https://www.wienerlinien.at/ogd_realtime"


@dataclass(frozen=True)
class RelatedInfo:
    """Optional filters shared by /newsList and /trafficInfoList."""

    related_line: Optional[RawValue] = None
    related_stop: Optional[RawValue] = None
    name: Optional[RawValue] = None

    def fragments(self) -> str:
        query = ""
        for key, value in (
            ("relatedLine", self.related_line),
            ("relatedStop", self.related_stop),
            ("name", self.name),
        ):
            if is_present(value):
                query += build_url(key, value)  # type: ignore[arg-type]
        return query


class WienerLinien:
    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        http: Optional[HttpClient] = None,
        base_url: str = BASE_URL,
        settings: Optional[Settings] = None,
    ) -> None:
        settings = settings or get_settings()
        self.api_key = api_key or require_api_key(settings)
        self.http = http or HttpClient(
            session=build_session(user_agent=settings.user_agent),
            timeout_seconds=settings.http_timeout_seconds,
        )
        self.base_url = base_url.rstrip("/")

    def _endpoint(self, name: str) -> str:
        return f"{self.base_url}/{name}?sender={self.api_key}"

    # URL builders

    def monitor_url(self, rbl: RawValue, *, activate_traffic_info: Optional[bool] = None) -> str:
        url = self._endpoint("monitor") + build_url("rbl", rbl)
        if is_present(activate_traffic_info):
            url += build_url("activateTrafficInfo", activate_traffic_info)  # type: ignore[arg-type]
        return url

    def news_list_url(self, **related: Optional[RawValue]) -> str:
        return self._endpoint("newsList") + RelatedInfo(**related).fragments()

    def traffic_info_list_url(self, **related: Optional[RawValue]) -> str:
        return self._endpoint("trafficInfoList") + RelatedInfo(**related).fragments()

    # Requests. Each returns the `data` payload, or None (with a logged error) on failure.

    def monitor(self, rbl: RawValue, *, activate_traffic_info: Optional[bool] = None) -> Any:
        """Real-time departures for one stop or a list of stops."""
        return call_api(self.http, self.monitor_url(rbl, activate_traffic_info=activate_traffic_info))

    def news_list(
        self,
        *,
        related_line: Optional[RawValue] = None,
        related_stop: Optional[RawValue] = None,
        name: Optional[RawValue] = None,
    ) -> Any:
        """News, elevator maintenance and other information."""
        url = self.news_list_url(related_line=related_line, related_stop=related_stop, name=name)
        return call_api(self.http, url)

    def traffic_info_list(
        self,
        *,
        related_line: Optional[RawValue] = None,
        related_stop: Optional[RawValue] = None,
        name: Optional[RawValue] = None,
    ) -> Any:
        """Interruptions of operations and elevator outages."""
        url = self.traffic_info_list_url(related_line=related_line, related_stop=related_stop, name=name)
        return call_api(self.http, url)

    # Same requests, but failures come back as ApiResult.error instead of being logged.

    def monitor_result(self, rbl: RawValue, *, activate_traffic_info: Optional[bool] = None) -> ApiResult:
        return fetch(self.http, self.monitor_url(rbl, activate_traffic_info=activate_traffic_info))

    def news_list_result(self, **related: Optional[RawValue]) -> ApiResult:
        return fetch(self.http, self.news_list_url(**related))

    def traffic_info_list_result(self, **related: Optional[RawValue]) -> ApiResult:
        return fetch(self.http, self.traffic_info_list_url(**related))
