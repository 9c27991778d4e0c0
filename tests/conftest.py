"""
Shared fixtures for client tests.
A MagicMock stands in for requests.Session so no test touches the network.
"""

from unittest.mock import MagicMock

import pytest
import requests

from wiener_linien.config import Settings
from wiener_linien.http import HttpClient


API_KEY = "test-key"


@pytest.fixture(autouse=True)
def no_api_key_env(monkeypatch):
    """Keep a developer's real key (shell or .env) out of the tests."""
    monkeypatch.delenv("WIENER_LINIEN_API_KEY", raising=False)
    monkeypatch.setattr("wiener_linien.config.load_dotenv", lambda *a, **k: False)


def make_response(status_code=200, json_body=None, reason="OK", text=None):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.reason = reason
    resp.url = "https://example.invalid"
    if json_body is None:
        resp.json.side_effect = ValueError("No JSON object could be decoded")
        resp.text = text if text is not None else "<html>not json</html>"
    else:
        resp.json.return_value = json_body
        resp.text = text if text is not None else ""
    return resp


@pytest.fixture()
def session():
    s = MagicMock(spec=requests.Session)
    s.get.return_value = make_response(json_body={"data": {"monitors": []}, "message": {"value": "OK"}})
    return s


@pytest.fixture()
def http(session):
    return HttpClient(session=session, timeout_seconds=5.0)


@pytest.fixture()
def settings():
    return Settings(api_key=API_KEY, http_timeout_seconds=5.0, user_agent="tests")
