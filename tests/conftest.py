"""Shared fixtures for Raide SDK unit tests."""

import json
import pytest
import httpx
from urllib.parse import parse_qs

from raide_core.client import RaideClient


ENV_KEYS = ["RAIDE_ACCOUNT_ID", "RAIDE_API_KEY", "RAIDE_API_PASSWORD", "RAIDE_BASE_URL", "RAIDE_TIMEOUT"]


def envelope(result=None, error=0, description=None) -> str:
    """Return a JSON service envelope as the service would send it."""
    body = {"error": error}
    if error == 0:
        body["result"] = result
    else:
        body["errorDescription"] = description
    return json.dumps(body)


def form_fields(request: httpx.Request) -> dict:
    """Decode a form-encoded request body into {name: [values]}."""
    return parse_qs(request.content.decode(), keep_blank_values=True)


class FakeService:
    """Records every request and answers with a configurable (status, body)."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = envelope(result=True)
        self.exception = None

    def respond(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exception is not None:
            raise self.exception
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def service():
    """Return a fake Raide service backed by httpx.MockTransport."""
    return FakeService()


@pytest.fixture
def client(service):
    """Return a RaideClient whose HTTP traffic goes to the fake service."""
    http_client = httpx.Client(
        transport=httpx.MockTransport(service.handler),
        base_url="http://raide.test",
    )
    raide = RaideClient(account_id=7, api_key="key_abc", api_password="s3cret", http_client=http_client)
    yield raide
    http_client.close()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove RAIDE_* variables for the test and restore them afterwards."""
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch
