import copy

import pytest
import requests
from fastapi.testclient import TestClient

from app.core.rate_limit import limiter
from app.infra.providers.fixer import FixerClient, get_fixer_client
from app.main import app

FIXER_PAYLOAD = {
    "success": True,
    "timestamp": 1718000000,
    "base": "EUR",
    "date": "2024-06-10",
    "rates": {"USD": 1.1, "GBP": 0.85, "JPY": 160.0, "CAD": 1.5},
}


class StubResponse:
    def __init__(self, payload, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class StubSession:
    def __init__(self, payload=None, status_code: int = 200, exc: Exception | None = None) -> None:
        self.payload = payload
        self.status_code = status_code
        self.exc = exc
        self.calls: list[dict] = []

    def get(self, url, params=None, timeout=None) -> StubResponse:
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return StubResponse(self.payload, self.status_code)


@pytest.fixture()
def fixer_payload() -> dict:
    return copy.deepcopy(FIXER_PAYLOAD)


@pytest.fixture()
def stub_session(fixer_payload) -> StubSession:
    return StubSession(fixer_payload)


@pytest.fixture()
def fixer_client(stub_session) -> FixerClient:
    return FixerClient(access_key="test-key", base_url="http://fixer.test/api", session=stub_session)


@pytest.fixture()
def use_fixer():
    """Swap the Fixer client the API hands to its routes."""

    def _use(client: FixerClient) -> None:
        app.dependency_overrides[get_fixer_client] = lambda: client

    yield _use
    app.dependency_overrides.clear()


@pytest.fixture()
def api_client(fixer_client, use_fixer, monkeypatch):
    monkeypatch.setattr(limiter, "enabled", False)
    use_fixer(fixer_client)
    with TestClient(app) as client:
        yield client
