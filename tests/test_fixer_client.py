import pytest
import requests

from app.domain.errors import RateTableUnavailable
from app.infra.providers.fixer import FixerClient

from conftest import StubSession


def _client(session: StubSession) -> FixerClient:
    return FixerClient(access_key="test-key", base_url="http://fixer.test/api/", timeout=5, session=session)


def test_latest_returns_snapshot(fixer_client, stub_session):
    snapshot = fixer_client.latest()

    assert snapshot.base == "EUR"
    assert snapshot.date == "2024-06-10"
    assert snapshot.timestamp == 1718000000
    assert snapshot.rates["GBP"] == 0.85
    assert "EUR" not in snapshot.rates
    assert snapshot.with_base()["EUR"] == 1.0


def test_latest_sends_access_key_and_timeout(stub_session):
    _client(stub_session).latest()

    call = stub_session.calls[0]
    assert call["url"] == "http://fixer.test/api/latest"
    assert call["params"] == {"access_key": "test-key"}
    assert call["timeout"] == 5


def test_each_call_fetches_fresh_rates(fixer_client, stub_session):
    fixer_client.latest()
    fixer_client.latest()

    assert len(stub_session.calls) == 2


def test_unsuccessful_payload_uses_error_info():
    session = StubSession({"success": False, "error": {"code": 101, "type": "missing_access_key",
                                                       "info": "You have not supplied an API Access Key."}})

    with pytest.raises(RateTableUnavailable) as excinfo:
        _client(session).latest()

    assert "API Access Key" in str(excinfo.value)


def test_unsuccessful_payload_without_info_falls_back_to_type():
    session = StubSession({"success": False, "error": {"code": 104, "type": "usage_limit_reached"}})

    with pytest.raises(RateTableUnavailable) as excinfo:
        _client(session).latest()

    assert excinfo.value.detail == "usage_limit_reached"


def test_unsuccessful_payload_without_error():
    with pytest.raises(RateTableUnavailable) as excinfo:
        _client(StubSession({"success": False})).latest()

    assert excinfo.value.detail == "Unknown error"


def test_http_error_status():
    with pytest.raises(RateTableUnavailable):
        _client(StubSession({}, status_code=503)).latest()


def test_connection_error():
    with pytest.raises(RateTableUnavailable):
        _client(StubSession(exc=requests.ConnectionError("connection refused"))).latest()


def test_non_json_body():
    with pytest.raises(RateTableUnavailable):
        _client(StubSession(ValueError("Expecting value"))).latest()


def test_missing_rates(fixer_payload):
    del fixer_payload["rates"]

    with pytest.raises(RateTableUnavailable):
        _client(StubSession(fixer_payload)).latest()


def test_latest_payload_returns_raw_document(fixer_payload):
    data = _client(StubSession(fixer_payload)).latest_payload()

    assert data == fixer_payload
