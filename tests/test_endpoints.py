from datetime import datetime, timedelta, timezone

import pytest
import requests

import api.endpoints as endpoints


class FakeResponse:
    def __init__(self, status_code=200, payload=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} {self.reason}", response=self)

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture
def captured_get(monkeypatch):
    """Replace the shared session's GET; returns the call log and a setter for the response."""
    calls = []
    holder = {"response": FakeResponse(payload=[])}

    def fake_get(url, params=None, timeout=None):
        calls.append({"url": url, "params": params, "timeout": timeout})
        return holder["response"]

    monkeypatch.setattr(endpoints.session, "get", fake_get)
    return calls, holder


def test_format_api_timestamp():
    moment = datetime(2025, 6, 1, 12, 30, 5, 123456, tzinfo=timezone.utc)
    assert endpoints.format_api_timestamp(moment) == "2025-06-01T12:30:05.123Z"


def test_format_api_timestamp_converts_to_utc():
    moment = datetime(2025, 6, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert endpoints.format_api_timestamp(moment) == "2025-06-01T12:00:00.000Z"


def test_fetch_staking_yield_history_builds_request(captured_get):
    calls, holder = captured_get
    entries = [{"endBlockTime": "2025-06-01T00:00:00Z", "apy": "0.07"}]
    holder["response"] = FakeResponse(payload=entries)
    end = datetime(2025, 6, 1, tzinfo=timezone.utc)

    result = endpoints.fetch_staking_yield_history("MINT123", end - timedelta(days=7), end)

    assert result == entries
    assert calls[0]["url"] == "https://api.kamino.finance/staking-yields/tokens/MINT123/history"
    assert calls[0]["params"] == {
        "start": "2025-05-25T00:00:00.000Z",
        "end": "2025-06-01T00:00:00.000Z",
    }
    assert calls[0]["timeout"] == endpoints.REQUEST_TIMEOUT_SECONDS


def test_fetch_staking_yield_history_raises_on_http_error(captured_get):
    _, holder = captured_get
    holder["response"] = FakeResponse(status_code=503, reason="Service Unavailable")
    end = datetime(2025, 6, 1, tzinfo=timezone.utc)

    with pytest.raises(requests.exceptions.HTTPError):
        endpoints.fetch_staking_yield_history("MINT123", end - timedelta(days=7), end)


def test_fetch_staking_yield_history_rejects_non_list(captured_get):
    _, holder = captured_get
    holder["response"] = FakeResponse(payload={"error": "unknown mint"})
    end = datetime(2025, 6, 1, tzinfo=timezone.utc)

    with pytest.raises(ValueError):
        endpoints.fetch_staking_yield_history("MINT123", end - timedelta(days=30), end)


def test_handle_api_error_returns_fallback_and_logs(caplog):
    response = FakeResponse(status_code=500, reason="Internal Server Error")
    error = requests.exceptions.HTTPError("500", response=response)

    with caplog.at_level("ERROR"):
        result = endpoints.handle_api_error(error, "Staking yields for mSOL", "fallback")

    assert result == "fallback"
    assert "Staking yields for mSOL HTTP error: 500" in caplog.text


def test_handle_api_error_on_timeout(caplog):
    with caplog.at_level("ERROR"):
        result = endpoints.handle_api_error(requests.exceptions.Timeout(), "Kamino", [])

    assert result == []
    assert "Kamino request timed out" in caplog.text


def test_handle_api_error_on_http_error_without_response(caplog):
    error = requests.exceptions.HTTPError("503 Server Error")

    with caplog.at_level("ERROR"):
        result = endpoints.handle_api_error(error, "Staking yields for JitoSOL", "fallback")

    assert result == "fallback"
    assert "Staking yields for JitoSOL HTTP error: None" in caplog.text
