import logging

import pytest
import requests

from core import integrations
from core.integrations import (
    AlphaVantageClient,
    InvalidSymbolError,
    NoDataError,
    RateLimitError,
    StockDataError,
)
from core.throttle import ApiThrottler


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.payload


def _client():
    throttler = ApiThrottler(min_delay=0, name="test", sleep=lambda s: None)
    return AlphaVantageClient(api_key="SECRETKEY", throttler=throttler)


def _serve(monkeypatch, payload, status_code=200):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append({"url": url, "params": params, "timeout": timeout})
        return FakeResponse(payload, status_code)

    monkeypatch.setattr(integrations.requests, "get", fake_get)
    return calls


def test_fetch_quote(monkeypatch):
    calls = _serve(monkeypatch, {"Global Quote": {"01. symbol": "IBM", "05. price": "185.20"}})
    quote = _client().fetch_quote("IBM")
    assert quote["05. price"] == "185.20"
    assert calls[0]["params"] == {"function": "GLOBAL_QUOTE", "symbol": "IBM", "apikey": "SECRETKEY"}
    assert calls[0]["timeout"] == 30


def test_api_key_is_masked_in_logs(monkeypatch, caplog):
    _serve(monkeypatch, {"data": [{"ex_dividend_date": "2024-01-01", "amount": "1.0"}]})
    with caplog.at_level(logging.INFO, logger="core.integrations"):
        _client().fetch_dividends("IBM")
    assert "SECRETKEY" not in caplog.text
    assert "***API_KEY***" in caplog.text


def test_error_message_means_invalid_symbol(monkeypatch):
    _serve(monkeypatch, {"Error Message": "Invalid API call."})
    with pytest.raises(InvalidSymbolError):
        _client().fetch_overview("NOPE")


def test_note_means_rate_limited(monkeypatch):
    _serve(monkeypatch, {"Note": "Thank you for using Alpha Vantage!"})
    with pytest.raises(RateLimitError):
        _client().fetch_quote("IBM")


def test_information_means_rate_limited(monkeypatch):
    _serve(monkeypatch, {"Information": "Daily limit reached."})
    with pytest.raises(RateLimitError):
        _client().fetch_cash_flow("IBM")


def test_http_error_is_wrapped(monkeypatch):
    _serve(monkeypatch, {}, status_code=503)
    with pytest.raises(StockDataError, match="Failed to fetch balance sheet data: 503"):
        _client().fetch_balance_sheet("IBM")


def test_empty_dividends(monkeypatch):
    _serve(monkeypatch, {"symbol": "BRK.B", "data": []})
    with pytest.raises(NoDataError, match="may not pay dividends"):
        _client().fetch_dividends("BRK.B")


def test_missing_price(monkeypatch):
    _serve(monkeypatch, {"Global Quote": {}})
    with pytest.raises(NoDataError):
        _client().fetch_quote("IBM")


def test_errors_share_a_base_class():
    assert issubclass(InvalidSymbolError, StockDataError)
    assert issubclass(RateLimitError, StockDataError)
    assert issubclass(NoDataError, StockDataError)


def test_default_key_from_environment(monkeypatch):
    monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", " envkey ")
    assert AlphaVantageClient().api_key == "envkey"
    monkeypatch.delenv("ALPHA_VANTAGE_API_KEY")
    assert AlphaVantageClient().api_key == "demo"
