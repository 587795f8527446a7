"""Alpha Vantage stock data client.

Every request goes through an :class:`~core.throttle.ApiThrottler` so bursts
of lookups stay under the free-tier rate limit.  Share one throttler between
clients that use the same key.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from core.config import ALPHA_VANTAGE_BASE_URL, REQUEST_TIMEOUT_SECONDS, get_api_key
from core.throttle import ApiThrottler

logger = logging.getLogger(__name__)


class StockDataError(RuntimeError):
    """A stock data lookup failed; ``str(exc)`` is safe to show to users."""


class InvalidSymbolError(StockDataError):
    pass


class RateLimitError(StockDataError):
    pass


class NoDataError(StockDataError):
    pass


class AlphaVantageClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        throttler: Optional[ApiThrottler] = None,
        base_url: str = ALPHA_VANTAGE_BASE_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self.api_key = api_key or get_api_key()
        self.throttler = throttler or ApiThrottler(name="Alpha Vantage")
        self.base_url = base_url
        self.timeout = timeout

    def _fetch_json(self, function: str, symbol: str, what: str) -> dict[str, Any]:
        self.throttler.throttle()
        params = {"function": function, "symbol": symbol, "apikey": self.api_key}
        logger.info("[Alpha Vantage] %s request: %s", function, {**params, "apikey": "***API_KEY***"})

        r = requests.get(self.base_url, params=params, timeout=self.timeout)
        try:
            r.raise_for_status()
        except requests.HTTPError as exc:
            raise StockDataError(f"Failed to fetch {what}: {r.status_code}") from exc

        data = r.json()
        if not isinstance(data, dict):
            raise StockDataError(f"Alpha Vantage returned non-object JSON: {type(data)}")
        self._check_error_payload(function, symbol, data)
        return data

    @staticmethod
    def _check_error_payload(function: str, symbol: str, data: dict) -> None:
        if data.get("Error Message"):
            logger.warning("[Alpha Vantage] %s error for %s: %s", function, symbol, data["Error Message"])
            raise InvalidSymbolError("Invalid stock symbol. Please check the ticker and try again.")
        if data.get("Note"):
            logger.warning("[Alpha Vantage] %s rate limited: %s", function, data["Note"])
            raise RateLimitError("API rate limit reached. Please wait a minute and try again.")
        if data.get("Information"):
            logger.warning("[Alpha Vantage] %s rate limited: %s", function, data["Information"])
            raise RateLimitError("API rate limit reached. Please wait and try again later.")

    def fetch_dividends(self, symbol: str) -> list[dict[str, Any]]:
        """Raw dividend rows, each with ``ex_dividend_date`` and ``amount``."""
        data = self._fetch_json("DIVIDENDS", symbol, "dividend data")
        rows = data.get("data") or []
        logger.info("[Alpha Vantage] DIVIDENDS %s: %d records", symbol, len(rows))
        if not rows:
            raise NoDataError("No dividend data available for this stock. The stock may not pay dividends.")
        return rows

    def fetch_quote(self, symbol: str) -> dict[str, Any]:
        data = self._fetch_json("GLOBAL_QUOTE", symbol, "stock price")
        quote = data.get("Global Quote") or {}
        if not quote.get("05. price"):
            raise NoDataError("Could not fetch stock price. Please try again.")
        return quote

    def fetch_overview(self, symbol: str) -> dict[str, Any]:
        return self._fetch_json("OVERVIEW", symbol, "company overview")

    def fetch_cash_flow(self, symbol: str) -> dict[str, Any]:
        return self._fetch_json("CASH_FLOW", symbol, "cash flow data")

    def fetch_balance_sheet(self, symbol: str) -> dict[str, Any]:
        return self._fetch_json("BALANCE_SHEET", symbol, "balance sheet data")
