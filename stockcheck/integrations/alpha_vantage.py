from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Tuple

import requests

from stockcheck.errors import (
    InvalidSymbolError,
    NetworkError,
    NoHistoricalDataError,
    QuotaExceededError,
)
from stockcheck.schemas.quote import DailyBar, Quote, TimeSeries

_RATE_LIMIT_MARKERS = ("Note", "Information")


class AlphaVantageClient:
    """Alpha Vantage quote + daily series client. One attempt per call, no retry."""

    DEFAULT_BASE_URL = "https://www.alphavantage.co/query"

    def __init__(
        self,
        api_key: str,
        session: Optional[Any] = None,
        base_url: Optional[str] = None,
        timeout: float = 5.0,
    ) -> None:
        if not api_key:
            raise ValueError("api_key is required")

        self.api_key = api_key
        self.base_url = base_url or self.DEFAULT_BASE_URL
        self.session = session or requests
        self.timeout = timeout

    def _query(self, function: str, symbol: str) -> Dict[str, Any]:
        try:
            response = self.session.get(
                self.base_url,
                params={"function": function, "symbol": symbol, "apikey": self.api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise NetworkError(f"Network response was not ok: {exc}") from exc
        except ValueError as exc:
            raise NetworkError("Network response was not valid JSON") from exc

        if not isinstance(payload, dict):
            raise NetworkError("Network response was not a JSON object")
        for marker in _RATE_LIMIT_MARKERS:
            if payload.get(marker):
                raise QuotaExceededError(f"API rate limit exceeded: {payload[marker]}")
        return payload

    @staticmethod
    def _to_float(value: Any, default: float = 0.0) -> float:
        try:
            if value is None or value == "":
                return default
            return float(str(value).strip().rstrip("%"))
        except (TypeError, ValueError):
            return default

    def get_quote(self, symbol: str) -> Quote:
        payload = self._query("GLOBAL_QUOTE", symbol)
        body = payload.get("Global Quote")
        if not isinstance(body, dict) or not body.get("05. price"):
            raise InvalidSymbolError("Invalid stock symbol or no data available")

        try:
            price = float(body["05. price"])
        except (TypeError, ValueError) as exc:
            raise InvalidSymbolError("Invalid stock symbol or no data available") from exc

        return Quote(
            symbol=str(body.get("01. symbol") or symbol),
            current_price=price,
            percent_change=self._to_float(body.get("10. change percent")),
        )

    def get_daily_series(self, symbol: str) -> TimeSeries:
        payload = self._query("TIME_SERIES_DAILY", symbol)
        raw = payload.get("Time Series (Daily)")
        if not isinstance(raw, dict) or not raw:
            raise NoHistoricalDataError("Unable to fetch historical data")

        series: TimeSeries = {}
        try:
            for day in sorted(raw, key=date.fromisoformat, reverse=True):
                row = raw[day]
                series[day] = DailyBar(
                    open=float(row["1. open"]),
                    high=float(row["2. high"]),
                    low=float(row["3. low"]),
                    close=float(row["4. close"]),
                    volume=int(float(row["5. volume"])),
                )
        except (KeyError, TypeError, ValueError) as exc:
            raise NoHistoricalDataError(f"Malformed historical data for {symbol}") from exc
        return series

    def fetch_quote(self, symbol: str) -> Tuple[Quote, TimeSeries]:
        # quote first: a bad symbol never costs the series call
        quote = self.get_quote(symbol)
        series = self.get_daily_series(symbol)
        return quote, series
