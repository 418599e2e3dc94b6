from __future__ import annotations

import threading
import time
from datetime import date
from typing import Callable

from stockcheck.errors import LookupValidationError, StockCheckError
from stockcheck.schemas.lookup import ComputedResult, LookupOutcome, LookupPath
from stockcheck.services.demo_data import DemoDataGenerator
from stockcheck.services.lookup_cache import LookupCache, QuotaCounter, cache_key
from stockcheck.services.metrics import investment_value, moving_average
from stockcheck.services.price_resolver import resolve_price


class LookupService:
    """Cache-first lookup with a live-call ceiling and demo fallback.

    Order per submission: fresh cache entry, then a live attempt while the
    ceiling allows, then synthetic data. Every live attempt counts against
    the ceiling, failed or not. Demo results are never cached.
    """

    def __init__(
        self,
        *,
        quote_client,
        cache: LookupCache | None = None,
        quota: QuotaCounter | None = None,
        demo_generator: DemoDataGenerator | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.quote_client = quote_client
        self.cache = cache or LookupCache()
        self.quota = quota or QuotaCounter()
        self.demo_generator = demo_generator or DemoDataGenerator()
        self.clock = clock or time.time
        # one submission at a time
        self._lock = threading.Lock()

        self.cached_count = 0
        self.live_count = 0
        self.demo_count = 0
        self.live_failures = 0
        self.last_error: str | None = None

    def _compute_live(self, symbol: str, purchase_date: date | str, units: float) -> ComputedResult:
        quote, series = self.quote_client.fetch_quote(symbol)
        purchase_price = resolve_price(series, purchase_date)
        return ComputedResult(
            current_price=quote.current_price,
            purchase_price=purchase_price,
            units=units,
            investment_value=investment_value(units, purchase_price),
            daily_change_percent=round(quote.percent_change, 2),
            avg7=moving_average(series, 7),
            avg30=moving_average(series, 30),
            time_series=series,
        )

    def _outcome(
        self,
        symbol: str,
        day: str,
        units: float,
        path: LookupPath,
        result: ComputedResult,
        error: str | None = None,
    ) -> LookupOutcome:
        return LookupOutcome(
            symbol=symbol,
            purchase_date=day,
            units=units,
            path=path,
            result=result,
            error=error,
            api_calls_used=self.quota.used,
            api_calls_limit=self.quota.limit,
        )

    def resolve_data(self, symbol: str, purchase_date: date | str, units: float) -> LookupOutcome:
        if not isinstance(purchase_date, date):
            try:
                purchase_date = date.fromisoformat(str(purchase_date))
            except ValueError as exc:
                raise LookupValidationError("Purchase date must be YYYY-MM-DD") from exc
        day = purchase_date.isoformat()
        key = cache_key(symbol, day)

        with self._lock:
            now = self.clock()
            entry = self.cache.get_fresh(key, now)
            if entry is not None:
                self.cached_count += 1
                print(f"[LOOKUP][path_cached] key={key} age_sec={now - entry.timestamp:.1f}", flush=True)
                return self._outcome(symbol, day, units, LookupPath.CACHED, entry.data)

            error: str | None = None
            if self.quota.available():
                used = self.quota.consume()
                try:
                    result = self._compute_live(symbol, day, units)
                except StockCheckError as exc:
                    self.live_failures += 1
                    error = f"Failed to fetch stock data. {exc.message}"
                    self.last_error = error
                    print(
                        f"[LOOKUP][live_error] key={key} code={exc.code} error={exc.message} "
                        f"api_calls={used}/{self.quota.limit}",
                        flush=True,
                    )
                else:
                    self.cache.put(key, result, self.clock())
                    self.live_count += 1
                    print(f"[LOOKUP][path_live] key={key} api_calls={used}/{self.quota.limit}", flush=True)
                    return self._outcome(symbol, day, units, LookupPath.LIVE, result)
            else:
                print(
                    f"[LOOKUP][quota_exhausted] key={key} api_calls={self.quota.used}/{self.quota.limit}",
                    flush=True,
                )

            result = self.demo_generator.generate(units)
            self.demo_count += 1
            print(f"[LOOKUP][path_demo] key={key} live_failed={int(error is not None)}", flush=True)
            return self._outcome(symbol, day, units, LookupPath.DEMO, result, error)

    def metrics(self) -> dict[str, int | str | None]:
        return {
            "cached_entries": len(self.cache),
            "api_calls_used": self.quota.used,
            "api_calls_limit": self.quota.limit,
            "cached_count": self.cached_count,
            "live_count": self.live_count,
            "demo_count": self.demo_count,
            "live_failures": self.live_failures,
            "last_error": self.last_error,
        }
