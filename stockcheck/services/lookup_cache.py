from __future__ import annotations

from datetime import date

from stockcheck.schemas.lookup import CacheEntry, ComputedResult


def cache_key(symbol: str, purchase_date: date | str) -> str:
    day = purchase_date.isoformat() if isinstance(purchase_date, date) else str(purchase_date)
    return f"{symbol}|{day}"


class LookupCache:
    """Computed results keyed by symbol|date. Staleness is judged at read time; nothing is evicted."""

    def __init__(self, ttl_sec: float = 300.0) -> None:
        self.ttl_sec = ttl_sec
        self._rows: dict[str, CacheEntry] = {}

    def put(self, key: str, data: ComputedResult, now: float) -> CacheEntry:
        entry = CacheEntry(key=key, data=data, timestamp=now)
        self._rows[key] = entry
        return entry

    def get(self, key: str) -> CacheEntry | None:
        return self._rows.get(key)

    def is_fresh(self, entry: CacheEntry, now: float) -> bool:
        return (now - entry.timestamp) < self.ttl_sec

    def get_fresh(self, key: str, now: float) -> CacheEntry | None:
        entry = self.get(key)
        if entry is not None and self.is_fresh(entry, now):
            return entry
        return None

    def __len__(self) -> int:
        return len(self._rows)


class QuotaCounter:
    """Live-fetch attempts against a fixed ceiling. Only ever goes up."""

    def __init__(self, limit: int = 5) -> None:
        self.limit = limit
        self.used = 0

    def available(self) -> bool:
        return self.used < self.limit

    def consume(self) -> int:
        self.used += 1
        return self.used
