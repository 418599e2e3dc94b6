from __future__ import annotations

from datetime import date

from stockcheck.errors import NoPriceAvailableError
from stockcheck.schemas.quote import TimeSeries


def resolve_price(series: TimeSeries, target_date: date | str) -> float:
    """Close of the most recent trading day at or before target_date.

    Weekends and exchange holidays have no bar, so a miss on the exact
    date falls back to the nearest earlier date in the series.
    """
    target = target_date.isoformat() if isinstance(target_date, date) else str(target_date)

    bar = series.get(target)
    if bar is not None:
        return bar.close

    target_day = date.fromisoformat(target)
    for day in sorted(series, key=date.fromisoformat, reverse=True):
        if date.fromisoformat(day) <= target_day:
            return series[day].close

    raise NoPriceAvailableError("Purchase date is too far in the past or no data available")
