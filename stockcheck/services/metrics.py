from __future__ import annotations

from datetime import date
from enum import Enum

from stockcheck.errors import NoHistoricalDataError
from stockcheck.schemas.quote import TimeSeries


class Sentiment(str, Enum):
    VERY_BULLISH = "Very Bullish"
    BULLISH = "Bullish"
    NEUTRAL = "Neutral"
    BEARISH = "Bearish"
    VERY_BEARISH = "Very Bearish"

    @property
    def tone(self) -> str:
        if self in (Sentiment.VERY_BULLISH, Sentiment.BULLISH):
            return "positive"
        if self in (Sentiment.VERY_BEARISH, Sentiment.BEARISH):
            return "negative"
        return ""


def _closes_most_recent_first(series: TimeSeries) -> list[float]:
    days = sorted(series, key=date.fromisoformat, reverse=True)
    return [series[d].close for d in days]


def moving_average(series: TimeSeries, window_size: int) -> float:
    """Mean of the window_size most recent closes.

    Short histories are averaged over the bars that exist.
    """
    if window_size < 1:
        raise ValueError("window_size must be >= 1")

    closes = _closes_most_recent_first(series)[:window_size]
    if not closes:
        raise NoHistoricalDataError("No closing prices to average")
    return round(sum(closes) / len(closes), 2)


def sentiment(daily_change_percent: float) -> Sentiment:
    if daily_change_percent > 5:
        return Sentiment.VERY_BULLISH
    if daily_change_percent > 2:
        return Sentiment.BULLISH
    if daily_change_percent < -5:
        return Sentiment.VERY_BEARISH
    if daily_change_percent < -2:
        return Sentiment.BEARISH
    return Sentiment.NEUTRAL


def investment_value(units: float, purchase_price: float) -> float:
    return round(units * purchase_price, 2)


def chart_points(series: TimeSeries, limit: int = 30) -> tuple[list[str], list[float]]:
    """Last `limit` closes, oldest to newest."""
    days = sorted(series, key=date.fromisoformat, reverse=True)[:limit]
    days.reverse()
    return days, [series[d].close for d in days]
