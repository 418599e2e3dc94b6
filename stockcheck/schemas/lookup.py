from enum import Enum

from pydantic import BaseModel

from stockcheck.schemas.quote import TimeSeries


class LookupPath(str, Enum):
    CACHED = "CACHED"
    LIVE = "LIVE"
    DEMO = "DEMO"


class LookupRequest(BaseModel):
    symbol: str | None = None
    purchase_date: str | None = None
    units: str | float | None = None


class ComputedResult(BaseModel):
    current_price: float
    purchase_price: float
    units: float
    investment_value: float
    daily_change_percent: float
    avg7: float
    avg30: float
    time_series: TimeSeries


class CacheEntry(BaseModel):
    key: str
    data: ComputedResult
    timestamp: float


class LookupOutcome(BaseModel):
    symbol: str
    purchase_date: str
    # units requested by this submission; a cached result keeps the units it was computed with
    units: float | None = None
    path: LookupPath
    result: ComputedResult
    error: str | None = None
    api_calls_used: int
    api_calls_limit: int


class ChartData(BaseModel):
    label: str
    labels: list[str]
    prices: list[float]


class DashboardView(BaseModel):
    symbol_label: str
    current_price: str
    purchase_price: str
    units: float
    investment_value: str
    daily_change: str
    daily_change_class: str
    avg7: str
    avg30: str
    sentiment: str
    sentiment_class: str
    path: LookupPath
    demo_warning: bool
    api_info: str
    error: str | None = None
    chart: ChartData
