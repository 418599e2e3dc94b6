from pydantic import BaseModel, ConfigDict


class Quote(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol: str
    current_price: float
    percent_change: float


class DailyBar(BaseModel):
    model_config = ConfigDict(frozen=True)

    open: float
    high: float
    low: float
    close: float
    volume: int


# ISO date -> bar, most recent first
TimeSeries = dict[str, DailyBar]
