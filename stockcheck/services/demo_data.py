from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Callable

from stockcheck.schemas.lookup import ComputedResult
from stockcheck.schemas.quote import DailyBar, TimeSeries
from stockcheck.services.metrics import investment_value

DEMO_SERIES_DAYS = 30
DEMO_MAX_VOLUME = 10_000_000


class DemoDataGenerator:
    """Fabricates a plausible lookup result. Unseeded unless an rng is injected."""

    def __init__(
        self,
        rng: random.Random | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.today = today or date.today

    def _series(self, start_price: float) -> TimeSeries:
        rng = self.rng
        today = self.today()
        running = start_price
        bars: TimeSeries = {}
        for offset in range(DEMO_SERIES_DAYS, -1, -1):
            running *= 1 + rng.uniform(-0.025, 0.025)
            day = (today - timedelta(days=offset)).isoformat()
            bars[day] = DailyBar(
                open=round(running * rng.uniform(0.99, 1.01), 4),
                high=round(running * rng.uniform(1.0, 1.02), 4),
                low=round(running * rng.uniform(0.96, 0.98), 4),
                close=round(running, 4),
                volume=rng.randint(0, DEMO_MAX_VOLUME - 1),
            )
        return dict(sorted(bars.items(), reverse=True))

    def generate(self, units: float) -> ComputedResult:
        rng = self.rng
        current_price = round(rng.uniform(50, 450), 2)
        purchase_price = round(current_price * rng.uniform(0.7, 1.3), 2)
        daily_change = round(rng.uniform(-3, 7), 2)
        avg7 = round(current_price * (1 + rng.uniform(-0.04, 0.04)), 2)
        avg30 = round(current_price * (1 + rng.uniform(-0.05, 0.05)), 2)

        return ComputedResult(
            current_price=current_price,
            purchase_price=purchase_price,
            units=units,
            investment_value=investment_value(units, purchase_price),
            daily_change_percent=daily_change,
            avg7=avg7,
            avg30=avg30,
            time_series=self._series(current_price),
        )
