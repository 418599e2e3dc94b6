from __future__ import annotations

from stockcheck.schemas.lookup import ChartData, DashboardView, LookupOutcome, LookupPath
from stockcheck.services.metrics import chart_points, investment_value, sentiment

CHART_POINTS = 30


def _money(value: float) -> str:
    return f"{value:.2f}"


def _api_info(outcome: LookupOutcome) -> str:
    calls = f"{outcome.api_calls_used}/{outcome.api_calls_limit}"
    if outcome.path == LookupPath.CACHED:
        return f"API Calls: {calls} (Cached data)"
    if outcome.path == LookupPath.LIVE:
        return f"API Calls: {calls} (Live data)"
    if outcome.error:
        return f"API Calls: {calls} (Live request failed: using demo data)"
    return "API Limit Reached: Using demo data"


def build_dashboard(outcome: LookupOutcome) -> DashboardView:
    result = outcome.result
    demo = outcome.path == LookupPath.DEMO
    mood = sentiment(result.daily_change_percent)
    labels, prices = chart_points(result.time_series, limit=CHART_POINTS)

    # a cached result may have been computed for different units
    units = outcome.units if outcome.units is not None else result.units
    value = result.investment_value
    if units != result.units:
        value = investment_value(units, result.purchase_price)

    return DashboardView(
        symbol_label=f"{outcome.symbol} (Demo)" if demo else outcome.symbol,
        current_price=_money(result.current_price),
        purchase_price=_money(result.purchase_price),
        units=units,
        investment_value=_money(value),
        daily_change=f"{result.daily_change_percent:.2f}%",
        daily_change_class="positive" if result.daily_change_percent >= 0 else "negative",
        avg7=_money(result.avg7),
        avg30=_money(result.avg30),
        sentiment=mood.value,
        sentiment_class=mood.tone,
        path=outcome.path,
        demo_warning=demo,
        api_info=_api_info(outcome),
        error=outcome.error,
        chart=ChartData(
            label=f"{outcome.symbol} Closing Price",
            labels=labels,
            prices=prices,
        ),
    )
