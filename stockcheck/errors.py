from __future__ import annotations


class StockCheckError(Exception):
    code = "STOCK_CHECK_ERROR"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.code)
        self.message = message or self.code


class LookupValidationError(StockCheckError):
    code = "VALIDATION_ERROR"


class FetchError(StockCheckError):
    code = "FETCH_ERROR"


class NetworkError(FetchError):
    code = "NETWORK_ERROR"


class QuotaExceededError(FetchError):
    """Provider-side rate limit, distinct from the local call ceiling."""

    code = "PROVIDER_QUOTA_EXCEEDED"


class InvalidSymbolError(FetchError):
    code = "INVALID_SYMBOL"


class NoHistoricalDataError(FetchError):
    code = "NO_HISTORICAL_DATA"


class NoPriceAvailableError(StockCheckError):
    code = "NO_PRICE_AVAILABLE"
