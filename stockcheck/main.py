from __future__ import annotations

import threading

from fastapi import FastAPI

from stockcheck.api.routes import router
from stockcheck.config.settings import Settings, get_settings
from stockcheck.integrations.alpha_vantage import AlphaVantageClient
from stockcheck.services.lookup import LookupService
from stockcheck.services.lookup_cache import LookupCache, QuotaCounter


def build_lookup_service(settings: Settings) -> LookupService:
    client = AlphaVantageClient(
        api_key=settings.ALPHA_VANTAGE_API_KEY,
        base_url=settings.ALPHA_VANTAGE_BASE_URL,
        timeout=settings.HTTP_TIMEOUT_SEC,
    )
    return LookupService(
        quote_client=client,
        cache=LookupCache(ttl_sec=settings.CACHE_TTL_SEC),
        quota=QuotaCounter(limit=settings.MAX_API_CALLS),
    )


app = FastAPI(title="Stock Check", version="0.1.0")
app.include_router(router, prefix="/v1")

_service_lock = threading.Lock()


def get_lookup_service() -> LookupService:
    with _service_lock:
        if app.state.lookup_service is None:
            app.state.lookup_service = build_lookup_service(app.state.get_settings())
        return app.state.lookup_service


# NOTE: built on first request so app import does not read env.
app.state.get_settings = get_settings
app.state.get_lookup_service = get_lookup_service
app.state.lookup_service = None
