import os
from functools import lru_cache

from pydantic import BaseModel, Field


class Settings(BaseModel):
    ALPHA_VANTAGE_API_KEY: str = Field(min_length=1)
    ALPHA_VANTAGE_BASE_URL: str = "https://www.alphavantage.co/query"
    MAX_API_CALLS: int = Field(default=5, ge=0)
    CACHE_TTL_SEC: float = Field(default=300.0, gt=0)
    HTTP_TIMEOUT_SEC: float = Field(default=5.0, gt=0)

    @classmethod
    def from_env(cls) -> "Settings":
        raw = {
            "ALPHA_VANTAGE_API_KEY": os.getenv("ALPHA_VANTAGE_API_KEY", "demo"),
            "ALPHA_VANTAGE_BASE_URL": os.getenv("ALPHA_VANTAGE_BASE_URL"),
            "MAX_API_CALLS": os.getenv("MAX_API_CALLS"),
            "CACHE_TTL_SEC": os.getenv("CACHE_TTL_SEC"),
            "HTTP_TIMEOUT_SEC": os.getenv("HTTP_TIMEOUT_SEC"),
        }
        # unset variables fall back to the model defaults
        return cls.model_validate({k: v for k, v in raw.items() if v is not None})


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
