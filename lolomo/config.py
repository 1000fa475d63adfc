import os
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


def _env(name: str, default: Optional[str] = None, **constraints: Any) -> Any:
    return Field(default_factory=lambda: os.getenv(name, default), **constraints)


class Settings(BaseModel):
    # Validate env defaults so "200" from the environment becomes an int.
    model_config = ConfigDict(validate_default=True)

    service_name: str = _env("SERVICE_NAME", "lolomo")
    artwork_delay_ms: int = _env("ARTWORK_DELAY_MS", "200", ge=0)
    artwork_pool_size: int = _env("ARTWORK_POOL_SIZE", "10", ge=1)
    artwork_fallback: str = _env("ARTWORK_FALLBACK", "default_artwork_url")
    # Unset means no timeout; zero would fall back on every title.
    artwork_timeout_seconds: Optional[float] = _env("ARTWORK_TIMEOUT_SECONDS", gt=0)
    log_level: str = _env("LOG_LEVEL", "INFO")
    host: str = _env("HOST", "127.0.0.1")
    port: int = _env("PORT", "8000")

    @property
    def artwork_delay_seconds(self) -> float:
        return self.artwork_delay_ms / 1000
