"""Application configuration via Pydantic Settings v2."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings for the connection configuration store."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Durable store ===
    store_backend: Literal["local", "redis"] = "local"
    local_store_path: Path = Path.home() / ".nuclide" / "connections.json"
    upstash_redis_url: str = ""
    upstash_redis_token: SecretStr = SecretStr("")

    # === Behaviour ===
    purge_secret_on_clear: bool = False
    log_level: str = "INFO"

    @field_validator("upstash_redis_url")
    @classmethod
    def _redis_url_must_be_https(cls, v: str) -> str:
        if v and not v.startswith("https://"):
            msg = "UPSTASH_REDIS_URL must start with https://"
            raise ValueError(msg)
        return v

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Unknown LOG_LEVEL: {v}"
            raise ValueError(msg)
        return level

    @model_validator(mode="after")
    def _redis_backend_needs_url(self) -> "Settings":
        if self.store_backend == "redis" and not self.upstash_redis_url:
            msg = "UPSTASH_REDIS_URL is required when STORE_BACKEND=redis"
            raise ValueError(msg)
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton Settings instance (cached after first call)."""
    return Settings()
