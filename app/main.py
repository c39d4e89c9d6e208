"""Wiring: logging setup and construction of the store, keychain and manager."""

import logging

import structlog

from app.config import Settings, get_settings
from cache.base import KeyValueStore
from cache.client import RedisClient
from cache.local import LocalFileStore
from keychain.client import KeyringClient
from services.connections import ConnectionConfigManager

log = structlog.get_logger()


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog for JSON output at the given level name."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def create_store(settings: Settings) -> KeyValueStore:
    """Durable store selected by ``STORE_BACKEND``."""
    if settings.store_backend == "redis":
        return RedisClient(
            url=settings.upstash_redis_url,
            token=settings.upstash_redis_token.get_secret_value(),
        )
    return LocalFileStore(settings.local_store_path)


def create_secret_backend() -> KeyringClient:
    client = KeyringClient()
    log.debug("keyring_backend_selected", backend=client.backend_name())
    return client


def create_manager(settings: Settings | None = None) -> ConnectionConfigManager:
    """Build a ConnectionConfigManager from settings (environment by default)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    return ConnectionConfigManager(
        create_store(settings),
        create_secret_backend(),
        purge_secret_on_clear=settings.purge_secret_on_clear,
    )
