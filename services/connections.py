"""Connection configuration manager — saved TLS credentials per remote host.

Records live in the durable key-value store under ``nuclide-connections:<host>``;
the client key inside them is encrypted by ``ConnectionConfigCodec`` with a
password kept in the OS keychain.

Internal methods (``load``/``store``/``remove``) return typed results so the
failure kind stays observable. The public ``*_connection_config`` methods log
and discard failures: broken or missing saved credentials degrade to "nothing
saved" and the caller re-prompts.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog
from pydantic import ValidationError

from app.exceptions import AppError, StorageError
from cache.base import KeyValueStore
from cache.keys import CacheKeys
from db.codec import ConnectionConfigCodec, account_id
from db.models import ConnectionConfiguration, SerializableConnectionConfiguration
from keychain.base import SecretBackend

log = structlog.get_logger()


# ---------------------------------------------------------------------------
# DTOs
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Outcome of reading a saved configuration. Both fields None means nothing saved."""

    config: ConnectionConfiguration | None = None
    error: AppError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class StoreResult:
    """Outcome of a write or delete."""

    keys: tuple[str, ...] = ()  # Store keys written or deleted
    skipped: bool = False  # Insecure config, nothing to persist
    error: AppError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _parse_record(host: str, raw: str) -> SerializableConnectionConfiguration:
    try:
        return SerializableConnectionConfiguration.from_json(raw)
    except ValidationError as exc:
        raise StorageError(f"Stored configuration for {host} is corrupted") from exc


class ConnectionConfigManager:
    """get/set/clear of saved connection configurations keyed by host or IP."""

    def __init__(
        self,
        store: KeyValueStore,
        secrets: SecretBackend,
        *,
        purge_secret_on_clear: bool = False,
    ) -> None:
        self._store = store
        self._secrets = secrets
        self._codec = ConnectionConfigCodec(secrets)
        self._purge_secret_on_clear = purge_secret_on_clear

    # ------------------------------------------------------------------
    # Public API (never raises)
    # ------------------------------------------------------------------

    async def get_connection_config(self, host: str) -> ConnectionConfiguration | None:
        """Saved configuration for ``host``, or None if absent or unreadable."""
        try:
            result = await self.load(host)
        except Exception:
            log.exception("connection_config_load_failed", host=host)
            return None
        if result.error is not None:
            log.error(
                "connection_config_corrupted",
                host=host,
                error_type=type(result.error).__name__,
                error=result.error.message,
            )
            return None
        return result.config

    async def set_connection_config(self, config: ConnectionConfiguration, ip_address: str) -> None:
        """Save ``config`` under its host and under ``ip_address``."""
        try:
            result = await self.store(config, ip_address)
        except Exception:
            log.exception("connection_config_store_failed", host=config.host)
            return
        if result.error is not None:
            log.error(
                "connection_config_store_failed",
                host=config.host,
                error_type=type(result.error).__name__,
                error=result.error.message,
            )

    async def clear_connection_config(self, host: str) -> None:
        """Forget the saved configuration for ``host``."""
        try:
            result = await self.remove(host)
        except Exception:
            log.exception("connection_config_clear_failed", host=host)
            return
        if result.error is not None:
            log.error(
                "connection_config_clear_failed",
                host=host,
                error_type=type(result.error).__name__,
                error=result.error.message,
            )

    # ------------------------------------------------------------------
    # Typed operations
    # ------------------------------------------------------------------

    async def load(self, host: str) -> LookupResult:
        try:
            raw = await self._store.get(CacheKeys.connection(host))
            if raw is None:
                return LookupResult()
            record = _parse_record(host, raw)
            config = await self._codec.decrypt_config(record)
        except AppError as exc:
            return LookupResult(error=exc)
        return LookupResult(config=config)

    async def store(self, config: ConnectionConfiguration, ip_address: str) -> StoreResult:
        # Insecure configs are used for testing and cannot be encrypted.
        if config.is_insecure:
            return StoreResult(skipped=True)

        # The IP key lets several hostname aliases reuse one saved connection.
        keys = tuple(
            dict.fromkeys(CacheKeys.connection(name) for name in (config.host, ip_address) if name)
        )
        written: list[str] = []
        try:
            encrypted = (await self._codec.encrypt_config(config)).to_json()
            for key in keys:
                await self._store.set(key, encrypted)
                written.append(key)
        except AppError as exc:
            return StoreResult(keys=tuple(written), error=exc)
        return StoreResult(keys=tuple(written))

    async def remove(self, host: str) -> StoreResult:
        key = CacheKeys.connection(host)
        record = await self._record_for_purge(host) if self._purge_secret_on_clear else None

        try:
            await self._store.delete(key)
        except AppError as exc:
            return StoreResult(error=exc)

        if record is not None:
            try:
                await self._secrets.delete_secret(
                    self._codec.service_name, account_id(record.host, record.port)
                )
            except AppError as exc:
                return StoreResult(keys=(key,), error=exc)
        return StoreResult(keys=(key,))

    async def _record_for_purge(self, host: str) -> SerializableConnectionConfiguration | None:
        """Stored record for ``host``, needed to find its keychain account before deletion."""
        try:
            raw = await self._store.get(CacheKeys.connection(host))
            return _parse_record(host, raw) if raw is not None else None
        except AppError as exc:
            log.warning("connection_secret_purge_skipped", host=host, error=exc.message)
            return None
