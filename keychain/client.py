"""Async wrapper around the ``keyring`` package (OS keychain).

``keyring`` is synchronous and may block on a desktop unlock prompt, so every
call runs in a worker thread.
"""

import asyncio

import keyring
import structlog
from keyring.errors import KeyringError, PasswordDeleteError

from app.exceptions import BackendError

log = structlog.get_logger()


class KeyringClient:
    """Secret backend using the platform keyring (Keychain, Credential Manager, Secret Service)."""

    async def get_secret(self, service: str, account: str) -> str | None:
        try:
            return await asyncio.to_thread(keyring.get_password, service, account)
        except KeyringError as exc:
            raise BackendError(f"Keyring read failed for {service}/{account}: {exc}") from exc

    async def set_secret(self, service: str, account: str, secret: str) -> None:
        """Store the secret, replacing any previous value for the pair."""
        try:
            await asyncio.to_thread(keyring.set_password, service, account, secret)
        except KeyringError as exc:
            raise BackendError(f"Keyring write failed for {service}/{account}: {exc}") from exc

    async def delete_secret(self, service: str, account: str) -> bool:
        """Remove the secret. Returns False if there was nothing to remove."""
        try:
            await asyncio.to_thread(keyring.delete_password, service, account)
        except PasswordDeleteError:
            return False  # Already gone
        except KeyringError as exc:
            raise BackendError(f"Keyring delete failed for {service}/{account}: {exc}") from exc
        return True

    def backend_name(self) -> str:
        """Name of the active keyring backend, for diagnostics."""
        backend = keyring.get_keyring()
        return f"{type(backend).__module__}.{type(backend).__name__}"
