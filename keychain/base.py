"""Protocol for the OS-backed secret store addressed by (service, account)."""

from typing import Protocol


class SecretBackend(Protocol):
    """One secret string per (service, account) pair.

    Implementations raise ``BackendError`` when the backend is unavailable.
    """

    async def get_secret(self, service: str, account: str) -> str | None: ...

    async def set_secret(self, service: str, account: str, secret: str) -> None: ...

    async def delete_secret(self, service: str, account: str) -> bool: ...
