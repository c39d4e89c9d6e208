"""Protocol for the durable string-keyed store that holds connection records."""

from typing import Any, Protocol


class KeyValueStore(Protocol):
    """Minimal async key-value surface used by the connection config manager.

    Implementations raise ``StorageError`` when the backing store fails.
    """

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> Any: ...

    async def delete(self, *keys: str) -> int: ...
