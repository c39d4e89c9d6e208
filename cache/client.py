"""Thin async wrapper around Upstash Redis HTTP client."""

import httpx
from upstash_redis.asyncio import Redis as AsyncRedis
from upstash_redis.errors import UpstashError

from app.exceptions import StorageError

_REDIS_ERRORS = (UpstashError, httpx.HTTPError)


class RedisClient:
    """Async Redis client backed by Upstash REST API.

    HTTP-based and stateless -- no persistent connections to manage.
    Library and transport failures are re-raised as ``StorageError``.
    """

    def __init__(self, url: str, token: str) -> None:
        self._redis = AsyncRedis(url=url, token=token)

    async def get(self, key: str) -> str | None:
        try:
            return await self._redis.get(key)
        except _REDIS_ERRORS as exc:
            raise StorageError(f"Redis GET {key} failed: {exc}") from exc

    async def set(self, key: str, value: str) -> str | None:
        try:
            return await self._redis.set(key, value)
        except _REDIS_ERRORS as exc:
            raise StorageError(f"Redis SET {key} failed: {exc}") from exc

    async def delete(self, *keys: str) -> int:
        try:
            return await self._redis.delete(*keys)
        except _REDIS_ERRORS as exc:
            raise StorageError(f"Redis DEL {', '.join(keys)} failed: {exc}") from exc
