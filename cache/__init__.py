from cache.base import KeyValueStore
from cache.client import RedisClient
from cache.keys import CONNECTIONS_NAMESPACE, CacheKeys
from cache.local import LocalFileStore

__all__ = [
    "CONNECTIONS_NAMESPACE",
    "CacheKeys",
    "KeyValueStore",
    "LocalFileStore",
    "RedisClient",
]
