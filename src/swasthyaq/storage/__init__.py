"""Key-value substrates for the entity storage core."""

from swasthyaq.config import Settings
from swasthyaq.storage.base import KeyValueStore
from swasthyaq.storage.memory_store import InMemoryKeyValueStore
from swasthyaq.storage.redis_store import RedisKeyValueStore


def create_store(settings: Settings) -> KeyValueStore:
    """Build the substrate selected by ``settings.storage_backend``."""
    if settings.storage_backend == "redis":
        return RedisKeyValueStore(settings.redis_url, prefix=settings.redis_key_prefix)
    return InMemoryKeyValueStore()


__all__ = [
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "RedisKeyValueStore",
    "create_store",
]
