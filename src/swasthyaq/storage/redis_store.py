"""Redis-backed key-value substrate."""

from __future__ import annotations

from redis import asyncio as aioredis
from redis.exceptions import RedisError

from swasthyaq.core.exceptions import SubstrateError
from swasthyaq.core.logging import get_logger

logger = get_logger(__name__)


class RedisKeyValueStore:
    """Substrate over a Redis database.

    Keys are namespaced with ``prefix`` so several deployments can share one
    database. Values are stored as UTF-8 strings.
    """

    def __init__(
        self,
        url: str = "redis://localhost:6379/0",
        *,
        prefix: str = "",
        client: aioredis.Redis | None = None,
    ):
        self.prefix = prefix
        self.client = client or aioredis.Redis.from_url(url, decode_responses=True)
        logger.info("RedisKeyValueStore initialized (prefix=%r)", prefix)

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    async def get(self, key: str) -> str | None:
        try:
            value = await self.client.get(self._key(key))
        except RedisError as exc:
            raise SubstrateError(f"Redis GET {key!r} failed: {exc}") from exc
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def put(self, key: str, value: str) -> None:
        try:
            await self.client.set(self._key(key), value)
        except RedisError as exc:
            raise SubstrateError(f"Redis SET {key!r} failed: {exc}") from exc

    async def delete(self, key: str) -> bool:
        try:
            removed = await self.client.delete(self._key(key))
        except RedisError as exc:
            raise SubstrateError(f"Redis DEL {key!r} failed: {exc}") from exc
        return bool(removed)

    async def aclose(self) -> None:
        """Close the client connection pool."""
        await self.client.aclose()
