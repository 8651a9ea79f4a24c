"""Tests for the Redis substrate using a mocked async client."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from swasthyaq.config import Settings
from swasthyaq.core.exceptions import SubstrateError
from swasthyaq.storage import InMemoryKeyValueStore, RedisKeyValueStore, create_store

pytestmark = pytest.mark.asyncio


@pytest.fixture
def redis_client() -> AsyncMock:
    client = AsyncMock()
    client.get.return_value = None
    client.delete.return_value = 0
    return client


@pytest.fixture
def redis_store(redis_client: AsyncMock) -> RedisKeyValueStore:
    return RedisKeyValueStore(prefix="test:", client=redis_client)


async def test_keys_are_prefixed(redis_store: RedisKeyValueStore, redis_client: AsyncMock) -> None:
    await redis_store.put("question/q1", "{}")
    redis_client.set.assert_awaited_once_with("test:question/q1", "{}")

    await redis_store.get("questions")
    redis_client.get.assert_awaited_once_with("test:questions")


async def test_get_decodes_bytes(redis_store: RedisKeyValueStore, redis_client: AsyncMock) -> None:
    redis_client.get.return_value = b'["q1"]'
    assert await redis_store.get("questions") == '["q1"]'


async def test_delete_maps_count_to_bool(
    redis_store: RedisKeyValueStore, redis_client: AsyncMock
) -> None:
    redis_client.delete.return_value = 1
    assert await redis_store.delete("user/u1") is True
    redis_client.delete.return_value = 0
    assert await redis_store.delete("user/u1") is False


async def test_redis_errors_become_substrate_errors(
    redis_store: RedisKeyValueStore, redis_client: AsyncMock
) -> None:
    redis_client.get.side_effect = RedisConnectionError("connection refused")
    with pytest.raises(SubstrateError, match="connection refused"):
        await redis_store.get("questions")


async def test_aclose_closes_client(
    redis_store: RedisKeyValueStore, redis_client: AsyncMock
) -> None:
    await redis_store.aclose()
    redis_client.aclose.assert_awaited_once()


async def test_create_store_selects_backend() -> None:
    assert isinstance(create_store(Settings(storage_backend="memory")), InMemoryKeyValueStore)

    store = create_store(Settings(storage_backend="redis", redis_key_prefix="x:"))
    assert isinstance(store, RedisKeyValueStore)
    assert store.prefix == "x:"
    await store.aclose()
