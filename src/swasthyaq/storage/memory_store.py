"""Process-local key-value substrate used for development and tests."""

from __future__ import annotations

import asyncio

from swasthyaq.core.exceptions import SubstrateError
from swasthyaq.core.logging import get_logger

logger = get_logger(__name__)


class InMemoryKeyValueStore:
    """Dict-backed substrate.

    Every operation yields to the event loop once before touching the dict, so
    concurrent callers interleave at the same points they would against a
    networked store.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        await asyncio.sleep(0)
        return self._data.get(key)

    async def put(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise SubstrateError(f"Substrate values must be str, got {type(value).__name__}")
        await asyncio.sleep(0)
        self._data[key] = value

    async def delete(self, key: str) -> bool:
        await asyncio.sleep(0)
        return self._data.pop(key, None) is not None

    async def aclose(self) -> None:
        logger.debug("Closing in-memory store holding %d keys", len(self._data))

    def keys(self) -> list[str]:
        """Return a snapshot of stored keys (diagnostics only)."""
        return list(self._data)

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)
