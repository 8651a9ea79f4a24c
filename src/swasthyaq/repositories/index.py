"""Per-entity-type id index stored as a single substrate value.

The index is an ordered JSON array of ids kept at the key ``"<indexName>"``.
Cursors are opaque base64 tokens wrapping an offset into that array; the
offset is applied to whatever the array holds at the time of the next call,
so an id inserted or removed before the cursor position while a caller is
paging shifts the remaining pages (ids may be skipped or repeated). Within one
consistent snapshot pages never overlap and never skip.
"""

from __future__ import annotations

import asyncio
import base64
import json
import weakref
from collections.abc import Iterable
from dataclasses import dataclass, field

from swasthyaq.core.exceptions import InvalidCursorError, SubstrateError
from swasthyaq.core.logging import get_logger
from swasthyaq.storage.base import KeyValueStore

logger = get_logger(__name__)

# Index writes are serialized per (store, index name) inside this process.
_index_locks: weakref.WeakKeyDictionary[KeyValueStore, dict[str, asyncio.Lock]] = (
    weakref.WeakKeyDictionary()
)


def _lock_for(store: KeyValueStore, name: str) -> asyncio.Lock:
    locks = _index_locks.setdefault(store, {})
    if name not in locks:
        locks[name] = asyncio.Lock()
    return locks[name]


def encode_cursor(offset: int) -> str:
    """Encode an offset into an opaque cursor string."""
    payload = json.dumps({"o": offset}, separators=(",", ":"))
    return base64.urlsafe_b64encode(payload.encode()).decode()


def decode_cursor(cursor: str) -> int:
    """Decode a cursor string back into an offset.

    Raises ``InvalidCursorError`` if the cursor is malformed.
    """
    try:
        payload = json.loads(base64.urlsafe_b64decode(cursor.encode()).decode())
        offset = payload["o"]
    except (ValueError, KeyError, TypeError, UnicodeDecodeError) as exc:
        raise InvalidCursorError(f"Malformed cursor: {cursor!r}") from exc
    if not isinstance(offset, int) or isinstance(offset, bool) or offset < 0:
        raise InvalidCursorError(f"Malformed cursor: {cursor!r}")
    return offset


@dataclass(frozen=True)
class IndexPage:
    items: list[str] = field(default_factory=list)
    next: str | None = None


class EntityIndex:
    """Ordered, duplicate-free list of entity ids for one entity type."""

    def __init__(self, store: KeyValueStore, name: str):
        self.store = store
        self.name = name

    async def ids(self) -> list[str]:
        """Return the full ordered id list."""
        raw = await self.store.get(self.name)
        if raw is None:
            return []
        try:
            ids = json.loads(raw)
        except ValueError as exc:
            raise SubstrateError(f"Malformed index '{self.name}': {exc}") from exc
        if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
            raise SubstrateError(f"Malformed index '{self.name}': expected a list of ids")
        return ids

    def lock(self) -> asyncio.Lock:
        """Lock serializing writes to this index within the process (not reentrant)."""
        return _lock_for(self.store, self.name)

    async def _write(self, ids: list[str]) -> None:
        await self.store.put(self.name, json.dumps(ids, separators=(",", ":")))

    async def replace_locked(self, entity_ids: Iterable[str]) -> None:
        """Overwrite the index with ``entity_ids``; the caller must hold ``lock()``."""
        await self._write(list(dict.fromkeys(entity_ids)))

    async def list(self, cursor: str | None = None, limit: int = 20) -> IndexPage:
        """Return up to ``limit`` ids starting at ``cursor`` (``None`` = start)."""
        limit = max(1, int(limit))
        start = decode_cursor(cursor) if cursor else 0
        ids = await self.ids()
        end = start + limit
        items = ids[start:end]
        next_cursor = encode_cursor(end) if end < len(ids) else None
        return IndexPage(items=items, next=next_cursor)

    async def add(self, entity_id: str) -> None:
        """Append ``entity_id`` unless it is already indexed."""
        await self.add_many([entity_id])

    async def add_many(self, entity_ids: Iterable[str]) -> None:
        async with self.lock():
            ids = await self.ids()
            present = set(ids)
            added = False
            for entity_id in entity_ids:
                if entity_id not in present:
                    ids.append(entity_id)
                    present.add(entity_id)
                    added = True
            if added:
                await self._write(ids)

    async def remove(self, entity_id: str) -> None:
        """Drop ``entity_id`` if indexed; absent ids are ignored."""
        await self.remove_many([entity_id])

    async def remove_many(self, entity_ids: Iterable[str]) -> None:
        doomed = set(entity_ids)
        async with self.lock():
            ids = await self.ids()
            kept = [i for i in ids if i not in doomed]
            if len(kept) != len(ids):
                await self._write(kept)

    async def is_empty(self) -> bool:
        return not await self.ids()

    async def clear(self) -> None:
        async with self.lock():
            await self.store.delete(self.name)
        logger.info("Cleared index '%s'", self.name)
