"""Indexed entity: one record per id plus membership in its type's index.

Writes are ordered so that an interrupted create leaves an unindexed record
(invisible to listing) rather than an index entry pointing at nothing, and an
interrupted delete leaves an index entry whose record is gone, which ``list``
skips. There is no cross-request locking: two concurrent ``mutate`` calls on
the same id both read the same state and the later write wins. Callers that
need to detect that pass ``expected_version``.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import ValidationError as PydanticValidationError

from swasthyaq.adapters.record_codec import RecordCodec, StoredRecord
from swasthyaq.core.exceptions import (
    AlreadyExistsError,
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from swasthyaq.core.logging import get_logger
from swasthyaq.core.models import Record
from swasthyaq.repositories.index import EntityIndex
from swasthyaq.storage.base import KeyValueStore

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


@dataclass(frozen=True)
class EntityPage(Generic[RecordT]):
    items: list[RecordT] = field(default_factory=list)
    next: str | None = None


@dataclass
class BatchResult:
    """Per-id outcome of a batch operation; batches are not atomic."""

    succeeded: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def count(self) -> int:
        return len(self.succeeded)

    @property
    def ok(self) -> bool:
        return not self.missing and not self.failed


class IndexedEntity(Generic[RecordT]):
    """Base class for a storable entity type.

    Subclasses set ``entity_name`` (key namespace), ``index_name`` (index key)
    and ``model`` (record type), and may override ``seed_data``.
    """

    entity_name: ClassVar[str]
    index_name: ClassVar[str]
    model: ClassVar[type[Record]]

    def __init__(self, store: KeyValueStore, entity_id: str):
        self.store = store
        self.id = entity_id
        self.key = self.codec().key(entity_id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id!r})"

    @classmethod
    def codec(cls) -> RecordCodec[RecordT]:
        return RecordCodec(cls.entity_name, cls.model)

    @classmethod
    def index(cls, store: KeyValueStore) -> EntityIndex:
        return EntityIndex(store, cls.index_name)

    @classmethod
    def seed_data(cls) -> tuple[RecordT, ...]:
        """Records written by ``ensure_seed``; fresh objects on every call."""
        return ()

    # ------------------------------------------------------------------ #
    # Single-entity operations
    # ------------------------------------------------------------------ #

    async def _read(self) -> StoredRecord[RecordT] | None:
        raw = await self.store.get(self.key)
        if raw is None:
            return None
        return self.codec().decode(raw)

    async def exists(self) -> bool:
        """True iff the record is present in the substrate (not merely indexed)."""
        return await self.store.get(self.key) is not None

    async def get_versioned(self) -> StoredRecord[RecordT]:
        stored = await self._read()
        if stored is None:
            raise NotFoundError(self.entity_name, self.id)
        return stored

    async def get_state(self) -> RecordT:
        """Return the stored record.

        Raises:
            NotFoundError: If no record exists for this id.
        """
        return (await self.get_versioned()).record

    async def mutate(
        self,
        fn: Callable[[RecordT], RecordT],
        *,
        expected_version: int | None = None,
    ) -> RecordT:
        """Read-modify-write the record with ``fn``.

        The record id cannot change: whatever id ``fn`` returns is replaced by
        this entity's id.

        Args:
            fn: Transform from the current record to the new record.
            expected_version: If given, the write is refused with
                ``ConflictError`` unless the stored version matches.

        Returns:
            The record as written.
        """
        stored = await self.get_versioned()
        if expected_version is not None and stored.version != expected_version:
            logger.info(
                "Refusing stale write to %s (expected v%s, found v%s)",
                self.key,
                expected_version,
                stored.version,
            )
            raise ConflictError(self.entity_name, self.id, expected_version, stored.version)

        updated = fn(stored.record)
        if not isinstance(updated, self.model):
            raise ValidationError(
                f"{self.entity_name} transform returned {type(updated).__name__}, "
                f"expected {self.model.__name__}"
            )
        if updated.id != self.id:
            updated = updated.model_copy(update={"id": self.id})

        await self.store.put(self.key, self.codec().encode(updated, stored.version + 1))
        return updated

    async def patch(
        self,
        values: Mapping[str, Any],
        *,
        unset: Iterable[str] = (),
        expected_version: int | None = None,
    ) -> RecordT:
        """Shallow-merge ``values`` into the record.

        Patching only adds or overwrites fields. Optional fields named in
        ``unset`` are reset to their defaults.
        """
        cleared = tuple(unset)
        known = self.model.model_fields
        unknown = [name for name in (*values, *cleared) if name not in known]
        if unknown:
            raise ValidationError(f"Unknown {self.entity_name} fields: {', '.join(unknown)}")

        model = self.model

        def _merge(state: RecordT) -> RecordT:
            data = state.model_dump()
            data.update(values)
            for name in cleared:
                data.pop(name, None)
            try:
                return model.model_validate(data)
            except PydanticValidationError as exc:
                raise ValidationError(f"Invalid {state.__class__.__name__} patch: {exc}") from exc

        return await self.mutate(_merge, expected_version=expected_version)

    async def delete(self) -> None:
        """Delete the record, then drop it from the index.

        Raises:
            NotFoundError: If no record existed. The index is cleaned anyway.
        """
        deleted = await self.store.delete(self.key)
        await self.index(self.store).remove(self.id)
        if not deleted:
            raise NotFoundError(self.entity_name, self.id)
        logger.info("Deleted %s", self.key)

    # ------------------------------------------------------------------ #
    # Type-level operations
    # ------------------------------------------------------------------ #

    @classmethod
    async def create(cls, store: KeyValueStore, record: RecordT) -> RecordT:
        """Store a new record and index it.

        Raises:
            AlreadyExistsError: If a record with the same id is already stored.
        """
        if not isinstance(record, cls.model):
            raise ValidationError(
                f"{cls.entity_name} expects {cls.model.__name__}, got {type(record).__name__}"
            )
        entity = cls(store, record.id)
        if await entity.exists():
            raise AlreadyExistsError(cls.entity_name, record.id)

        await store.put(entity.key, cls.codec().encode(record, 1))
        await cls.index(store).add(record.id)
        logger.debug("Created %s", entity.key)
        return record

    @classmethod
    async def list(
        cls,
        store: KeyValueStore,
        cursor: str | None = None,
        limit: int = 20,
    ) -> EntityPage[RecordT]:
        """Return one page of records in index order.

        Ids whose record has vanished are skipped and logged, not raised.
        """
        page = await cls.index(store).list(cursor, limit)
        stored = await asyncio.gather(*(cls(store, entity_id)._read() for entity_id in page.items))

        items: list[RecordT] = []
        for entity_id, entry in zip(page.items, stored):
            if entry is None:
                logger.warning("Skipping %s/%s: indexed but no record", cls.entity_name, entity_id)
                continue
            items.append(entry.record)
        return EntityPage(items=items, next=page.next)

    @classmethod
    async def list_all(cls, store: KeyValueStore, limit: int = 1000) -> list[RecordT]:
        """Return up to ``limit`` records from the start of the index."""
        return (await cls.list(store, None, limit)).items

    @classmethod
    async def _put_records(cls, store: KeyValueStore, records: Sequence[RecordT]) -> None:
        codec = cls.codec()
        await asyncio.gather(*(store.put(codec.key(r.id), codec.encode(r, 1)) for r in records))

    @classmethod
    async def ensure_seed(
        cls,
        store: KeyValueStore,
        seed: Sequence[RecordT] | None = None,
    ) -> bool:
        """Populate the store from seed data if this type's index is empty.

        Args:
            store: Substrate to seed.
            seed: Records to write; defaults to ``seed_data()``.

        Returns:
            True if records were written, False if the index was already populated.

        The emptiness check and the writes happen under the index lock, so
        overlapping calls in one process seed at most once.
        """
        index = cls.index(store)
        async with index.lock():
            if not await index.is_empty():
                return False

            records = tuple(seed) if seed is not None else cls.seed_data()
            await cls._put_records(store, records)
            await index.replace_locked(r.id for r in records)

        logger.info("Seeded %d %s record(s)", len(records), cls.entity_name)
        return bool(records)

    @classmethod
    async def reseed(cls, store: KeyValueStore, seed: Sequence[RecordT] | None = None) -> int:
        """Destructively replace every record of this type with seed data."""
        index = cls.index(store)
        codec = cls.codec()
        records = tuple(seed) if seed is not None else cls.seed_data()
        async with index.lock():
            existing = await index.ids()
            await asyncio.gather(*(store.delete(codec.key(entity_id)) for entity_id in existing))
            await cls._put_records(store, records)
            await index.replace_locked(r.id for r in records)

        logger.warning(
            "Reseeded %s: removed %d record(s), wrote %d",
            cls.entity_name,
            len(existing),
            len(records),
        )
        return len(records)

    @classmethod
    async def delete_many(cls, store: KeyValueStore, ids: Iterable[str]) -> BatchResult:
        """Delete each id independently and concurrently.

        Partial success is possible; the result lists the outcome per id.
        """
        targets = list(dict.fromkeys(ids))

        async def _delete(entity_id: str) -> None:
            await cls(store, entity_id).delete()

        outcomes = await asyncio.gather(
            *(_delete(entity_id) for entity_id in targets),
            return_exceptions=True,
        )

        result = BatchResult()
        for entity_id, outcome in zip(targets, outcomes):
            if isinstance(outcome, NotFoundError):
                result.missing.append(entity_id)
            elif isinstance(outcome, StorageError):
                logger.error("Failed to delete %s/%s: %s", cls.entity_name, entity_id, outcome)
                result.failed[entity_id] = outcome.message
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                result.succeeded.append(entity_id)
        return result
