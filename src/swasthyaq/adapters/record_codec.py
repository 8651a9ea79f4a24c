"""Translate between domain records and the substrate's string values."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import ValidationError as PydanticValidationError

from swasthyaq.core.constants import K_RECORD, K_VERSION, KEY_SEPARATOR
from swasthyaq.core.exceptions import SubstrateError, ValidationError
from swasthyaq.core.models import Record

RecordT = TypeVar("RecordT", bound=Record)


@dataclass(frozen=True)
class StoredRecord(Generic[RecordT]):
    """A decoded record together with its write counter."""

    record: RecordT
    version: int


class RecordCodec(Generic[RecordT]):
    """Key derivation and (de)serialization for one entity type.

    Values are JSON envelopes ``{"version": n, "record": {...}}`` with record
    fields under their camelCase aliases.
    """

    def __init__(self, entity_name: str, model: type[RecordT]):
        if not entity_name or KEY_SEPARATOR in entity_name:
            raise ValueError(f"Invalid entity name: {entity_name!r}")
        self.entity_name = entity_name
        self.model = model

    def key(self, entity_id: str) -> str:
        """Return ``"<entityName>/<id>"`` for ``entity_id``."""
        if not entity_id:
            raise ValidationError(f"{self.entity_name} id must be a non-empty string")
        return f"{self.entity_name}{KEY_SEPARATOR}{entity_id}"

    def to_payload(self, record: RecordT) -> dict[str, Any]:
        return record.model_dump(mode="json", by_alias=True)

    def encode(self, record: RecordT, version: int) -> str:
        """Serialize a record and its version into a substrate value."""
        try:
            return json.dumps(
                {K_VERSION: version, K_RECORD: self.to_payload(record)},
                separators=(",", ":"),
            )
        except (TypeError, ValueError) as exc:
            raise SubstrateError(
                f"Cannot serialize {self.entity_name} '{record.id}': {exc}"
            ) from exc

    def decode(self, raw: str) -> StoredRecord[RecordT]:
        """Parse a substrate value back into a record.

        Raises ``SubstrateError`` if the value is not a well-formed envelope.
        """
        try:
            envelope = json.loads(raw)
            version = int(envelope[K_VERSION])
            record = self.model.model_validate(envelope[K_RECORD])
        except (ValueError, KeyError, TypeError, PydanticValidationError) as exc:
            raise SubstrateError(f"Malformed {self.entity_name} value: {exc}") from exc
        return StoredRecord(record=record, version=version)
