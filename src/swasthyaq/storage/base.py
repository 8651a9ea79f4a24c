"""Key-value substrate contract consumed by the entity storage core."""

from __future__ import annotations

from typing import Protocol


class KeyValueStore(Protocol):
    """Durable store addressed by opaque string keys.

    Only single-key operations are offered: there is no scan, no query and no
    multi-key transaction. Read-after-write consistency per key is assumed.
    Implementations raise ``SubstrateError`` for any I/O failure.
    """

    async def get(self, key: str) -> str | None:
        """Return the value stored at ``key``, or ``None`` when absent."""
        ...

    async def put(self, key: str, value: str) -> None:
        """Store ``value`` at ``key``, replacing any previous value."""
        ...

    async def delete(self, key: str) -> bool:
        """Remove ``key``; return True if a value was deleted."""
        ...

    async def aclose(self) -> None:
        """Release client resources."""
        ...
