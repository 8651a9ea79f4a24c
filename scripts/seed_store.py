#!/usr/bin/env python3
"""Script to seed the configured key-value store with the built-in records."""

import argparse
import asyncio

from swasthyaq.config import get_settings
from swasthyaq.repositories.entities import ENTITY_TYPES
from swasthyaq.storage import create_store


async def seed_store(reseed: bool = False):
    """Seed empty entity types, or replace everything when ``reseed`` is set."""
    settings = get_settings()
    store = create_store(settings)

    print(f"Seeding {settings.storage_backend} store")
    try:
        for entity_cls in ENTITY_TYPES:
            if reseed:
                written = await entity_cls.reseed(store)
                print(f"✓ {entity_cls.index_name}: replaced with {written} record(s)")
            elif await entity_cls.ensure_seed(store):
                print(f"✓ {entity_cls.index_name}: seeded")
            else:
                print(f"- {entity_cls.index_name}: already populated, left unchanged")
    finally:
        await store.aclose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--reseed",
        action="store_true",
        help="Delete every stored record first (destructive)",
    )
    args = parser.parse_args()
    asyncio.run(seed_store(reseed=args.reseed))
