"""FastAPI dependency injection utilities."""

from typing import Annotated

from fastapi import Depends

from swasthyaq.config import Settings, get_settings
from swasthyaq.services.attachment_service import AttachmentService
from swasthyaq.services.chat_service import ChatService
from swasthyaq.services.question_service import QuestionService
from swasthyaq.storage import KeyValueStore, create_store

# Common dependencies that can be injected into route handlers
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Module-level cache for the substrate singleton
_store_cache: KeyValueStore | None = None


def get_store(settings: SettingsDep) -> KeyValueStore:
    """Get or create the process-wide key-value store.

    Returns:
        KeyValueStore instance selected by settings.
    """
    global _store_cache

    if _store_cache is None:
        _store_cache = create_store(settings)

    return _store_cache


async def close_store() -> None:
    """Close and forget the cached store (application shutdown)."""
    global _store_cache

    if _store_cache is not None:
        await _store_cache.aclose()
        _store_cache = None


StoreDep = Annotated[KeyValueStore, Depends(get_store)]


def get_question_service(store: StoreDep, settings: SettingsDep) -> QuestionService:
    return QuestionService(store, settings)


def get_attachment_service(store: StoreDep, settings: SettingsDep) -> AttachmentService:
    return AttachmentService(store, settings)


def get_chat_service(store: StoreDep, settings: SettingsDep) -> ChatService:
    return ChatService(store, settings)


# Type aliases for dependency injection
QuestionServiceDep = Annotated[QuestionService, Depends(get_question_service)]
AttachmentServiceDep = Annotated[AttachmentService, Depends(get_attachment_service)]
ChatServiceDep = Annotated[ChatService, Depends(get_chat_service)]
