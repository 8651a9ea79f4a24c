"""Users and chat boards."""

from __future__ import annotations

import uuid

from swasthyaq.config import Settings
from swasthyaq.core.exceptions import ValidationError
from swasthyaq.core.models import ChatBoard, ChatMessage, User
from swasthyaq.repositories.entities import ChatBoardEntity, UserEntity
from swasthyaq.repositories.indexed_entity import EntityPage
from swasthyaq.storage.base import KeyValueStore


class ChatService:
    def __init__(self, store: KeyValueStore, settings: Settings):
        self.store = store
        self.settings = settings

    async def ensure_seed(self) -> None:
        await UserEntity.ensure_seed(self.store)
        await ChatBoardEntity.ensure_seed(self.store)

    def _page_size(self, limit: int | None) -> int:
        return min(limit or self.settings.default_page_size, self.settings.max_page_size)

    async def list_users(self, cursor: str | None = None, limit: int | None = None) -> EntityPage[User]:
        return await UserEntity.list(self.store, cursor, self._page_size(limit))

    async def list_chats(
        self, cursor: str | None = None, limit: int | None = None
    ) -> EntityPage[ChatBoard]:
        return await ChatBoardEntity.list(self.store, cursor, self._page_size(limit))

    async def create_chat(self, title: str) -> ChatBoard:
        if not title.strip():
            raise ValidationError("title required")
        board = ChatBoard(id=str(uuid.uuid4()), title=title.strip())
        return await ChatBoardEntity.create(self.store, board)

    async def list_messages(self, chat_id: str) -> list[ChatMessage]:
        return await ChatBoardEntity(self.store, chat_id).list_messages()

    async def send_message(self, chat_id: str, user_id: str, text: str) -> ChatMessage:
        return await ChatBoardEntity(self.store, chat_id).send_message(user_id, text)
