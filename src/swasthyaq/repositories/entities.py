"""Concrete entity types: one record per id, one index per type."""

from __future__ import annotations

import uuid

from swasthyaq.core.constants import (
    ATTACHMENT_ENTITY,
    ATTACHMENT_INDEX,
    CHAT_ENTITY,
    CHAT_INDEX,
    QUESTION_ENTITY,
    QUESTION_INDEX,
    USER_ENTITY,
    USER_INDEX,
)
from swasthyaq.core.exceptions import ValidationError
from swasthyaq.core.models import Attachment, ChatBoard, ChatMessage, Comment, Question, User
from swasthyaq.core.seed_data import (
    now_ms,
    seed_attachments,
    seed_chat_boards,
    seed_questions,
    seed_users,
)
from swasthyaq.repositories.indexed_entity import IndexedEntity


class UserEntity(IndexedEntity[User]):
    entity_name = USER_ENTITY
    index_name = USER_INDEX
    model = User

    @classmethod
    def seed_data(cls) -> tuple[User, ...]:
        return seed_users()


class ChatBoardEntity(IndexedEntity[ChatBoard]):
    """A chat board stores its own messages inside its record."""

    entity_name = CHAT_ENTITY
    index_name = CHAT_INDEX
    model = ChatBoard

    @classmethod
    def seed_data(cls) -> tuple[ChatBoard, ...]:
        return seed_chat_boards()

    async def list_messages(self) -> list[ChatMessage]:
        return list((await self.get_state()).messages)

    async def send_message(self, user_id: str, text: str) -> ChatMessage:
        """Append a message to this board and return it."""
        if not user_id or not text.strip():
            raise ValidationError("userId and text are required")
        message = ChatMessage(
            id=str(uuid.uuid4()),
            chat_id=self.id,
            user_id=user_id,
            text=text,
            ts=now_ms(),
        )
        await self.mutate(lambda s: s.model_copy(update={"messages": [*s.messages, message]}))
        return message


class QuestionEntity(IndexedEntity[Question]):
    entity_name = QUESTION_ENTITY
    index_name = QUESTION_INDEX
    model = Question

    @classmethod
    def seed_data(cls) -> tuple[Question, ...]:
        return seed_questions()

    async def add_comment(self, text: str, author: str) -> Comment:
        if not text.strip():
            raise ValidationError("Comment text is required")
        comment = Comment(id=str(uuid.uuid4()), text=text, author=author, created_at=now_ms())
        await self.mutate(lambda s: s.model_copy(update={"comments": [*s.comments, comment]}))
        return comment

    async def link_attachment(self, attachment_id: str) -> Question:
        """Record ``attachment_id`` on the question (idempotent)."""

        def _link(state: Question) -> Question:
            if attachment_id in state.attachment_ids:
                return state
            return state.model_copy(update={"attachment_ids": [*state.attachment_ids, attachment_id]})

        return await self.mutate(_link)


class AttachmentEntity(IndexedEntity[Attachment]):
    entity_name = ATTACHMENT_ENTITY
    index_name = ATTACHMENT_INDEX
    model = Attachment

    @classmethod
    def seed_data(cls) -> tuple[Attachment, ...]:
        return seed_attachments()


# Every stored entity type, in seeding order.
ENTITY_TYPES: tuple[type[IndexedEntity], ...] = (
    QuestionEntity,
    AttachmentEntity,
    UserEntity,
    ChatBoardEntity,
)
