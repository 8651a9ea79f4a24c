"""Attachment metadata workflows."""

from __future__ import annotations

import uuid

from swasthyaq.adapters.mock_download import MockFile, build_mock_file
from swasthyaq.config import Settings
from swasthyaq.core.exceptions import NotFoundError, ValidationError
from swasthyaq.core.logging import get_logger
from swasthyaq.core.models import Attachment
from swasthyaq.core.seed_data import now_ms
from swasthyaq.repositories.entities import AttachmentEntity, QuestionEntity
from swasthyaq.schemas.attachments import AttachmentCreate, AttachmentView
from swasthyaq.storage.base import KeyValueStore

logger = get_logger(__name__)


def download_url(attachment: Attachment) -> str:
    """Folder links are served as-is; everything else goes through the download route."""
    return attachment.folder_path or f"/api/attachments/{attachment.id}/download"


def to_view(attachment: Attachment) -> AttachmentView:
    return AttachmentView(**attachment.model_dump(), download_url=download_url(attachment))


class AttachmentService:
    def __init__(self, store: KeyValueStore, settings: Settings):
        self.store = store
        self.settings = settings

    async def list(self, question_id: str | None = None) -> list[AttachmentView]:
        attachments = await AttachmentEntity.list_all(self.store, self.settings.export_limit)
        if question_id:
            attachments = [a for a in attachments if a.question_id == question_id]
        return [to_view(a) for a in attachments]

    async def get(self, attachment_id: str) -> AttachmentView:
        return to_view(await AttachmentEntity(self.store, attachment_id).get_state())

    async def download(self, attachment_id: str) -> str | MockFile:
        """Return the folder URL to redirect to, or a generated placeholder file.

        Raises:
            NotFoundError: If the attachment does not exist.
        """
        attachment = await AttachmentEntity(self.store, attachment_id).get_state()
        if attachment.folder_path:
            return attachment.folder_path
        logger.info("Serving generated file for attachment %s", attachment_id)
        return build_mock_file(attachment)

    async def create(self, payload: AttachmentCreate) -> Attachment:
        """Store attachment metadata and link it to its question when that exists.

        Raises:
            ValidationError: If ``question_id`` is missing.
        """
        if not (payload.question_id or "").strip():
            raise ValidationError("questionId required")

        attachment = Attachment(
            id=str(uuid.uuid4()),
            question_id=payload.question_id,
            label=payload.filename or payload.label or "Untitled",
            folder_path=payload.folder_path,
            division=payload.division,
            created_at=now_ms(),
            filename=payload.filename,
            size=payload.size,
            mime_type=payload.mime_type,
        )
        await AttachmentEntity.create(self.store, attachment)

        question = QuestionEntity(self.store, attachment.question_id)
        if await question.exists():
            await question.link_attachment(attachment.id)
        else:
            logger.warning(
                "Attachment %s references missing question %s",
                attachment.id,
                attachment.question_id,
            )
        return attachment

    async def delete(self, attachment_id: str) -> None:
        """Delete an attachment and drop it from its question's attachment list."""
        entity = AttachmentEntity(self.store, attachment_id)
        attachment = await entity.get_state()
        await entity.delete()

        question = QuestionEntity(self.store, attachment.question_id)
        try:
            await question.mutate(
                lambda s: s.model_copy(
                    update={"attachment_ids": [a for a in s.attachment_ids if a != attachment_id]}
                )
            )
        except NotFoundError:
            logger.info("Question %s already gone; nothing to unlink", attachment.question_id)
