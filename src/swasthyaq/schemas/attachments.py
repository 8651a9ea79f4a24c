"""Attachment request and response schemas."""

from pydantic import Field

from swasthyaq.core.models import Attachment
from swasthyaq.schemas.common import ApiModel


class AttachmentCreate(ApiModel):
    """Attachment metadata; file bytes are handled outside the storage core."""

    question_id: str | None = None
    label: str | None = None
    folder_path: str = ""
    division: str = ""
    filename: str | None = None
    size: int | None = Field(None, ge=0)
    mime_type: str | None = None


class AttachmentView(Attachment):
    download_url: str

