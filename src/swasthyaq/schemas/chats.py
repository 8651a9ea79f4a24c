"""Chat board request schemas."""

from pydantic import Field

from swasthyaq.schemas.common import ApiModel


class ChatCreate(ApiModel):
    title: str = Field(..., min_length=1)


class MessageCreate(ApiModel):
    user_id: str
    text: str
