"""Domain records persisted by the entity storage core.

Records are immutable; changes go through ``IndexedEntity.mutate`` which
produces a new instance. Field names are snake_case in Python and camelCase
on the wire and in storage.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class QuestionStatus(str, Enum):
    """Lifecycle of a parliamentary question."""

    DRAFT = "Draft"
    SUBMITTED = "Submitted"
    ADMITTED = "Admitted"
    NON_ADMITTED = "Non-Admitted"
    ANSWERED = "Answered"
    CLOSED = "Closed"


class House(str, Enum):
    """House of Parliament a question was tabled in."""

    LOK_SABHA = "Lok Sabha"
    RAJYA_SABHA = "Rajya Sabha"


class Record(BaseModel):
    """Base for every stored record: identified by ``id``, camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=False,
    )

    id: str


class User(Record):
    name: str = ""


class Chat(Record):
    title: str = ""


class ChatMessage(Record):
    chat_id: str
    user_id: str
    text: str
    ts: int = Field(..., description="Epoch millis")


class ChatBoard(Chat):
    """A chat together with its messages, stored as one record."""

    messages: list[ChatMessage] = Field(default_factory=list)


class Comment(Record):
    text: str
    author: str
    created_at: int


class Question(Record):
    title: str = ""
    body: str = ""
    division: str = ""
    status: QuestionStatus = QuestionStatus.DRAFT
    house: House = House.LOK_SABHA
    ticket_number: str = ""
    member_name: str = ""
    attachment_ids: list[str] = Field(
        default_factory=list,
        description="Weak back-references; attachments own themselves.",
    )
    tags: list[str] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created_at: int = 0
    updated_at: int = 0
    created_by: str = ""
    answer: str | None = None


class Attachment(Record):
    question_id: str = ""
    label: str = ""
    folder_path: str = ""
    division: str = ""
    created_at: int = 0
    filename: str | None = None
    size: int | None = None
    mime_type: str | None = None
    storage_key: str | None = None


class AuditLog(Record):
    """One recorded action on an entity, shown on the admin page."""

    action: str
    entity: str
    entity_id: str
    timestamp: int
    user: str
