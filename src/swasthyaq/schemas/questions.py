"""Question request and response schemas."""

from pydantic import Field

from swasthyaq.core.models import House, QuestionStatus
from swasthyaq.schemas.common import ApiModel


class QuestionCreate(ApiModel):
    """Body of ``POST /questions``; title and division are checked by the service."""

    title: str | None = None
    division: str | None = None
    body: str = ""
    status: QuestionStatus | None = None
    house: House = House.LOK_SABHA
    ticket_number: str = ""
    member_name: str = ""
    tags: list[str] | None = None
    created_by: str = ""
    answer: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Availability of anti-venom in district hospitals",
                    "division": "Pharma",
                    "house": "Lok Sabha",
                    "memberName": "Shri R. Kumar",
                    "ticketNumber": "LS-2024-0999",
                    "tags": ["#Anti-Venom", "rural"],
                }
            ]
        }
    }


class QuestionUpdate(ApiModel):
    """Body of ``PATCH /questions/{id}``; only the fields sent are changed."""

    title: str | None = None
    body: str | None = None
    division: str | None = None
    status: QuestionStatus | None = None
    house: House | None = None
    ticket_number: str | None = None
    member_name: str | None = None
    tags: list[str] | None = None
    answer: str | None = Field(None, description="Send null to clear the answer")


class BulkStatusRequest(ApiModel):
    ids: list[str]
    status: QuestionStatus


class BulkStatusResponse(ApiModel):
    count: int = Field(..., description="Number of ids requested")
    updated: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list, description="Ids with no stored question")
    failed: dict[str, str] = Field(default_factory=dict)


class CommentCreate(ApiModel):
    text: str
    author: str | None = None


class QuestionDeleteResponse(ApiModel):
    deleted: bool
    attachments_deleted: list[str] = Field(default_factory=list)
    attachments_missing: list[str] = Field(default_factory=list)
    attachments_failed: dict[str, str] = Field(default_factory=dict)


class StatusCount(ApiModel):
    status: QuestionStatus
    count: int


class DivisionCount(ApiModel):
    division: str
    count: int


class HouseCount(ApiModel):
    house: House
    count: int


class TagCount(ApiModel):
    tag: str
    count: int


class Metrics(ApiModel):
    by_status: list[StatusCount]
    by_division: list[DivisionCount]
    by_house: list[HouseCount]
    total_questions: int
    total_attachments: int
    top_tags: list[TagCount] | None = None


class RecentActivity(ApiModel):
    id: str
    title: str
    status: QuestionStatus
    updated_at: int
    ticket_number: str
    tags: list[str] = Field(default_factory=list)


class TagsResponse(ApiModel):
    tags: list[str]
