"""Question workflows built on the indexed entity storage core."""

from __future__ import annotations

import asyncio
import csv
import io
import uuid
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from swasthyaq.config import Settings
from swasthyaq.core.constants import DEFAULT_COMMENT_AUTHOR, RECENT_ACTIVITY_SIZE, TOP_TAGS_SIZE
from swasthyaq.core.exceptions import NotFoundError, StorageError, ValidationError
from swasthyaq.core.logging import get_logger
from swasthyaq.core.models import Comment, House, Question, QuestionStatus
from swasthyaq.core.seed_data import now_ms
from swasthyaq.repositories.entities import AttachmentEntity, QuestionEntity
from swasthyaq.repositories.indexed_entity import EntityPage
from swasthyaq.schemas.questions import (
    DivisionCount,
    HouseCount,
    Metrics,
    QuestionCreate,
    QuestionUpdate,
    RecentActivity,
    StatusCount,
    TagCount,
)
from swasthyaq.storage.base import KeyValueStore

logger = get_logger(__name__)

CSV_HEADERS = [
    "id",
    "ticketNumber",
    "memberName",
    "house",
    "title",
    "division",
    "status",
    "tags",
    "createdAt",
    "updatedAt",
    "body",
    "answer",
]


def normalize_tags(tags: Any) -> list[str]:
    """Lowercase tags, strip a leading '#', drop blanks."""
    if not isinstance(tags, (list, tuple)):
        return []
    normalized = (str(t).lower().removeprefix("#").strip() for t in tags)
    return [t for t in normalized if t]


def _iso(ms: int) -> str:
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc).isoformat()


@dataclass
class QuestionFilters:
    division: str | None = None
    status: QuestionStatus | None = None
    house: str | None = None
    tag: str | None = None
    search: str | None = None

    def matches(self, q: Question) -> bool:
        if self.division and q.division != self.division:
            return False
        if self.status and q.status != self.status:
            return False
        if self.house and q.house.value.lower() != self.house.lower():
            return False
        if self.tag and self.tag.lower() not in q.tags:
            return False
        if self.search:
            term = self.search.lower()
            haystacks = (q.title, q.body, q.ticket_number, q.member_name)
            if not any(term in h.lower() for h in haystacks):
                return False
        return True


@dataclass
class BulkStatusResult:
    """Outcome of a bulk status change.

    ``count`` is the number of ids requested, not the number changed; use
    ``updated`` and ``skipped`` for per-id results.
    """

    count: int
    updated: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)


@dataclass
class CascadeDeleteResult:
    deleted: bool
    attachments_deleted: list[str] = field(default_factory=list)
    attachments_missing: list[str] = field(default_factory=list)
    attachments_failed: dict[str, str] = field(default_factory=dict)


class QuestionService:
    """Question use cases: CRUD, bulk status, cascading delete, reporting."""

    def __init__(self, store: KeyValueStore, settings: Settings):
        self.store = store
        self.settings = settings

    async def ensure_seed(self) -> None:
        await QuestionEntity.ensure_seed(self.store)
        await AttachmentEntity.ensure_seed(self.store)

    async def _all_questions(self) -> list[Question]:
        return await QuestionEntity.list_all(self.store, self.settings.export_limit)

    async def create(self, payload: QuestionCreate) -> Question:
        """Create a question with a generated id.

        Raises:
            ValidationError: If title or division is missing.
        """
        data = payload.model_dump(exclude_unset=True)
        if not (payload.title or "").strip() or not (payload.division or "").strip():
            raise ValidationError("Missing required fields: title and division")

        now = now_ms()
        data.update(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            status=payload.status or QuestionStatus.DRAFT,
            tags=normalize_tags(data.get("tags")),
        )
        try:
            question = Question.model_validate(data)
        except PydanticValidationError as exc:
            raise ValidationError(f"Invalid question: {exc}") from exc

        await QuestionEntity.create(self.store, question)
        logger.info("Created question %s (%s)", question.id, question.division)
        return question

    async def get(self, question_id: str) -> Question:
        return await QuestionEntity(self.store, question_id).get_state()

    async def update(self, question_id: str, payload: QuestionUpdate) -> Question:
        sent = payload.model_dump(exclude_unset=True)
        values = {k: v for k, v in sent.items() if v is not None}
        # Only fields whose default is None can be cleared with an explicit null.
        unset = [
            k for k, v in sent.items() if v is None and Question.model_fields[k].default is None
        ]
        if "tags" in values:
            values["tags"] = normalize_tags(values["tags"])
        values["updated_at"] = now_ms()
        return await QuestionEntity(self.store, question_id).patch(values, unset=unset)

    async def list(
        self,
        cursor: str | None = None,
        limit: int | None = None,
        filters: QuestionFilters | None = None,
    ) -> EntityPage[Question]:
        """Return one index page, filtered.

        Filters apply to the page that was read, so a filtered page can hold
        fewer than ``limit`` items while ``next`` still points further on.
        """
        size = min(limit or self.settings.default_page_size, self.settings.max_page_size)
        page = await QuestionEntity.list(self.store, cursor, size)
        if filters is None:
            return page
        return EntityPage(items=[q for q in page.items if filters.matches(q)], next=page.next)

    async def bulk_set_status(self, ids: list[str], status: QuestionStatus) -> BulkStatusResult:
        """Set ``status`` on every existing id, concurrently and independently."""
        now = now_ms()
        result = BulkStatusResult(count=len(ids))

        async def _apply(question_id: str) -> None:
            await QuestionEntity(self.store, question_id).mutate(
                lambda s: s.model_copy(update={"status": status, "updated_at": now})
            )

        outcomes = await asyncio.gather(*(_apply(i) for i in ids), return_exceptions=True)
        for question_id, outcome in zip(ids, outcomes):
            if isinstance(outcome, NotFoundError):
                result.skipped.append(question_id)
            elif isinstance(outcome, StorageError):
                result.failed[question_id] = outcome.message
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                result.updated.append(question_id)

        logger.info(
            "Bulk status %s: %d updated, %d skipped, %d failed",
            status.value,
            len(result.updated),
            len(result.skipped),
            len(result.failed),
        )
        return result

    async def delete(self, question_id: str) -> CascadeDeleteResult:
        """Delete a question and the attachments it references.

        Attachments are removed first. The question is deleted even if some
        attachment deletes fail; those failures are reported in the result.
        """
        question = await self.get(question_id)

        attachments = await AttachmentEntity.delete_many(self.store, question.attachment_ids)
        if attachments.failed:
            logger.error(
                "Question %s: %d attachment(s) could not be deleted: %s",
                question_id,
                len(attachments.failed),
                attachments.failed,
            )

        await QuestionEntity(self.store, question_id).delete()
        return CascadeDeleteResult(
            deleted=True,
            attachments_deleted=attachments.succeeded,
            attachments_missing=attachments.missing,
            attachments_failed=attachments.failed,
        )

    async def add_comment(self, question_id: str, text: str, author: str | None = None) -> Comment:
        return await QuestionEntity(self.store, question_id).add_comment(
            text, author or DEFAULT_COMMENT_AUTHOR
        )

    async def metrics(self, house: str | None = None, include_tags: bool = False) -> Metrics:
        questions = await self._all_questions()
        attachments = await AttachmentEntity.list_all(self.store, self.settings.export_limit)

        valid_houses = {h.value.lower() for h in House}
        if house and house.lower() in valid_houses:
            questions = [q for q in questions if q.house.value.lower() == house.lower()]

        by_status = Counter({s: 0 for s in QuestionStatus})
        by_division: Counter[str] = Counter()
        by_house: Counter[House] = Counter()
        tag_counts: Counter[str] = Counter()
        for q in questions:
            by_status[q.status] += 1
            by_division[q.division] += 1
            by_house[q.house] += 1
            if include_tags:
                tag_counts.update(q.tags)

        top_tags = None
        if include_tags:
            top_tags = [TagCount(tag=t, count=c) for t, c in tag_counts.most_common(TOP_TAGS_SIZE)]

        return Metrics(
            by_status=[StatusCount(status=s, count=c) for s, c in by_status.items()],
            by_division=[DivisionCount(division=d, count=c) for d, c in by_division.items()],
            by_house=[HouseCount(house=h, count=c) for h, c in by_house.items()],
            total_questions=len(questions),
            total_attachments=len(attachments),
            top_tags=top_tags,
        )

    async def recent_activity(self) -> list[RecentActivity]:
        questions = sorted(await self._all_questions(), key=lambda q: q.updated_at, reverse=True)
        return [
            RecentActivity(
                id=q.id,
                title=q.title,
                status=q.status,
                updated_at=q.updated_at,
                ticket_number=q.ticket_number,
                tags=q.tags,
            )
            for q in questions[:RECENT_ACTIVITY_SIZE]
        ]

    async def tags(self) -> list[str]:
        return sorted({t for q in await self._all_questions() for t in q.tags})

    async def export_csv(self) -> str:
        """Render every question as CSV (empty string when there are none)."""
        questions = await self._all_questions()
        if not questions:
            return ""

        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADERS)
        for q in questions:
            writer.writerow(
                [
                    q.id,
                    q.ticket_number,
                    q.member_name,
                    q.house.value,
                    q.title,
                    q.division,
                    q.status.value,
                    ", ".join(q.tags),
                    _iso(q.created_at),
                    _iso(q.updated_at),
                    q.body.replace("\n", " "),
                    (q.answer or "").replace("\n", " "),
                ]
            )
        return buffer.getvalue()
