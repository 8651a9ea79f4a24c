"""Question endpoints: CRUD, bulk status, comments, reporting and export."""

from fastapi import APIRouter, Query

from swasthyaq.core.constants import DIVISIONS
from swasthyaq.core.logging import get_logger
from swasthyaq.core.models import Comment, Question, QuestionStatus
from swasthyaq.dependencies import QuestionServiceDep
from swasthyaq.schemas.common import ApiResponse, Page
from swasthyaq.schemas.questions import (
    BulkStatusRequest,
    BulkStatusResponse,
    CommentCreate,
    Metrics,
    QuestionCreate,
    QuestionDeleteResponse,
    QuestionUpdate,
    RecentActivity,
    TagsResponse,
)
from swasthyaq.services.question_service import QuestionFilters

logger = get_logger(__name__)

router = APIRouter(tags=["questions"])


@router.get("/divisions", response_model=ApiResponse[list[str]], summary="List divisions")
async def list_divisions() -> ApiResponse[list[str]]:
    return ApiResponse(data=list(DIVISIONS))


@router.get("/metrics", response_model=ApiResponse[Metrics], summary="Dashboard metrics")
async def get_metrics(
    service: QuestionServiceDep,
    house: str | None = None,
    include_tags: bool = Query(False, alias="includeTags"),
) -> ApiResponse[Metrics]:
    await service.ensure_seed()
    return ApiResponse(data=await service.metrics(house=house, include_tags=include_tags))


@router.get(
    "/recent-activity",
    response_model=ApiResponse[list[RecentActivity]],
    summary="Most recently updated questions",
)
async def recent_activity(service: QuestionServiceDep) -> ApiResponse[list[RecentActivity]]:
    await service.ensure_seed()
    return ApiResponse(data=await service.recent_activity())


@router.get("/questions", response_model=ApiResponse[Page[Question]], summary="List questions")
async def list_questions(
    service: QuestionServiceDep,
    cursor: str | None = None,
    limit: int | None = Query(None, ge=1),
    division: str | None = None,
    status: QuestionStatus | None = None,
    house: str | None = None,
    tag: str | None = None,
    search: str | None = None,
) -> ApiResponse[Page[Question]]:
    """List one page of questions, optionally filtered.

    Filters are applied to the page read from the index, not to the whole
    collection.
    """
    await service.ensure_seed()
    filters = QuestionFilters(
        division=division, status=status, house=house, tag=tag, search=search
    )
    page = await service.list(cursor=cursor, limit=limit, filters=filters)
    return ApiResponse(data=Page[Question](items=page.items, next=page.next))


@router.post("/questions", response_model=ApiResponse[Question], summary="Create a question")
async def create_question(
    payload: QuestionCreate, service: QuestionServiceDep
) -> ApiResponse[Question]:
    return ApiResponse(data=await service.create(payload))


@router.get("/questions/export-csv", response_model=ApiResponse[str], summary="Export as CSV")
async def export_csv(service: QuestionServiceDep) -> ApiResponse[str]:
    return ApiResponse(data=await service.export_csv())


@router.post(
    "/questions/bulk-status",
    response_model=ApiResponse[BulkStatusResponse],
    summary="Set the status of many questions",
)
async def bulk_status(
    payload: BulkStatusRequest, service: QuestionServiceDep
) -> ApiResponse[BulkStatusResponse]:
    result = await service.bulk_set_status(payload.ids, payload.status)
    return ApiResponse(
        data=BulkStatusResponse(
            count=result.count,
            updated=result.updated,
            skipped=result.skipped,
            failed=result.failed,
        )
    )


@router.get("/questions/{question_id}", response_model=ApiResponse[Question])
async def get_question(question_id: str, service: QuestionServiceDep) -> ApiResponse[Question]:
    return ApiResponse(data=await service.get(question_id))


@router.patch("/questions/{question_id}", response_model=ApiResponse[Question])
async def update_question(
    question_id: str, payload: QuestionUpdate, service: QuestionServiceDep
) -> ApiResponse[Question]:
    return ApiResponse(data=await service.update(question_id, payload))


@router.delete(
    "/questions/{question_id}",
    response_model=ApiResponse[QuestionDeleteResponse],
    summary="Delete a question and its attachments",
)
async def delete_question(
    question_id: str, service: QuestionServiceDep
) -> ApiResponse[QuestionDeleteResponse]:
    result = await service.delete(question_id)
    if result.attachments_failed:
        logger.warning(
            f"Question {question_id} deleted with {len(result.attachments_failed)} "
            "attachment failure(s)"
        )
    return ApiResponse(
        data=QuestionDeleteResponse(
            deleted=result.deleted,
            attachments_deleted=result.attachments_deleted,
            attachments_missing=result.attachments_missing,
            attachments_failed=result.attachments_failed,
        )
    )


@router.post("/questions/{question_id}/comments", response_model=ApiResponse[Comment])
async def add_comment(
    question_id: str, payload: CommentCreate, service: QuestionServiceDep
) -> ApiResponse[Comment]:
    return ApiResponse(data=await service.add_comment(question_id, payload.text, payload.author))


@router.get("/tags", response_model=ApiResponse[TagsResponse], summary="Distinct question tags")
async def list_tags(service: QuestionServiceDep) -> ApiResponse[TagsResponse]:
    return ApiResponse(data=TagsResponse(tags=await service.tags()))
