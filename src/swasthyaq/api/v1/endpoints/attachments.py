"""Attachment metadata endpoints."""

from fastapi import APIRouter, Query, status
from fastapi.responses import RedirectResponse, Response

from swasthyaq.core.models import Attachment
from swasthyaq.dependencies import AttachmentServiceDep
from swasthyaq.schemas.attachments import AttachmentCreate, AttachmentView
from swasthyaq.schemas.common import ApiResponse

router = APIRouter(tags=["attachments"])


@router.get("/attachments", response_model=ApiResponse[list[AttachmentView]])
async def list_attachments(
    service: AttachmentServiceDep,
    question_id: str | None = Query(None, alias="questionId"),
) -> ApiResponse[list[AttachmentView]]:
    return ApiResponse(data=await service.list(question_id=question_id))


@router.post(
    "/attachments",
    response_model=ApiResponse[Attachment],
    summary="Register attachment metadata",
)
async def create_attachment(
    payload: AttachmentCreate, service: AttachmentServiceDep
) -> ApiResponse[Attachment]:
    return ApiResponse(data=await service.create(payload))


@router.get("/attachments/{attachment_id}", response_model=ApiResponse[AttachmentView])
async def get_attachment(
    attachment_id: str, service: AttachmentServiceDep
) -> ApiResponse[AttachmentView]:
    return ApiResponse(data=await service.get(attachment_id))


@router.delete("/attachments/{attachment_id}", response_model=ApiResponse[dict[str, bool]])
async def delete_attachment(
    attachment_id: str, service: AttachmentServiceDep
) -> ApiResponse[dict[str, bool]]:
    await service.delete(attachment_id)
    return ApiResponse(data={"deleted": True})


@router.get(
    "/attachments/{attachment_id}/download",
    response_class=Response,
    summary="Download an attachment",
    description="Redirects to the attachment's folder link, or serves a generated file.",
)
async def download_attachment(attachment_id: str, service: AttachmentServiceDep) -> Response:
    target = await service.download(attachment_id)
    if isinstance(target, str):
        return RedirectResponse(target, status_code=status.HTTP_302_FOUND)

    filename = target.filename.replace('"', "")
    return Response(
        content=target.content,
        media_type=target.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "X-Mock-Download": "true",
            "Cache-Control": "no-cache",
        },
    )
