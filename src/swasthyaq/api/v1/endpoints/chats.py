"""User and chat board endpoints."""

from fastapi import APIRouter, Query

from swasthyaq.core.models import ChatBoard, ChatMessage, User
from swasthyaq.dependencies import ChatServiceDep
from swasthyaq.schemas.chats import ChatCreate, MessageCreate
from swasthyaq.schemas.common import ApiResponse, Page

router = APIRouter(tags=["chats"])


@router.get("/users", response_model=ApiResponse[Page[User]])
async def list_users(
    service: ChatServiceDep,
    cursor: str | None = None,
    limit: int | None = Query(None, ge=1),
) -> ApiResponse[Page[User]]:
    await service.ensure_seed()
    page = await service.list_users(cursor, limit)
    return ApiResponse(data=Page[User](items=page.items, next=page.next))


@router.get("/chats", response_model=ApiResponse[Page[ChatBoard]])
async def list_chats(
    service: ChatServiceDep,
    cursor: str | None = None,
    limit: int | None = Query(None, ge=1),
) -> ApiResponse[Page[ChatBoard]]:
    await service.ensure_seed()
    page = await service.list_chats(cursor, limit)
    return ApiResponse(data=Page[ChatBoard](items=page.items, next=page.next))


@router.post("/chats", response_model=ApiResponse[ChatBoard])
async def create_chat(payload: ChatCreate, service: ChatServiceDep) -> ApiResponse[ChatBoard]:
    return ApiResponse(data=await service.create_chat(payload.title))


@router.get("/chats/{chat_id}/messages", response_model=ApiResponse[list[ChatMessage]])
async def list_messages(chat_id: str, service: ChatServiceDep) -> ApiResponse[list[ChatMessage]]:
    return ApiResponse(data=await service.list_messages(chat_id))


@router.post("/chats/{chat_id}/messages", response_model=ApiResponse[ChatMessage])
async def send_message(
    chat_id: str, payload: MessageCreate, service: ChatServiceDep
) -> ApiResponse[ChatMessage]:
    return ApiResponse(data=await service.send_message(chat_id, payload.user_id, payload.text))
