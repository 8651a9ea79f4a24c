"""Main API router that combines all endpoint routers."""

from fastapi import APIRouter

from swasthyaq.api.v1.endpoints import (
    admin,
    attachments,
    audit,
    chats,
    health,
    questions,
)

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(health.router)
api_router.include_router(questions.router)
api_router.include_router(attachments.router)
api_router.include_router(chats.router)
api_router.include_router(audit.router)
api_router.include_router(admin.router)
