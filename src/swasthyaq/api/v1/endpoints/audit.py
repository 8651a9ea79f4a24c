"""Audit log endpoint."""

from fastapi import APIRouter

from swasthyaq.core.models import AuditLog
from swasthyaq.core.seed_data import seed_audit_logs
from swasthyaq.schemas.common import ApiResponse

router = APIRouter(tags=["audit"])


@router.get(
    "/audit-logs",
    response_model=ApiResponse[list[AuditLog]],
    summary="List audit log entries",
    description="Returns the built-in activity history; entries are not persisted.",
)
async def list_audit_logs() -> ApiResponse[list[AuditLog]]:
    return ApiResponse(data=list(seed_audit_logs()))
