"""Remark endpoints. All of them require a bearer token.

Fixed paths (``/financial/summary``, ``/status/...``, ``/priority/...``) are
declared before ``/{day}`` so they are not captured as dates.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from remarkbook.api.deps import get_current_user, get_remark_service
from remarkbook.models.user import User
from remarkbook.schemas.base import MessageResponse
from remarkbook.schemas.remark import (
    FinancialSummary,
    RemarkCreate,
    RemarkResponse,
    RemarkUpdate,
)
from remarkbook.services.remark import RemarkService

router = APIRouter(prefix="/remarks", tags=["remarks"])

OWNERSHIP_RESPONSES = {
    403: {"description": "Remark belongs to another user"},
    404: {"description": "Remark not found"},
}


@router.post(
    "",
    response_model=RemarkResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create remark",
)
async def create_remark(
    data: RemarkCreate,
    current_user: User = Depends(get_current_user),
    service: RemarkService = Depends(get_remark_service),
):
    return await service.create(current_user, data)


@router.get("", response_model=list[RemarkResponse], summary="List all remarks")
async def list_remarks(
    current_user: User = Depends(get_current_user),
    service: RemarkService = Depends(get_remark_service),
):
    """All of the caller's remarks, newest business date first."""
    return await service.list_all(current_user)


@router.get(
    "/financial/summary",
    response_model=FinancialSummary,
    summary="Financial summary",
)
async def financial_summary(
    current_user: User = Depends(get_current_user),
    service: RemarkService = Depends(get_remark_service),
):
    return await service.financial_summary(current_user)


@router.get(
    "/status/{remark_status}",
    response_model=list[RemarkResponse],
    summary="List remarks by status",
    description="`done` lists completed remarks; any other value lists open ones.",
)
async def list_by_status(
    remark_status: str,
    current_user: User = Depends(get_current_user),
    service: RemarkService = Depends(get_remark_service),
):
    return await service.list_by_status(current_user, remark_status)


@router.get(
    "/priority/{priority}",
    response_model=list[RemarkResponse],
    summary="List remarks by priority",
    responses={400: {"description": "Invalid priority level"}},
)
async def list_by_priority(
    priority: str,
    current_user: User = Depends(get_current_user),
    service: RemarkService = Depends(get_remark_service),
):
    return await service.list_by_priority(current_user, priority)


@router.get(
    "/{day}",
    response_model=list[RemarkResponse],
    summary="List remarks for a day",
    description="Remarks dated within the given local calendar day, most recently created first.",
    responses={400: {"description": "Invalid date format"}},
)
async def list_by_date(
    day: str,
    current_user: User = Depends(get_current_user),
    service: RemarkService = Depends(get_remark_service),
):
    return await service.list_by_date(current_user, day)


@router.put(
    "/{remark_id}",
    response_model=RemarkResponse,
    summary="Update remark",
    responses=OWNERSHIP_RESPONSES,
)
async def update_remark(
    remark_id: UUID,
    data: RemarkUpdate,
    current_user: User = Depends(get_current_user),
    service: RemarkService = Depends(get_remark_service),
):
    return await service.update(current_user, remark_id, data)


@router.patch(
    "/{remark_id}/toggle-done",
    response_model=RemarkResponse,
    summary="Toggle done flag",
    responses=OWNERSHIP_RESPONSES,
)
async def toggle_done(
    remark_id: UUID,
    current_user: User = Depends(get_current_user),
    service: RemarkService = Depends(get_remark_service),
):
    return await service.toggle_done(current_user, remark_id)


@router.delete(
    "/{remark_id}",
    response_model=MessageResponse,
    summary="Delete remark",
    responses=OWNERSHIP_RESPONSES,
)
async def delete_remark(
    remark_id: UUID,
    current_user: User = Depends(get_current_user),
    service: RemarkService = Depends(get_remark_service),
) -> MessageResponse:
    await service.delete(current_user, remark_id)
    return MessageResponse(message="Remark removed")
