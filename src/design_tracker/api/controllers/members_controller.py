"""
Members Router - team roster

Endpoints:
- GET /api/members - List member names (seeds defaults on an empty roster)
- POST /api/members - Add a member
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from design_tracker.api.dependencies import get_member_service
from design_tracker.api.errors import error_boundary
from design_tracker.api.models import AddMemberRequest, MemberResponse
from design_tracker.application.services import MemberService

router = APIRouter()

MemberServiceDep = Annotated[MemberService, Depends(get_member_service)]


@router.get("", response_model=list[str], summary="List member names")
async def list_members(service: MemberServiceDep) -> list[str]:
    with error_boundary("Failed to fetch members"):
        return await service.list_members()


@router.post(
    "",
    response_model=MemberResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a member",
    description="400 when the trimmed name is empty, 409 when the member already exists.",
)
async def add_member(request: AddMemberRequest, service: MemberServiceDep) -> MemberResponse:
    with error_boundary("Failed to add member"):
        name = await service.add_member(request.name)
    return MemberResponse(name=name)
