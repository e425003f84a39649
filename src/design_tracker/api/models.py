"""Request and response schemas that are not stored documents."""

from pydantic import BaseModel


class AddMemberRequest(BaseModel):
    """Body of ``POST /members``. A missing name is reported as a 400 by the service."""

    name: str | None = None


class MemberResponse(BaseModel):
    name: str


class OperationResponse(BaseModel):
    """Generic acknowledgment for mutations that don't return the entity."""

    success: bool
    message: str | None = None
