"""Member roster service."""

import logging
from collections.abc import Callable, Sequence

from design_tracker.domain.exceptions import ConflictError, ValidationError
from design_tracker.domain.repositories import MemberDtoRepository
from design_tracker.integration.models.member_dto import MemberDto
from design_tracker.observability import members_added, members_seeded

from .timestamps import utc_now

log = logging.getLogger(__name__)

DEFAULT_MEMBERS = ("Kunal Verma", "Akash Roy")


class MemberService:
    """List and add team members.

    Members have no update or delete operation. The roster is seeded with
    the default names the first time it is read while empty.
    """

    def __init__(
        self,
        member_repository: MemberDtoRepository,
        clock: Callable[[], str] = utc_now,
        default_members: Sequence[str] = DEFAULT_MEMBERS,
    ):
        self.member_repository = member_repository
        self.clock = clock
        self.default_members = tuple(default_members)

    async def ensure_members(self) -> int:
        """Seed the default members if, and only if, the roster is empty.

        Returns the number of members inserted.
        """
        count = await self.member_repository.count_async()
        if count > 0:
            return 0

        now = self.clock()
        await self.member_repository.add_many_async([MemberDto(name=name, created_at=now) for name in self.default_members])
        members_seeded.add(len(self.default_members))
        log.info(f"Seeded {len(self.default_members)} default members")
        return len(self.default_members)

    async def list_members(self) -> list[str]:
        """Member names in ascending order."""
        await self.ensure_members()
        members = await self.member_repository.get_all_async()
        return [member.name for member in members]

    async def add_member(self, name: str | None) -> str:
        """Add a member by trimmed name and return the stored name.

        Raises:
            ValidationError: the trimmed name is empty
            ConflictError: a member with that exact trimmed name exists
        """
        trimmed = (name or "").strip()
        if not trimmed:
            raise ValidationError("Name is required")

        if await self.member_repository.get_by_name_async(trimmed) is not None:
            raise ConflictError("Member already exists")

        await self.member_repository.add_async(MemberDto(name=trimmed, created_at=self.clock()))
        members_added.add(1)
        log.info(f"Added member {trimmed!r}")
        return trimmed
