"""In-memory implementation of MemberDtoRepository."""

from design_tracker.domain.repositories import MemberDtoRepository
from design_tracker.integration.models.member_dto import MemberDto


class InMemoryMemberDtoRepository(MemberDtoRepository):
    """In-memory implementation of MemberDtoRepository for testing and local runs."""

    def __init__(self) -> None:
        self._members: list[MemberDto] = []
        self.insert_calls = 0

    async def count_async(self) -> int:
        return len(self._members)

    async def get_all_async(self) -> list[MemberDto]:
        return sorted((m.model_copy() for m in self._members), key=lambda m: m.name)

    async def get_by_name_async(self, name: str) -> MemberDto | None:
        return next((m.model_copy() for m in self._members if m.name == name), None)

    async def add_async(self, member: MemberDto) -> MemberDto:
        self.insert_calls += 1
        self._members.append(member.model_copy())
        return member

    async def add_many_async(self, members: list[MemberDto]) -> None:
        self.insert_calls += 1
        self._members.extend(m.model_copy() for m in members)
