"""Abstract repository for the member roster."""

from abc import ABC, abstractmethod

from design_tracker.integration.models.member_dto import MemberDto


class MemberDtoRepository(ABC):
    """Narrow document-store contract the member service depends on."""

    @abstractmethod
    async def count_async(self) -> int:
        """Count stored members."""
        pass

    @abstractmethod
    async def get_all_async(self) -> list[MemberDto]:
        """Retrieve all members ordered by name ascending."""
        pass

    @abstractmethod
    async def get_by_name_async(self, name: str) -> MemberDto | None:
        """Retrieve a member by exact name."""
        pass

    @abstractmethod
    async def add_async(self, member: MemberDto) -> MemberDto:
        """Insert a single member."""
        pass

    @abstractmethod
    async def add_many_async(self, members: list[MemberDto]) -> None:
        """Insert several members at once."""
        pass
