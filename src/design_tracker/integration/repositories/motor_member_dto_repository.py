"""MongoDB repository implementation for the member roster."""

from pymongo import ASCENDING

from design_tracker.domain.repositories.member_dto_repository import MemberDtoRepository
from design_tracker.integration.models.member_dto import MemberDto

from .motor_repository import MotorRepository


class MotorMemberDtoRepository(MotorRepository, MemberDtoRepository):
    """MongoDB-based repository for the ``members`` collection."""

    collection_name = "members"

    async def count_async(self) -> int:
        with self.store_errors("count_documents"):
            return await self._collection.count_documents({})

    async def get_all_async(self) -> list[MemberDto]:
        with self.store_errors("find"):
            cursor = self._collection.find({}).sort("name", ASCENDING)
            return [MemberDto.model_validate(doc) async for doc in cursor]

    async def get_by_name_async(self, name: str) -> MemberDto | None:
        with self.store_errors("find_one"):
            doc = await self._collection.find_one({"name": name})
        return MemberDto.model_validate(doc) if doc else None

    async def add_async(self, member: MemberDto) -> MemberDto:
        with self.store_errors("insert_one"):
            await self._collection.insert_one(member.model_dump(by_alias=True))
        return member

    async def add_many_async(self, members: list[MemberDto]) -> None:
        if not members:
            return
        with self.store_errors("insert_many"):
            await self._collection.insert_many([member.model_dump(by_alias=True) for member in members])
