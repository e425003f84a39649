"""MongoDB repository implementation for task documents."""

from typing import Any

from pymongo import DESCENDING, ReturnDocument

from design_tracker.domain.repositories.task_dto_repository import TaskDtoRepository
from design_tracker.integration.models.task_dto import TaskDto

from .motor_repository import MotorRepository


class MotorTaskDtoRepository(MotorRepository, TaskDtoRepository):
    """MongoDB-based repository for the ``tasks`` collection."""

    collection_name = "tasks"

    async def get_all_async(self) -> list[TaskDto]:
        with self.store_errors("find"):
            cursor = self._collection.find({}).sort("updatedAt", DESCENDING)
            return [TaskDto.model_validate(doc) async for doc in cursor]

    async def get_async(self, task_id: str) -> TaskDto | None:
        oid = self.object_id(task_id)
        with self.store_errors("find_one"):
            doc = await self._collection.find_one({"_id": oid})
        return TaskDto.model_validate(doc) if doc else None

    async def add_async(self, fields: dict[str, Any]) -> TaskDto:
        document = dict(fields)
        with self.store_errors("insert_one"):
            result = await self._collection.insert_one(document)
        return TaskDto.model_validate({**document, "_id": result.inserted_id})

    async def update_async(self, task_id: str, fields: dict[str, Any]) -> TaskDto | None:
        oid = self.object_id(task_id)
        with self.store_errors("find_one_and_update"):
            doc = await self._collection.find_one_and_update(
                {"_id": oid},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        return TaskDto.model_validate(doc) if doc else None

    async def remove_async(self, task_id: str) -> bool:
        oid = self.object_id(task_id)
        with self.store_errors("delete_one"):
            result = await self._collection.delete_one({"_id": oid})
        return result.deleted_count > 0
