"""In-memory implementation of TaskDtoRepository."""

import copy
from typing import Any

from bson import ObjectId

from design_tracker.domain.exceptions import StoreError
from design_tracker.domain.repositories import TaskDtoRepository
from design_tracker.integration.models.task_dto import TaskDto


class InMemoryTaskDtoRepository(TaskDtoRepository):
    """In-memory implementation of TaskDtoRepository for testing and local runs.

    Mirrors the MongoDB behaviour that matters to the service: ObjectId
    identifiers, malformed identifiers rejected as store errors, partial
    ``$set`` merges and ``updatedAt`` descending ordering.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, dict[str, Any]] = {}

    @staticmethod
    def _check_id(task_id: str) -> None:
        if not ObjectId.is_valid(task_id):
            raise StoreError(f"Malformed identifier: {task_id!r}")

    async def get_all_async(self) -> list[TaskDto]:
        """Retrieve all tasks, most recently updated first."""
        tasks = [TaskDto.model_validate(copy.deepcopy(doc)) for doc in self._tasks.values()]
        return sorted(tasks, key=lambda task: task.updated_at or "", reverse=True)

    async def get_async(self, task_id: str) -> TaskDto | None:
        """Retrieve a task by ID."""
        self._check_id(task_id)
        doc = self._tasks.get(task_id)
        return TaskDto.model_validate(copy.deepcopy(doc)) if doc else None

    async def add_async(self, fields: dict[str, Any]) -> TaskDto:
        """Add a new task."""
        task_id = str(ObjectId())
        self._tasks[task_id] = {**copy.deepcopy(fields), "_id": task_id}
        return TaskDto.model_validate(copy.deepcopy(self._tasks[task_id]))

    async def update_async(self, task_id: str, fields: dict[str, Any]) -> TaskDto | None:
        """Merge fields into an existing task."""
        self._check_id(task_id)
        doc = self._tasks.get(task_id)
        if doc is None:
            return None
        doc.update(copy.deepcopy(fields))
        return TaskDto.model_validate(copy.deepcopy(doc))

    async def remove_async(self, task_id: str) -> bool:
        """Delete a task by ID."""
        self._check_id(task_id)
        return self._tasks.pop(task_id, None) is not None
