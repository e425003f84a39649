"""Abstract repository for task documents."""

from abc import ABC, abstractmethod
from typing import Any

from design_tracker.integration.models.task_dto import TaskDto


class TaskDtoRepository(ABC):
    """Narrow document-store contract the task service depends on.

    Implementations raise ``StoreError`` for connectivity failures and
    malformed identifiers; "no match" is reported through return values.
    """

    @abstractmethod
    async def get_all_async(self) -> list[TaskDto]:
        """Retrieve all tasks, most recently updated first."""
        pass

    @abstractmethod
    async def get_async(self, task_id: str) -> TaskDto | None:
        """Retrieve a task by identifier, or None when it does not exist."""
        pass

    @abstractmethod
    async def add_async(self, fields: dict[str, Any]) -> TaskDto:
        """Insert a new task document and return it with its assigned identifier."""
        pass

    @abstractmethod
    async def update_async(self, task_id: str, fields: dict[str, Any]) -> TaskDto | None:
        """Overwrite the given fields only and return the post-update document, or None when nothing matched."""
        pass

    @abstractmethod
    async def remove_async(self, task_id: str) -> bool:
        """Hard-delete a task. Returns False when nothing matched."""
        pass
