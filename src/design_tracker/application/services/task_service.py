"""Task service: the write rules applied on top of the task repository."""

import logging
import time
from collections.abc import Callable
from typing import Any

from opentelemetry import trace

from design_tracker.domain.enums import DEFAULT_STATUS, FALLBACK_TAG
from design_tracker.domain.exceptions import NotFoundError, ValidationError
from design_tracker.domain.repositories import TaskDtoRepository
from design_tracker.integration.models.task_dto import TaskDto
from design_tracker.observability import task_processing_time, tasks_created, tasks_deleted, tasks_failed, tasks_updated

from .timestamps import utc_now

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

# Never taken from a request body: identity comes from the route, timestamps from the server.
SERVER_MANAGED_FIELDS = ("_id", "id", "createdAt", "updatedAt")


def _strip_server_fields(fields: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in fields.items() if key not in SERVER_MANAGED_FIELDS}


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


class TaskService:
    """Stateless task operations.

    The service does not validate enum-like fields (status, tags, taskType):
    any string is stored as-is. Only the task name is required.
    """

    def __init__(self, task_repository: TaskDtoRepository, clock: Callable[[], str] = utc_now):
        self.task_repository = task_repository
        self.clock = clock

    async def list_tasks(self) -> list[TaskDto]:
        """All tasks, most recently updated first."""
        return await self.task_repository.get_all_async()

    async def get_task(self, task_id: str) -> TaskDto:
        task = await self.task_repository.get_async(task_id)
        if task is None:
            raise NotFoundError("Task not found")
        return task

    async def create_task(self, payload: TaskDto) -> TaskDto:
        """Persist a new task.

        ``createdAt`` and ``updatedAt`` are stamped with the same instant and
        a missing status defaults to "Not started".
        """
        start_time = time.time()
        fields = _strip_server_fields(payload.to_fields())

        if _is_blank(fields.get("taskName")):
            tasks_failed.add(1, {"reason": "validation", "operation": "create"})
            raise ValidationError("Task name is required")

        with tracer.start_as_current_span("create_task") as span:
            if not fields.get("status"):
                fields["status"] = DEFAULT_STATUS.value
            now = self.clock()
            fields["createdAt"] = now
            fields["updatedAt"] = now
            span.set_attribute("task.status", str(fields["status"]))
            span.set_attribute("task.tags", str(fields.get("tags") or ""))

            created = await self.task_repository.add_async(fields)

        tasks_created.add(1, {"status": str(created.status), "has_assignee": bool(created.assignee)})
        task_processing_time.record((time.time() - start_time) * 1000, {"operation": "create"})
        log.info(f"Created task {created.id}: {created.task_name!r}")
        return created

    async def update_task(self, task_id: str, payload: TaskDto) -> TaskDto:
        """Apply a partial update and return the post-update document.

        Only the supplied fields are overwritten. An identifier or creation
        timestamp in the body is ignored, ``updatedAt`` is always refreshed,
        and a payload without ``tags`` stores the fallback tag.
        """
        start_time = time.time()
        fields = _strip_server_fields(payload.to_fields())

        if "taskName" in fields and _is_blank(fields["taskName"]):
            tasks_failed.add(1, {"reason": "validation", "operation": "update"})
            raise ValidationError("Task name is required")

        with tracer.start_as_current_span("update_task") as span:
            fields["updatedAt"] = self.clock()
            if not fields.get("tags"):
                fields["tags"] = FALLBACK_TAG.value
            span.set_attribute("task.id", task_id)
            span.set_attribute("task.fields_updated", ",".join(sorted(fields)))

            updated = await self.task_repository.update_async(task_id, fields)

        if updated is None:
            tasks_failed.add(1, {"reason": "not_found", "operation": "update"})
            raise NotFoundError("Task not found")

        tasks_updated.add(1, {"fields_count": len(fields)})
        task_processing_time.record((time.time() - start_time) * 1000, {"operation": "update"})
        return updated

    async def delete_task(self, task_id: str) -> None:
        """Hard-delete a task. Irreversible."""
        start_time = time.time()
        if not await self.task_repository.remove_async(task_id):
            tasks_failed.add(1, {"reason": "not_found", "operation": "delete"})
            raise NotFoundError("Task not found")

        tasks_deleted.add(1)
        task_processing_time.record((time.time() - start_time) * 1000, {"operation": "delete"})
        log.info(f"Deleted task {task_id}")
