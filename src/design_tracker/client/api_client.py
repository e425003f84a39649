"""Async HTTP client for the Design Tracker REST API.

Usage:
    async with DesignTrackerClient("http://localhost:8080") as client:
        tasks = await client.list_tasks()
        created = await client.create_task(TaskDto(task_name="Home Screen Re-work"))
"""

import logging
from typing import Any

import httpx

from design_tracker.domain.exceptions import ConflictError, DesignTrackerError, NotFoundError, StoreError, ValidationError
from design_tracker.integration.models.task_dto import TaskDto

logger = logging.getLogger(__name__)

_ERRORS_BY_STATUS: dict[int, type[DesignTrackerError]] = {
    400: ValidationError,
    404: NotFoundError,
    409: ConflictError,
}


def _raise_for_status(response: httpx.Response) -> None:
    """Map a non-2xx response onto the shared error taxonomy."""
    if response.is_success:
        return
    try:
        detail = response.json().get("detail")
    except ValueError:
        detail = None
    if not isinstance(detail, str):
        detail = response.reason_phrase or f"HTTP {response.status_code}"
    raise _ERRORS_BY_STATUS.get(response.status_code, StoreError)(detail)


def _task_body(task: TaskDto | dict[str, Any]) -> dict[str, Any]:
    if isinstance(task, TaskDto):
        return task.model_dump(by_alias=True, exclude_none=True)
    return dict(task)


class DesignTrackerClient:
    """Thin wrapper over ``httpx.AsyncClient`` for the tasks and members endpoints.

    Pass ``http_client`` to reuse an existing client (for instance one bound
    to an ASGI transport); otherwise the client owns and closes its own.
    """

    def __init__(self, base_url: str = "http://localhost:8080", http_client: httpx.AsyncClient | None = None, timeout: float = 10.0):
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> "DesignTrackerClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    # =========================================================================
    # Tasks
    # =========================================================================

    async def list_tasks(self) -> list[TaskDto]:
        response = await self._http.get("/api/tasks")
        _raise_for_status(response)
        return [TaskDto.model_validate(item) for item in response.json()]

    async def get_task(self, task_id: str) -> TaskDto:
        response = await self._http.get(f"/api/tasks/{task_id}")
        _raise_for_status(response)
        return TaskDto.model_validate(response.json())

    async def create_task(self, task: TaskDto | dict[str, Any]) -> TaskDto:
        response = await self._http.post("/api/tasks", json=_task_body(task))
        _raise_for_status(response)
        return TaskDto.model_validate(response.json())

    async def update_task(self, task_id: str, task: TaskDto | dict[str, Any]) -> TaskDto:
        response = await self._http.put(f"/api/tasks/{task_id}", json=_task_body(task))
        _raise_for_status(response)
        return TaskDto.model_validate(response.json())

    async def delete_task(self, task_id: str) -> None:
        response = await self._http.delete(f"/api/tasks/{task_id}")
        _raise_for_status(response)

    # =========================================================================
    # Members
    # =========================================================================

    async def list_members(self) -> list[str]:
        response = await self._http.get("/api/members")
        _raise_for_status(response)
        return list(response.json())

    async def add_member(self, name: str) -> str:
        """Add a member; raises ConflictError when the name already exists."""
        response = await self._http.post("/api/members", json={"name": name})
        _raise_for_status(response)
        return response.json()["name"]
