"""
Tasks Router - design task CRUD

Endpoints:
- GET /api/tasks - List all tasks, most recently updated first
- POST /api/tasks - Create a task
- GET /api/tasks/{task_id} - Get a task
- PUT /api/tasks/{task_id} - Partially update a task
- DELETE /api/tasks/{task_id} - Delete a task (irreversible)
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from design_tracker.api.dependencies import get_task_service
from design_tracker.api.errors import error_boundary
from design_tracker.api.models import OperationResponse
from design_tracker.application.services import TaskService
from design_tracker.integration.models.task_dto import TaskDto

logger = logging.getLogger(__name__)

router = APIRouter()

TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]


@router.get(
    "",
    response_model=list[TaskDto],
    response_model_exclude_none=True,
    summary="List tasks",
    description="All tasks ordered by `updatedAt` descending. No server-side filtering or pagination.",
)
async def list_tasks(service: TaskServiceDep) -> list[TaskDto]:
    with error_boundary("Failed to fetch tasks"):
        return await service.list_tasks()


@router.post(
    "",
    response_model=TaskDto,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    description="Accepts a partial task. The server assigns the identifier and both timestamps.",
)
async def create_task(payload: TaskDto, service: TaskServiceDep) -> TaskDto:
    with error_boundary("Failed to create task"):
        return await service.create_task(payload)


@router.get(
    "/{task_id}",
    response_model=TaskDto,
    response_model_exclude_none=True,
    summary="Get a task",
)
async def get_task(task_id: str, service: TaskServiceDep) -> TaskDto:
    with error_boundary("Failed to fetch task"):
        return await service.get_task(task_id)


@router.put(
    "/{task_id}",
    response_model=TaskDto,
    response_model_exclude_none=True,
    summary="Update a task",
    description="Partial update: only supplied fields change. Any `_id` in the body is ignored; a missing `tags` is stored as the fallback tag.",
)
async def update_task(task_id: str, payload: TaskDto, service: TaskServiceDep) -> TaskDto:
    with error_boundary("Failed to update task"):
        return await service.update_task(task_id, payload)


@router.delete(
    "/{task_id}",
    response_model=OperationResponse,
    summary="Delete a task",
)
async def delete_task(task_id: str, service: TaskServiceDep) -> OperationResponse:
    with error_boundary("Failed to delete task"):
        await service.delete_task(task_id)
    logger.info(f"Task {task_id} deleted")
    return OperationResponse(success=True, message="Task deleted")
