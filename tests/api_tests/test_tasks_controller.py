"""Tests for the tasks API routes.

Runs the real application with in-memory repositories substituted through
FastAPI dependency overrides.
"""

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import Response

from design_tracker.api.dependencies import get_task_repository, get_task_service
from design_tracker.application.services import TaskService
from design_tracker.domain.exceptions import StoreError
from design_tracker.integration.repositories import InMemoryTaskDtoRepository
from tests.fixtures.factories import StepClock

MISSING_ID = "65a1f0c2e4b0a1b2c3d4e5f6"


def create(client: TestClient, **body: Any) -> dict[str, Any]:
    response: Response = client.post("/api/tasks", json=body)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateTask:
    """Test POST /api/tasks."""

    def test_create_with_only_name(self, test_client: TestClient) -> None:
        """Test the server assigns identity, timestamps and the default status."""
        # Act
        response: Response = test_client.post("/api/tasks", json={"taskName": "Home Screen Re-work"})

        # Assert
        assert response.status_code == 201
        body: dict[str, Any] = response.json()
        assert body["_id"]
        assert body["taskName"] == "Home Screen Re-work"
        assert body["status"] == "Not started"
        assert body["createdAt"] == body["updatedAt"]
        assert body["createdAt"].endswith("Z")

    def test_create_returns_supplied_fields(self, test_client: TestClient) -> None:
        body: dict[str, Any] = create(
            test_client,
            taskName="Settings",
            tags="Nexus",
            taskType="🔧 Fix",
            assignee="Kunal Verma, Akash Roy",
            receivedBy="Akash Roy",
            delivery="2025-02-14",
            attachFile="https://figma.com/file/abc",
        )

        assert body["tags"] == "Nexus"
        assert body["taskType"] == "🔧 Fix"
        assert body["assignee"] == "Kunal Verma, Akash Roy"
        assert body["attachFile"] == "https://figma.com/file/abc"

    @pytest.mark.parametrize("body", [{}, {"taskName": ""}, {"taskName": "   "}, {"description": "no name"}])
    def test_missing_name_is_bad_request(self, test_client: TestClient, body: dict[str, Any]) -> None:
        response: Response = test_client.post("/api/tasks", json=body)

        assert response.status_code == 400
        assert response.json() == {"detail": "Task name is required"}

    def test_malformed_body_is_bad_request(self, test_client: TestClient) -> None:
        """Test schema violations are reported as 400, not 422."""
        response: Response = test_client.post("/api/tasks", json={"taskName": ["not", "a", "string"]})

        assert response.status_code == 400
        assert isinstance(response.json()["detail"], list)

    def test_new_task_appears_first_in_list(self, app: FastAPI, task_repository: InMemoryTaskDtoRepository, clock: StepClock) -> None:
        """Test listing is newest first."""
        app.dependency_overrides[get_task_service] = lambda: TaskService(task_repository, clock=clock)
        test_client: TestClient = TestClient(app)

        create(test_client, taskName="Older")
        newest: dict[str, Any] = create(test_client, taskName="Newer")

        tasks: list[dict[str, Any]] = test_client.get("/api/tasks").json()

        assert tasks[0]["_id"] == newest["_id"]


class TestReadTasks:
    """Test GET /api/tasks and GET /api/tasks/{id}."""

    def test_list_tolerates_non_string_stored_values(self, test_client: TestClient, task_repository: InMemoryTaskDtoRepository) -> None:
        """Test documents written by other tools with dates or numbers in text fields still list."""
        # Arrange
        create(test_client, taskName="Current")
        task_repository._tasks[MISSING_ID] = {
            "_id": MISSING_ID,
            "taskName": "Legacy",
            "delivery": datetime(2025, 3, 1),
            "description": 42,
            "updatedAt": datetime(2024, 1, 1, 8, 30),
        }

        # Act
        response: Response = test_client.get("/api/tasks")

        # Assert
        assert response.status_code == 200
        legacy: dict[str, Any] = next(t for t in response.json() if t["_id"] == MISSING_ID)
        assert legacy["delivery"] == "2025-03-01T00:00:00"
        assert legacy["description"] == "42"
        assert legacy["updatedAt"] == "2024-01-01T08:30:00"

    def test_empty_list(self, test_client: TestClient) -> None:
        response: Response = test_client.get("/api/tasks")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_by_id(self, test_client: TestClient) -> None:
        created: dict[str, Any] = create(test_client, taskName="Home")

        response: Response = test_client.get(f"/api/tasks/{created['_id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_is_not_found(self, test_client: TestClient) -> None:
        response: Response = test_client.get(f"/api/tasks/{MISSING_ID}")

        assert response.status_code == 404
        assert response.json() == {"detail": "Task not found"}

    def test_get_malformed_id_is_server_error(self, test_client: TestClient) -> None:
        """Test a non-ObjectId identifier is a store failure (500), not a 404."""
        response: Response = test_client.get("/api/tasks/not-an-id")

        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to fetch task"}

    def test_store_failure_is_generic_server_error(self, app: FastAPI) -> None:
        """Test store failures expose only the generic message."""
        # Arrange
        failing: MagicMock = MagicMock()
        failing.get_all_async = AsyncMock(side_effect=StoreError("find failed on 'tasks'"))
        app.dependency_overrides[get_task_repository] = lambda: failing

        # Act
        response: Response = TestClient(app).get("/api/tasks")

        # Assert
        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to fetch tasks"}

    def test_unexpected_failure_is_generic_server_error(self, app: FastAPI) -> None:
        failing: MagicMock = MagicMock()
        failing.add_async = AsyncMock(side_effect=KeyError("boom"))
        app.dependency_overrides[get_task_repository] = lambda: failing

        response: Response = TestClient(app).post("/api/tasks", json={"taskName": "Home"})

        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to create task"}


class TestUpdateTask:
    """Test PUT /api/tasks/{id}."""

    def test_partial_update(self, test_client: TestClient) -> None:
        """Test only supplied fields change and ``updatedAt`` is refreshed."""
        # Arrange
        created: dict[str, Any] = create(test_client, taskName="Home", description="Layout", tags="Halo")

        # Act
        response: Response = test_client.put(f"/api/tasks/{created['_id']}", json={"status": "In review", "tags": "Halo"})

        # Assert
        assert response.status_code == 200
        body: dict[str, Any] = response.json()
        assert body["status"] == "In review"
        assert body["description"] == "Layout"
        assert body["tags"] == "Halo"
        assert body["createdAt"] == created["createdAt"]
        assert body["updatedAt"] >= created["updatedAt"]

    def test_body_identifier_is_ignored(self, test_client: TestClient) -> None:
        created: dict[str, Any] = create(test_client, taskName="Home")

        body: dict[str, Any] = test_client.put(f"/api/tasks/{created['_id']}", json={"_id": MISSING_ID, "taskName": "Renamed"}).json()

        assert body["_id"] == created["_id"]
        assert body["taskName"] == "Renamed"
        assert test_client.get(f"/api/tasks/{MISSING_ID}").status_code == 404

    def test_missing_tags_fall_back_to_tintin(self, test_client: TestClient) -> None:
        created: dict[str, Any] = create(test_client, taskName="Home", tags="Nexus")

        body: dict[str, Any] = test_client.put(f"/api/tasks/{created['_id']}", json={"status": "Handed-over"}).json()

        assert body["tags"] == "Tintin"

    def test_unknown_is_not_found(self, test_client: TestClient) -> None:
        response: Response = test_client.put(f"/api/tasks/{MISSING_ID}", json={"status": "In review"})

        assert response.status_code == 404
        assert response.json() == {"detail": "Task not found"}

    def test_malformed_id_is_server_error(self, test_client: TestClient) -> None:
        response: Response = test_client.put("/api/tasks/xyz", json={"status": "In review"})

        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to update task"}


class TestDeleteTask:
    """Test DELETE /api/tasks/{id}."""

    def test_delete_then_get_is_not_found(self, test_client: TestClient) -> None:
        # Arrange
        created: dict[str, Any] = create(test_client, taskName="Home")

        # Act
        response: Response = test_client.delete(f"/api/tasks/{created['_id']}")

        # Assert
        assert response.status_code == 200
        assert response.json()["success"] is True
        assert test_client.get(f"/api/tasks/{created['_id']}").status_code == 404
        assert test_client.get("/api/tasks").json() == []

    def test_delete_unknown_is_not_found(self, test_client: TestClient) -> None:
        response: Response = test_client.delete(f"/api/tasks/{MISSING_ID}")

        assert response.status_code == 404
        assert response.json() == {"detail": "Task not found"}

    def test_delete_malformed_id_is_server_error(self, test_client: TestClient) -> None:
        response: Response = test_client.delete("/api/tasks/xyz")

        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to delete task"}
