"""Pytest configuration and shared fixtures for all tests.

This module provides:
- Test configuration and markers
- In-memory repositories and a deterministic clock
- The FastAPI application wired to in-memory storage
- Repository mocks for service tests
"""

import os
from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from _pytest.config import Config
from fastapi import FastAPI
from fastapi.testclient import TestClient

from design_tracker.api.dependencies import get_member_repository, get_task_repository
from design_tracker.application.settings import Settings
from design_tracker.infrastructure import MongoConnection
from design_tracker.integration.repositories import InMemoryMemberDtoRepository, InMemoryTaskDtoRepository
from design_tracker.main import create_app
from tests.fixtures.factories import StepClock

# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config: Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (in-process app, in-memory store)")
    config.addinivalue_line("markers", "repository: Repository layer tests")
    config.addinivalue_line("markers", "service: Application service tests")
    config.addinivalue_line("markers", "client: Client library tests")


# ============================================================================
# REPOSITORY FIXTURES
# ============================================================================


@pytest.fixture
def task_repository() -> InMemoryTaskDtoRepository:
    """Provide an empty in-memory task repository."""
    return InMemoryTaskDtoRepository()


@pytest.fixture
def member_repository() -> InMemoryMemberDtoRepository:
    """Provide an empty in-memory member repository."""
    return InMemoryMemberDtoRepository()


@pytest.fixture
def mock_repository() -> MagicMock:
    """Provide a mock task repository for testing services in isolation."""
    mock: MagicMock = MagicMock()
    mock.get_all_async = AsyncMock(return_value=[])
    mock.get_async = AsyncMock(return_value=None)
    mock.add_async = AsyncMock()
    mock.update_async = AsyncMock(return_value=None)
    mock.remove_async = AsyncMock(return_value=False)
    return mock


@pytest.fixture
def clock() -> StepClock:
    """Provide a deterministic clock advancing one second per call."""
    return StepClock()


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Provide test-specific application settings (no .env lookup)."""
    return Settings(mongodb_uri="mongodb://localhost:27017", database_name="test_design_tracker", _env_file=None)


@pytest.fixture
def motor_client() -> MagicMock:
    """Provide a stand-in Motor client whose ping succeeds."""
    client: MagicMock = MagicMock(name="AsyncIOMotorClient")
    client.__getitem__.return_value.client.admin.command = AsyncMock(return_value={"ok": 1.0})
    return client


@pytest.fixture
def mongo_connection(test_settings: Settings, motor_client: MagicMock) -> MongoConnection:
    """Provide a connection that never reaches a real server."""
    return MongoConnection(test_settings.mongodb_uri, test_settings.database_name, client_factory=lambda uri: motor_client)


@pytest.fixture
def app(
    test_settings: Settings,
    mongo_connection: MongoConnection,
    task_repository: InMemoryTaskDtoRepository,
    member_repository: InMemoryMemberDtoRepository,
) -> FastAPI:
    """Provide the application with both repositories swapped for in-memory ones."""
    application: FastAPI = create_app(settings=test_settings, connection=mongo_connection)
    application.dependency_overrides[get_task_repository] = lambda: task_repository
    application.dependency_overrides[get_member_repository] = lambda: member_repository
    return application


@pytest.fixture
def test_client(app: FastAPI) -> TestClient:
    """Provide a synchronous HTTP client bound to the application."""
    return TestClient(app)


# ============================================================================
# CLEANUP FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables after each test."""
    original_env: dict[str, str] = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
