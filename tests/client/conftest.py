"""Fixtures for client library tests."""

from collections.abc import AsyncIterator
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from design_tracker.client import DesignTrackerClient


@pytest.fixture
def mock_client() -> MagicMock:
    """Provide a DesignTrackerClient double with every call succeeding."""
    mock: MagicMock = MagicMock(spec=DesignTrackerClient)
    mock.list_tasks = AsyncMock(return_value=[])
    mock.get_task = AsyncMock()
    mock.create_task = AsyncMock()
    mock.update_task = AsyncMock()
    mock.delete_task = AsyncMock()
    mock.list_members = AsyncMock(return_value=["Akash Roy", "Kunal Verma"])
    mock.add_member = AsyncMock(side_effect=lambda name: name)
    return mock


@pytest_asyncio.fixture
async def api_client(app: FastAPI) -> AsyncIterator[DesignTrackerClient]:
    """Provide a real client talking to the in-process application."""
    transport: httpx.ASGITransport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield DesignTrackerClient(http_client=http_client)
