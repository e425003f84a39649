"""MongoDB connection ownership.

Uses Motor (async MongoDB driver). The connection is an explicit object,
created by the application factory and handed to request handlers through
dependency injection, instead of a module-level global.
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from enum import Enum

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

log = logging.getLogger(__name__)


class ConnectionMode(str, Enum):
    """How the Motor client is shared between requests."""

    PERSISTENT = "persistent"  # one client for the life of the process
    EPHEMERAL = "ephemeral"  # a fresh client per request


class MongoConnection:
    """Lazily-initialised handle on the document store.

    In persistent mode the client is created on first use and reused until
    :meth:`close` is called at shutdown. In ephemeral mode every
    :meth:`database` block opens and closes its own client, so no state
    survives between requests.
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        mode: ConnectionMode = ConnectionMode.PERSISTENT,
        client_factory: Callable[[str], AsyncIOMotorClient] = AsyncIOMotorClient,
    ):
        self._uri = uri
        self._database_name = database_name
        self._mode = ConnectionMode(mode)
        self._client_factory = client_factory
        self._client: AsyncIOMotorClient | None = None

    @property
    def mode(self) -> ConnectionMode:
        return self._mode

    @property
    def is_open(self) -> bool:
        return self._client is not None

    def _redacted_uri(self) -> str:
        return self._uri.split("@")[-1]

    def _get_client(self) -> AsyncIOMotorClient:
        if self._client is None:
            log.info(f"Connecting to MongoDB: {self._redacted_uri()} / {self._database_name}")
            self._client = self._client_factory(self._uri)
        return self._client

    @asynccontextmanager
    async def database(self) -> AsyncIterator[AsyncIOMotorDatabase]:
        """Yield the application database for one unit of work."""
        if self._mode is ConnectionMode.PERSISTENT:
            yield self._get_client()[self._database_name]
            return

        client = self._client_factory(self._uri)
        try:
            yield client[self._database_name]
        finally:
            client.close()

    async def ping(self) -> None:
        """Round-trip to the server; raises the driver error when unreachable."""
        async with self.database() as db:
            await db.client.admin.command("ping")

    def close(self) -> None:
        """Close the shared client, if one was opened."""
        if self._client is not None:
            self._client.close()
            self._client = None
            log.info("MongoDB connection closed")
