"""Shared plumbing for Motor-backed repositories."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from design_tracker.domain.exceptions import StoreError

log = logging.getLogger(__name__)


class MotorRepository:
    """Base class binding a repository to one MongoDB collection.

    Driver failures never leave the repository as driver exceptions: they are
    re-raised as ``StoreError`` so the API layer can map them to a generic 500.
    """

    collection_name: str

    def __init__(self, database: AsyncIOMotorDatabase):
        self._collection: AsyncIOMotorCollection = database[self.collection_name]

    @contextmanager
    def store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except PyMongoError as e:
            log.error(f"MongoDB {operation} on '{self.collection_name}' failed: {e}")
            raise StoreError(f"{operation} failed on '{self.collection_name}'") from e

    @staticmethod
    def object_id(document_id: str) -> ObjectId:
        """Parse a route identifier into an ObjectId."""
        try:
            return ObjectId(document_id)
        except (InvalidId, TypeError) as e:
            raise StoreError(f"Malformed identifier: {document_id!r}") from e
