"""FastAPI dependencies wiring request handlers to the document store.

The MongoConnection lives on ``app.state`` (created by the application
factory); everything below it is built per request. Tests override
``get_task_repository`` / ``get_member_repository`` to run without MongoDB.
"""

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from design_tracker.application.services import MemberService, TaskService
from design_tracker.domain.repositories import MemberDtoRepository, TaskDtoRepository
from design_tracker.infrastructure import MongoConnection
from design_tracker.integration.repositories import MotorMemberDtoRepository, MotorTaskDtoRepository


def get_mongo_connection(request: Request) -> MongoConnection:
    """Get the MongoConnection owned by the application.

    Raises:
        RuntimeError: If the application factory did not attach a connection
    """
    connection = getattr(request.app.state, "mongo", None)
    if connection is None:
        raise RuntimeError("MongoConnection not found in application state. Create the app with create_app().")
    return connection


async def get_database(connection: MongoConnection = Depends(get_mongo_connection)) -> AsyncIterator[AsyncIOMotorDatabase]:
    async with connection.database() as db:
        yield db


def get_task_repository(db: AsyncIOMotorDatabase = Depends(get_database)) -> TaskDtoRepository:
    return MotorTaskDtoRepository(db)


def get_member_repository(db: AsyncIOMotorDatabase = Depends(get_database)) -> MemberDtoRepository:
    return MotorMemberDtoRepository(db)


def get_task_service(task_repository: TaskDtoRepository = Depends(get_task_repository)) -> TaskService:
    return TaskService(task_repository)


def get_member_service(member_repository: MemberDtoRepository = Depends(get_member_repository)) -> MemberService:
    return MemberService(member_repository)
