from .member_dto_repository import MemberDtoRepository
from .task_dto_repository import TaskDtoRepository

__all__ = ["MemberDtoRepository", "TaskDtoRepository"]
