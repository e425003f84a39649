from .member_dto import MemberDto
from .task_dto import TaskDto

__all__ = ["MemberDto", "TaskDto"]
