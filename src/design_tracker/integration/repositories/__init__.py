from .in_memory_member_repository import InMemoryMemberDtoRepository
from .in_memory_task_repository import InMemoryTaskDtoRepository
from .motor_member_dto_repository import MotorMemberDtoRepository
from .motor_repository import MotorRepository
from .motor_task_dto_repository import MotorTaskDtoRepository

__all__ = [
    "MotorRepository",
    "MotorTaskDtoRepository",
    "MotorMemberDtoRepository",
    "InMemoryTaskDtoRepository",
    "InMemoryMemberDtoRepository",
]
