from .task import DEFAULT_STATUS, DEFAULT_TYPE, FALLBACK_TAG, TaskStatus, TaskTag, TaskType

__all__ = [
    "TaskStatus",
    "TaskType",
    "TaskTag",
    "DEFAULT_STATUS",
    "DEFAULT_TYPE",
    "FALLBACK_TAG",
]
