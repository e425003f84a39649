"""Application services package."""

from .logger import configure_logging
from .member_service import DEFAULT_MEMBERS, MemberService
from .task_service import TaskService
from .timestamps import format_timestamp, utc_now

__all__ = [
    "configure_logging",
    "TaskService",
    "MemberService",
    "DEFAULT_MEMBERS",
    "format_timestamp",
    "utc_now",
]
