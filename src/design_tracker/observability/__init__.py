"""Observability utilities and metrics."""

from .metrics import members_added, members_seeded, task_processing_time, tasks_created, tasks_deleted, tasks_failed, tasks_updated

__all__ = [
    # Task metrics
    "tasks_created",
    "tasks_updated",
    "tasks_deleted",
    "tasks_failed",
    "task_processing_time",
    # Member metrics
    "members_added",
    "members_seeded",
]
