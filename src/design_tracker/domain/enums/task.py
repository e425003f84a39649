"""Task-related enumerations.

These are the vocabularies offered by the task form and the table filters.
Stored documents keep plain strings, so values outside these sets are still
valid records.
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Workflow status of a task."""

    NOT_STARTED = "Not started"
    IN_PROGRESS = "In progress"
    IN_REVIEW = "In review"
    HANDED_OVER = "Handed-over"


class TaskType(str, Enum):
    """Kind of design work."""

    FEATURE = "⭐️ Feature"
    IMPROVEMENT = "📈 Improvement"
    FIX = "🔧 Fix"


class TaskTag(str, Enum):
    """Product line the task belongs to."""

    TINTIN = "Tintin"
    NEXUS = "Nexus"
    HALO = "Halo"


DEFAULT_STATUS = TaskStatus.NOT_STARTED
DEFAULT_TYPE = TaskType.FEATURE
FALLBACK_TAG = TaskTag.TINTIN
