"""Client-side library: API client, task list view model and task form."""

from .api_client import DesignTrackerClient
from .form import TaskForm, normalize_delivery
from .multi_select import MemberPicker, join_names, parse_names
from .view_model import ALL, SortDirection, SortField, TaskFilters, TaskRow, TaskViewModel, filter_tasks, format_date, matches, sort_tasks

__all__ = [
    "DesignTrackerClient",
    "TaskForm",
    "normalize_delivery",
    "MemberPicker",
    "join_names",
    "parse_names",
    "ALL",
    "SortDirection",
    "SortField",
    "TaskFilters",
    "TaskRow",
    "TaskViewModel",
    "filter_tasks",
    "format_date",
    "matches",
    "sort_tasks",
]
