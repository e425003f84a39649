"""Task form: the local draft behind the create/edit modal."""

import logging
from collections.abc import Awaitable, Callable
from datetime import date
from enum import Enum
from typing import Any

from design_tracker.domain.enums import DEFAULT_STATUS, DEFAULT_TYPE, FALLBACK_TAG, TaskStatus, TaskTag, TaskType
from design_tracker.domain.exceptions import ValidationError
from design_tracker.integration.models.task_dto import TaskDto

from .api_client import DesignTrackerClient
from .multi_select import MemberPicker

logger = logging.getLogger(__name__)

DELETE_CONFIRMATION = "Delete this task?"

# Fields offered as a fixed choice list, with the value shown when the draft is empty.
CHOICE_FIELDS: dict[str, tuple[type[Enum], Enum]] = {
    "status": (TaskStatus, DEFAULT_STATUS),
    "tags": (TaskTag, FALLBACK_TAG),
    "task_type": (TaskType, DEFAULT_TYPE),
}
TEXT_FIELDS = ("task_name", "description", "attach_file", "product_doc")


def normalize_delivery(value: str | None) -> str:
    """Reduce a delivery date to ``YYYY-MM-DD``; empty input clears it."""
    if not value:
        return ""
    try:
        return date.fromisoformat(value[:10]).isoformat()
    except ValueError as e:
        raise ValidationError(f"Invalid delivery date: {value!r}") from e


class TaskForm:
    """Holds a draft of one task and submits it.

    A draft with an identifier is saved as an update, otherwise as a create.
    The ``saving`` / ``deleting`` flags stay up while the form's own request
    is in flight, and repeated submissions during that window are ignored.

    Args:
        task: Task being edited, or None for a new task
        client: API client, used by the member pickers to add new names
        on_save: Persists the draft and refreshes the list
        on_close: Closes the modal
        on_delete: Deletes by identifier and refreshes the list
        confirm: Asks the user a yes/no question
        members: Known member names
    """

    def __init__(
        self,
        task: TaskDto | None,
        client: DesignTrackerClient,
        on_save: Callable[[TaskDto], Awaitable[None]],
        on_close: Callable[[], None],
        on_delete: Callable[[str], Awaitable[None]] | None = None,
        confirm: Callable[[str], bool] = lambda message: False,
        members: list[str] | None = None,
    ):
        self.draft = task.model_copy(deep=True) if task is not None else TaskDto()
        self.on_save = on_save
        self.on_close = on_close
        self.on_delete = on_delete
        self.confirm = confirm
        self.members = members if members is not None else []
        self.assignee = MemberPicker(self.draft.assignee, self.members, client)
        self.received_by = MemberPicker(self.draft.received_by, self.members, client)
        self.saving = False
        self.deleting = False

    @property
    def is_edit(self) -> bool:
        return self.draft.id is not None

    @property
    def title(self) -> str:
        return "Edit Task" if self.is_edit else "New Task"

    def display_value(self, field: str) -> str:
        """Value a form control shows; empty choice fields show their default."""
        value: Any = getattr(self.draft, field)
        if field in CHOICE_FIELDS and not value:
            return CHOICE_FIELDS[field][1].value
        if field == "delivery":
            try:
                return normalize_delivery(value)
            except ValidationError:
                return value
        return value or ""

    def set(self, field: str, value: str) -> None:
        """Change one field of the draft.

        Choice fields only accept their known values here; values already
        stored on an edited task are kept until the user changes them.
        """
        if field in CHOICE_FIELDS:
            choices, _ = CHOICE_FIELDS[field]
            allowed = [choice.value for choice in choices]
            if value not in allowed:
                raise ValidationError(f"{field} must be one of {allowed}, got {value!r}")
            setattr(self.draft, field, value)
        elif field == "delivery":
            self.draft.delivery = normalize_delivery(value)
        elif field in TEXT_FIELDS:
            setattr(self.draft, field, value)
        else:
            raise ValidationError(f"Unknown task field: {field!r}")

    def _collect(self) -> TaskDto:
        draft = self.draft.model_copy(deep=True)
        for field in CHOICE_FIELDS:
            if not getattr(draft, field):
                setattr(draft, field, self.display_value(field))
        if self.assignee.selected or draft.assignee is not None:
            draft.assignee = self.assignee.value
        if self.received_by.selected or draft.received_by is not None:
            draft.received_by = self.received_by.value
        return draft

    async def submit(self) -> bool:
        """Save the draft, then close. Returns False when ignored as a duplicate."""
        if self.saving:
            return False
        if not (self.draft.task_name or "").strip():
            raise ValidationError("Task name is required")

        draft = self._collect()
        self.saving = True
        try:
            await self.on_save(draft)
            self.on_close()
        finally:
            self.saving = False
        return True

    async def delete(self) -> bool:
        """Delete the edited task after confirmation, then close.

        Returns False when not applicable (new task, no delete handler),
        already in flight, or declined by the user.
        """
        if not self.is_edit or self.on_delete is None or self.deleting:
            return False
        if not self.confirm(DELETE_CONFIRMATION):
            return False

        self.deleting = True
        try:
            await self.on_delete(self.draft.id)
            self.on_close()
        finally:
            self.deleting = False
        return True
