"""Task list view model: filtering, sorting, table rows, modal and deep link state.

The projection shown in the table is recomputed from the full task list on
every read. After any create, update or delete the whole list is fetched
again; there is no local patching and no conflict detection.
"""

import logging
import unicodedata
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

import httpx

from design_tracker.domain.exceptions import DesignTrackerError
from design_tracker.integration.models.task_dto import TaskDto

from .api_client import DesignTrackerClient
from .form import TaskForm

logger = logging.getLogger(__name__)

ALL = "All"
EMPTY_CELL = "—"
DEEP_LINK_PARAM = "task"


class SortField(str, Enum):
    """Sortable task attributes."""

    TASK_NAME = "task_name"
    STATUS = "status"
    ASSIGNEE = "assignee"
    DELIVERY = "delivery"
    UPDATED_AT = "updated_at"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass
class TaskFilters:
    """Search text plus three categorical filters, each "All" or one value."""

    search: str = ""
    status: str = ALL
    tag: str = ALL
    task_type: str = ALL


def _contains(haystack: str | None, needle: str) -> bool:
    return bool(haystack) and needle in haystack.lower()


def matches(task: TaskDto, filters: TaskFilters) -> bool:
    """True when the task passes every categorical filter and, if present, the search.

    Search is a case-insensitive substring match on the name, description or
    assignee. It is only consulted once the categorical filters have passed.
    """
    if filters.status != ALL and task.status != filters.status:
        return False
    if filters.tag != ALL and task.tags != filters.tag:
        return False
    if filters.task_type != ALL and task.task_type != filters.task_type:
        return False
    if filters.search:
        query = filters.search.lower()
        return _contains(task.task_name, query) or _contains(task.description, query) or _contains(task.assignee, query)
    return True


def filter_tasks(tasks: Iterable[TaskDto], filters: TaskFilters) -> list[TaskDto]:
    """Matching tasks in their original relative order."""
    return [task for task in tasks if matches(task, filters)]


def sort_value(task: TaskDto, field: SortField) -> str:
    value = getattr(task, field.value, None)
    return value if isinstance(value, str) else ""


def _strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def collation_key(value: str) -> tuple[str, str, str]:
    """Multi-level key approximating locale collation rules.

    Base letters compare first, ignoring accents and case. Accents break
    ties next, then case with lowercase before uppercase.
    """
    folded = value.casefold()
    return _strip_accents(folded), unicodedata.normalize("NFKD", folded), value.swapcase()


def sort_tasks(tasks: Iterable[TaskDto], field: SortField, direction: SortDirection) -> list[TaskDto]:
    """Stable sort on the field's string value; a missing value sorts as the empty string."""
    return sorted(
        tasks,
        key=lambda task: collation_key(sort_value(task, field)),
        reverse=direction is SortDirection.DESC,
    )


def format_date(value: str | None) -> str:
    """Render a stored date as "Jan 5, 2025"; unparseable values are shown verbatim."""
    if not value:
        return EMPTY_CELL
    try:
        moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return f"{moment:%b} {moment.day}, {moment.year}"


@dataclass(frozen=True)
class TaskRow:
    """One table row, ready for display."""

    index: int
    task: TaskDto
    assignee: str
    received_by: str
    delivery: str
    updated: str
    design_link: str | None
    product_doc_link: str | None


def to_row(index: int, task: TaskDto) -> TaskRow:
    return TaskRow(
        index=index,
        task=task,
        assignee=task.assignee or EMPTY_CELL,
        received_by=task.received_by or EMPTY_CELL,
        delivery=format_date(task.delivery),
        updated=format_date(task.updated_at),
        design_link=task.attach_file or None,
        product_doc_link=task.product_doc or None,
    )


class TaskViewModel:
    """Client-side state of the task table.

    Holds the last fetched snapshot, the filters, the sort and the modal.
    ``address`` is the page URL; the open task's identifier is kept in its
    ``task`` query parameter so a shared link reopens the task.
    """

    def __init__(
        self,
        client: DesignTrackerClient,
        address: str = "http://localhost/",
        confirm: Callable[[str], bool] = lambda message: False,
    ):
        self.client = client
        self.confirm = confirm
        self.address = httpx.URL(address)
        self.tasks: list[TaskDto] = []
        self.members: list[str] = []
        self.loading = False
        self.loaded = False
        self.filters = TaskFilters()
        self.sort_field = SortField.UPDATED_AT
        self.sort_direction = SortDirection.DESC
        self.modal_task: TaskDto | None = None
        self.show_modal = False
        self.form: TaskForm | None = None

    # =========================================================================
    # Data
    # =========================================================================

    async def refresh(self) -> None:
        """Replace the snapshot with the server's full list.

        On failure the error is logged and the previous snapshot stays.
        """
        self.loading = True
        try:
            self.tasks = await self.client.list_tasks()
            self.loaded = True
        except (httpx.HTTPError, DesignTrackerError) as e:
            logger.error(f"Failed to fetch tasks: {e}")
        finally:
            self.loading = False

    async def load_members(self) -> None:
        try:
            self.members[:] = await self.client.list_members()
        except (httpx.HTTPError, DesignTrackerError) as e:
            logger.error(f"Failed to fetch members: {e}")

    async def load(self) -> None:
        """Initial page load: tasks, members, then reopen a deep-linked task."""
        await self.refresh()
        await self.load_members()
        self.open_from_address()

    async def save(self, task: TaskDto) -> None:
        """Create or update, then re-fetch the list even when the write failed."""
        try:
            if task.id:
                await self.client.update_task(task.id, task)
            else:
                await self.client.create_task(task)
        finally:
            await self.refresh()

    async def delete(self, task_id: str) -> None:
        try:
            await self.client.delete_task(task_id)
        finally:
            await self.refresh()

    # =========================================================================
    # Projection
    # =========================================================================

    def toggle_sort(self, field: SortField) -> None:
        """Same field flips direction; a different field starts ascending."""
        field = SortField(field)
        if self.sort_field is field:
            self.sort_direction = SortDirection.ASC if self.sort_direction is SortDirection.DESC else SortDirection.DESC
        else:
            self.sort_field = field
            self.sort_direction = SortDirection.ASC

    @property
    def visible_tasks(self) -> list[TaskDto]:
        return sort_tasks(filter_tasks(self.tasks, self.filters), self.sort_field, self.sort_direction)

    @property
    def count(self) -> int:
        return len(self.visible_tasks)

    def rows(self) -> list[TaskRow]:
        return [to_row(i, task) for i, task in enumerate(self.visible_tasks, start=1)]

    def sort_indicator(self, field: SortField) -> str:
        if self.sort_field is not field:
            return "↕"
        return "↑" if self.sort_direction is SortDirection.ASC else "↓"

    # =========================================================================
    # Modal and deep link
    # =========================================================================

    def _open(self, task: TaskDto | None) -> TaskForm:
        self.modal_task = task
        self.show_modal = True
        self.form = TaskForm(
            task,
            self.client,
            on_save=self.save,
            on_close=self.close_modal,
            on_delete=self.delete,
            confirm=self.confirm,
            members=self.members,
        )
        return self.form

    def open_new(self) -> TaskForm:
        return self._open(None)

    def open_edit(self, task: TaskDto) -> TaskForm:
        if task.id:
            self.address = self.address.copy_set_param(DEEP_LINK_PARAM, task.id)
        return self._open(task)

    def close_modal(self) -> None:
        self.show_modal = False
        self.modal_task = None
        self.form = None
        self.address = self.address.copy_remove_param(DEEP_LINK_PARAM)

    def open_from_address(self) -> TaskForm | None:
        """Open the task named in the address, once the list has loaded. No match does nothing."""
        task_id = self.address.params.get(DEEP_LINK_PARAM)
        if not task_id or not self.loaded:
            return None
        task = next((t for t in self.tasks if t.id == task_id), None)
        if task is None:
            return None
        return self.open_edit(task)
