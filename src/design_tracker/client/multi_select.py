"""Multi-name fields (assignee, receivedBy).

Stored as one comma-and-space separated string, edited as a set of names.
"""

import logging
from collections.abc import Iterable

from design_tracker.domain.exceptions import ConflictError, ValidationError

from .api_client import DesignTrackerClient

logger = logging.getLogger(__name__)

SEPARATOR = ", "


def parse_names(value: str | None) -> list[str]:
    """Split a stored value into trimmed, non-empty names, dropping repeats (first occurrence wins)."""
    if not value:
        return []
    names: dict[str, None] = {}
    for part in value.split(","):
        name = part.strip()
        if name:
            names.setdefault(name, None)
    return list(names)


def join_names(names: Iterable[str]) -> str:
    return SEPARATOR.join(names)


class MemberPicker:
    """Toggle-list over the known member names, backing one multi-name field.

    ``known_members`` is shared with the owning form so a name added through
    one picker is offered by the others.
    """

    def __init__(self, value: str | None, known_members: list[str], client: DesignTrackerClient):
        self.selected: list[str] = parse_names(value)
        self.known_members = known_members
        self.client = client

    @property
    def value(self) -> str:
        return join_names(self.selected)

    def is_selected(self, name: str) -> bool:
        return name in self.selected

    def options(self) -> list[str]:
        """Known members followed by selected names that are not on the roster."""
        return self.known_members + [name for name in self.selected if name not in self.known_members]

    def toggle(self, name: str) -> str:
        if name in self.selected:
            self.selected.remove(name)
        else:
            self.selected.append(name)
        return self.value

    async def add_new(self, name: str) -> str:
        """Add a brand-new member to the roster and select it.

        "Already exists" counts as success. The local roster is extended
        without re-fetching it.
        """
        trimmed = name.strip()
        if not trimmed:
            raise ValidationError("Name is required")

        try:
            await self.client.add_member(trimmed)
        except ConflictError:
            logger.debug(f"Member {trimmed!r} already exists, selecting it")

        if trimmed not in self.selected:
            self.selected.append(trimmed)
        if trimmed not in self.known_members:
            self.known_members.append(trimmed)
        return self.value
