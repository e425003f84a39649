"""Task document model shared by the API and the client."""

import datetime
from typing import Any

from bson import Decimal128
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


STRING_FIELDS = (
    "task_name",
    "description",
    "status",
    "task_type",
    "tags",
    "assignee",
    "received_by",
    "delivery",
    "attach_file",
    "product_doc",
    "created_at",
    "updated_at",
)


class TaskDto(BaseModel):
    """A task as stored in the ``tasks`` collection.

    Fields travel in camelCase (``taskName``, ``receivedBy``, ...) and the
    identifier as ``_id``. The collection is schemaless, so unknown keys are
    kept as extras and written back untouched.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: str | None = Field(default=None, alias="_id")
    task_name: str | None = None
    description: str | None = None
    status: str | None = None
    task_type: str | None = None
    tags: str | None = None
    assignee: str | None = None
    received_by: str | None = None
    delivery: str | None = None
    attach_file: str | None = None
    product_doc: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        # ObjectId from the store, plain string from the wire
        return None if value is None else str(value)

    @field_validator(*STRING_FIELDS, mode="before")
    @classmethod
    def _stringify_scalars(cls, value: Any) -> Any:
        # other writers may store BSON dates or numbers in these fields
        if isinstance(value, datetime.datetime | datetime.date):
            return value.isoformat()
        if isinstance(value, bool | int | float | Decimal128):
            return str(value)
        return value

    def to_fields(self) -> dict[str, Any]:
        """Return the explicitly supplied fields keyed by their stored names, without the identifier."""
        fields = self.model_dump(by_alias=True, exclude_unset=True, exclude={"id"})
        fields.update(self.model_extra or {})
        return fields
