from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MemberDto(BaseModel):
    """A team member eligible to be assignee or receiver of a task."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    name: str
    created_at: str | None = None
