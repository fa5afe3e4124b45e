from __future__ import annotations

from datetime import date, datetime, timezone
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import TaskItem, TaskStatus, as_utc, new_task_item

# Shared type for incoming due_date which can be a date, datetime, or ISO8601 string
DueDateInput = Union[date, datetime, str]


def _parse_due_date(value: Optional[DueDateInput]) -> Optional[datetime]:
    """
    Internal helper to normalize due_date input into a UTC-aware datetime.
    - If value is a string, attempt to parse via datetime.fromisoformat; if time is missing, set to 00:00.
    - If value is a date (not datetime), convert to datetime at 00:00.
    - Naive values are taken to be UTC.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return as_utc(value)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    if isinstance(value, str):
        s = value.strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            return as_utc(datetime.fromisoformat(s))
        except ValueError:
            try:
                d = date.fromisoformat(s)
                return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
            except ValueError as e:
                raise ValueError(
                    "Invalid due_date format. Use ISO8601 date or datetime string (e.g., '2025-01-31' or '2025-01-31T13:45:00')."
                ) from e

    raise ValueError("Invalid type for due_date; expected date, datetime, or ISO8601 string.")


# PUBLIC_INTERFACE
class TaskCreate(BaseModel):
    """
    Request body for creating a task or replacing one wholesale (PUT).

    Title is optional at this layer so the router can answer a blank title
    with a 400 instead of a validation error.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Fix login redirect",
                "description": "Users land on / instead of the page they asked for",
                "status": "Todo",
                "due_date": "2025-02-01",
                "tags": ["bug", "frontend"],
            }
        }
    )

    title: Optional[str] = Field(default=None, description="Short title for the task")
    description: Optional[str] = Field(default=None, description="Optional detailed description")
    status: TaskStatus = Field(default=TaskStatus.TODO, description="Todo, InProgress or Done")
    due_date: Optional[datetime] = Field(
        default=None,
        description="Due date/time. Accepts ISO8601 date or datetime; dates are set to 00:00 UTC",
    )
    tags: List[str] = Field(default_factory=list, description="Tags; trimmed, lower-cased and de-duplicated on save")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: Optional[str]) -> Optional[str]:
        """Strip surrounding whitespace; a blank title becomes None."""
        if v is None:
            return None
        s = v.strip()
        return s or None

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, v: Optional[DueDateInput]) -> Optional[datetime]:
        """Normalize due_date from str/date/datetime to a UTC datetime."""
        return _parse_due_date(v)

    @field_validator("tags", mode="before")
    @classmethod
    def default_tags(cls, v: Optional[List[str]]) -> List[str]:
        return [] if v is None else v

    def to_item(self, task_id: int = 0) -> TaskItem:
        """Map the payload onto a TaskItem for the repository."""
        return new_task_item(
            self.title or "",
            description=self.description,
            status=self.status,
            due_date=self.due_date,
            tags=self.tags,
            task_id=task_id,
        )


# PUBLIC_INTERFACE
class TaskOut(BaseModel):
    """
    Schema returned by the API for a task.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 4,
                "title": "Fix login redirect",
                "description": "Users land on / instead of the page they asked for",
                "status": "Todo",
                "created_at": "2025-01-25T10:15:30.123456Z",
                "updated_at": None,
                "due_date": "2025-02-01T00:00:00Z",
                "tags": ["bug", "frontend"],
            }
        }
    )

    id: int = Field(..., description="Unique identifier of the task")
    title: str = Field(..., description="Short title for the task")
    description: Optional[str] = Field(default=None, description="Optional detailed description")
    status: TaskStatus = Field(..., description="Todo, InProgress or Done")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(default=None, description="Reserved; currently always null")
    due_date: Optional[datetime] = Field(default=None, description="Due date/time as an ISO8601 datetime")
    tags: List[str] = Field(default_factory=list, description="Normalized tags")


# PUBLIC_INTERFACE
class TagCountOut(BaseModel):
    """One row of the tag summary."""

    tag: str = Field(..., description="Normalized tag name")
    count: int = Field(..., description="Number of tasks carrying the tag")
