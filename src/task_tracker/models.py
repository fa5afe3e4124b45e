from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, List, Optional, TypedDict


# PUBLIC_INTERFACE
class TaskStatus(str, Enum):
    """Lifecycle state of a task. Serialized by name on the wire."""

    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"


# PUBLIC_INTERFACE
class TaskItem(TypedDict):
    """
    Storage record for a single task.

    Fields:
    - id: Unique positive identifier, assigned by the repository
    - title: Short title (non-blank, checked at the HTTP boundary)
    - description: Optional detailed description
    - status: One of TaskStatus
    - created_at: UTC creation timestamp, never changed after creation
    - updated_at: Reserved; no operation sets it, always None
    - due_date: Optional UTC due timestamp
    - tags: Normalized tag names with set semantics (order is meaningless)
    """

    id: int
    title: str
    description: Optional[str]
    status: TaskStatus
    created_at: datetime
    updated_at: Optional[datetime]
    due_date: Optional[datetime]
    tags: List[str]


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert to UTC; a naive value is taken to already be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# PUBLIC_INTERFACE
def new_task_item(
    title: str,
    description: Optional[str] = None,
    status: TaskStatus = TaskStatus.TODO,
    due_date: Optional[datetime] = None,
    tags: Optional[Iterable[str]] = None,
    task_id: int = 0,
    created_at: Optional[datetime] = None,
) -> TaskItem:
    """
    Build a TaskItem with defaults filled in.

    The id and created_at given here are placeholders when the item is passed
    to Repository.create, which always assigns its own.
    """
    return {
        "id": task_id,
        "title": title,
        "description": description,
        "status": status,
        "created_at": created_at or datetime.min.replace(tzinfo=timezone.utc),
        "updated_at": None,
        "due_date": due_date,
        "tags": list(tags) if tags is not None else [],
    }


def copy_item(item: TaskItem) -> TaskItem:
    """Return a copy that shares no mutable state with ``item``."""
    copied = item.copy()
    copied["tags"] = list(item["tags"])
    return copied
