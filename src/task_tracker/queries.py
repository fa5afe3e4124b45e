"""
Read-only views computed over a repository snapshot.

None of these keep state; pass them the result of Repository.list().
"""
from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from typing import Iterable, List, NamedTuple, Optional

from .models import TaskItem, TaskStatus
from .tags import normalize_tag


class TagCount(NamedTuple):
    tag: str
    count: int


# PUBLIC_INTERFACE
def filter_by_tag(items: Iterable[TaskItem], tag: Optional[str]) -> List[TaskItem]:
    """
    Keep the items carrying ``tag`` (compared after trimming and lower-casing).
    A missing or blank tag applies no filter.
    """
    if tag is None or not tag.strip():
        return list(items)
    wanted = normalize_tag(tag)
    return [t for t in items if wanted in t["tags"]]


def is_overdue(item: TaskItem, now: datetime) -> bool:
    due = item["due_date"]
    return due is not None and due < now and item["status"] != TaskStatus.DONE


# PUBLIC_INTERFACE
def overdue(items: Iterable[TaskItem], now: Optional[datetime] = None) -> List[TaskItem]:
    """
    Items past their due date that are not Done, earliest due date first.
    """
    ref = now or datetime.now(timezone.utc)
    late = [t for t in items if is_overdue(t, ref)]
    return sorted(late, key=lambda t: t["due_date"])


# PUBLIC_INTERFACE
def tag_summary(items: Iterable[TaskItem]) -> List[TagCount]:
    """Count how many items carry each tag, sorted by tag name."""
    counts = Counter(tag for t in items for tag in t["tags"])
    return [TagCount(tag, counts[tag]) for tag in sorted(counts)]
