from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from threading import Lock, RLock
from typing import List, Optional

from loguru import logger

from .models import TaskItem, TaskStatus, as_utc, copy_item, new_task_item
from .tags import CommonTags, normalize_tags


# PUBLIC_INTERFACE
class Repository(ABC):
    """Abstract repository contract for task storage backends."""

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of stored tasks."""

    @abstractmethod
    def list(self) -> List[TaskItem]:
        """Return every stored task ordered by ascending id."""

    @abstractmethod
    def get(self, task_id: int) -> Optional[TaskItem]:
        """Return a task by id, or None if not found."""

    @abstractmethod
    def create(self, item: TaskItem) -> TaskItem:
        """Store a new task under a freshly allocated id and return it."""

    @abstractmethod
    def update(self, item: TaskItem) -> Optional[TaskItem]:
        """Replace the task with id ``item["id"]``. Return it, or None if not found."""

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        """Delete a task by id. Return True if deleted, False if not found."""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _seed_items(now: datetime) -> List[TaskItem]:
    return [
        new_task_item(
            "Set up project structure",
            description="Create the initial solution and project layout",
            status=TaskStatus.DONE,
            created_at=now - timedelta(days=3),
            due_date=now - timedelta(days=2),
            tags=[CommonTags.SETUP, CommonTags.INFRASTRUCTURE],
        ),
        new_task_item(
            "Implement API endpoints",
            description="Build the REST API for task management",
            status=TaskStatus.IN_PROGRESS,
            created_at=now - timedelta(days=2),
            due_date=now + timedelta(days=5),
            tags=[CommonTags.BACKEND, CommonTags.API],
        ),
        new_task_item(
            "Write unit tests",
            description="Add tests for the repository and endpoints",
            status=TaskStatus.TODO,
            created_at=now - timedelta(days=1),
            due_date=now - timedelta(days=1),
            tags=[CommonTags.TESTING, CommonTags.BACKEND],
        ),
    ]


class InMemoryRepository(Repository):
    """
    Thread-safe in-memory repository, pre-populated with three seed tasks.

    Stored records are replaced, never mutated in place, and every read hands
    out copies, so callers always see whole items.
    """

    def __init__(self, seed: bool = True) -> None:
        self._lock = RLock()
        self._items: dict[int, TaskItem] = {}
        self._last_id = 0
        if seed:
            for item in _seed_items(_utcnow()):
                self._insert(item, created_at=item["created_at"])

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def _insert(self, item: TaskItem, created_at: datetime) -> TaskItem:
        # id allocation and insert share one critical section
        with self._lock:
            self._last_id += 1
            stored = copy_item(item)
            stored["id"] = self._last_id
            stored["created_at"] = created_at
            stored["updated_at"] = None
            stored["due_date"] = as_utc(item["due_date"])
            stored["tags"] = normalize_tags(item["tags"])
            self._items[stored["id"]] = stored
            return copy_item(stored)

    def list(self) -> List[TaskItem]:
        with self._lock:
            return [copy_item(self._items[k]) for k in sorted(self._items)]

    def get(self, task_id: int) -> Optional[TaskItem]:
        with self._lock:
            item = self._items.get(task_id)
            return None if item is None else copy_item(item)

    def create(self, item: TaskItem) -> TaskItem:
        created = self._insert(item, created_at=_utcnow())
        logger.debug("Created task {} ({!r})", created["id"], created["title"])
        return created

    def update(self, item: TaskItem) -> Optional[TaskItem]:
        task_id = item["id"]
        with self._lock:
            existing = self._items.get(task_id)
            if existing is None:
                logger.debug("Update skipped, task {} not found", task_id)
                return None

            # Full replacement of the mutable fields
            updated = copy_item(existing)
            updated["title"] = item["title"]
            updated["description"] = item["description"]
            updated["status"] = item["status"]
            updated["due_date"] = as_utc(item["due_date"])
            updated["tags"] = normalize_tags(item["tags"])

            self._items[task_id] = updated
            result = copy_item(updated)
        logger.debug("Updated task {}", task_id)
        return result

    def delete(self, task_id: int) -> bool:
        with self._lock:
            removed = self._items.pop(task_id, None) is not None
        logger.debug("Delete task {}: {}", task_id, "removed" if removed else "not found")
        return removed


_default_repository: Optional[Repository] = None
_default_lock = Lock()


# PUBLIC_INTERFACE
def get_repository() -> Repository:
    """
    Return the process-wide repository, creating it (with seed data) on first use.
    """
    global _default_repository
    with _default_lock:
        if _default_repository is None:
            repo = InMemoryRepository()
            logger.info("Initialized in-memory task repository with {} seed tasks", repo.count)
            _default_repository = repo
        return _default_repository


def reset_repository() -> None:
    """Drop the process-wide repository so the next get_repository() call reseeds."""
    global _default_repository
    with _default_lock:
        _default_repository = None
