from datetime import datetime, timedelta, timezone

from task_tracker.models import TaskStatus, new_task_item
from task_tracker.queries import TagCount, filter_by_tag, overdue, tag_summary
from task_tracker.repositories import InMemoryRepository

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def item(task_id, status=TaskStatus.TODO, due=None, tags=()):
    return new_task_item(f"task {task_id}", status=status, due_date=due, tags=list(tags), task_id=task_id)


class TestFilterByTag:
    def test_seed_backend(self):
        items = filter_by_tag(InMemoryRepository().list(), "backend")
        assert [t["title"] for t in items] == ["Implement API endpoints", "Write unit tests"]

    def test_requested_tag_is_normalized(self):
        items = filter_by_tag(InMemoryRepository().list(), "  SETUP ")
        assert [t["id"] for t in items] == [1]

    def test_no_match(self):
        assert filter_by_tag(InMemoryRepository().list(), "nonexistent") == []

    def test_blank_tag_means_no_filter(self):
        items = InMemoryRepository().list()
        assert filter_by_tag(items, None) == items
        assert filter_by_tag(items, "  ") == items


class TestOverdue:
    def test_seed_has_single_overdue_task(self):
        result = overdue(InMemoryRepository().list())
        assert [t["title"] for t in result] == ["Write unit tests"]

    def test_rules(self):
        items = [
            item(1, due=NOW - timedelta(days=1)),
            item(2, status=TaskStatus.DONE, due=NOW - timedelta(days=5)),
            item(3, due=NOW + timedelta(days=1)),
            item(4),
            item(5, status=TaskStatus.IN_PROGRESS, due=NOW - timedelta(days=3)),
            item(6, due=NOW),
        ]
        # due == now is not strictly before now
        assert [t["id"] for t in overdue(items, now=NOW)] == [5, 1]

    def test_empty(self):
        assert overdue([], now=NOW) == []


class TestTagSummary:
    def test_seed_summary(self):
        summary = tag_summary(InMemoryRepository().list())
        assert summary == [
            TagCount("api", 1),
            TagCount("backend", 2),
            TagCount("infrastructure", 1),
            TagCount("setup", 1),
            TagCount("testing", 1),
        ]

    def test_sorted_by_tag_name(self):
        items = [item(1, tags=["zeta", "alpha"]), item(2, tags=["alpha"])]
        assert tag_summary(items) == [TagCount("alpha", 2), TagCount("zeta", 1)]

    def test_no_tags(self):
        assert tag_summary([item(1)]) == []
