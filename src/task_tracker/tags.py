from __future__ import annotations

from typing import Iterable, List, Optional


# PUBLIC_INTERFACE
def normalize_tag(tag: str) -> str:
    """Trim and lower-case a single tag."""
    return tag.strip().lower()


# PUBLIC_INTERFACE
def normalize_tags(tags: Optional[Iterable[str]]) -> List[str]:
    """
    Normalize a tag collection.

    - Entries that are empty or whitespace-only are dropped
    - Remaining entries are trimmed and lower-cased
    - Duplicates after normalization collapse to one entry

    The result has set semantics; callers must not rely on its order.
    """
    if tags is None:
        return []
    seen: dict[str, None] = {}
    for raw in tags:
        if raw is None or not raw.strip():
            continue
        seen.setdefault(normalize_tag(raw), None)
    return list(seen)


class CommonTags:
    """Tag names used by the seed data."""

    BUG = "bug"
    FRONTEND = "frontend"
    BACKEND = "backend"
    URGENT = "urgent"
    API = "api"
    SETUP = "setup"
    INFRASTRUCTURE = "infrastructure"
    TESTING = "testing"
    REVIEWED = "reviewed"
