"""Typed dataclasses for the TaskSorter data model.

Tasks serialize with from_dict/to_dict.  Unlike a lenient config loader,
``Task.from_dict`` is strict: persisted records carry exactly three string
fields and anything else is treated as corrupt data.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from tasksorter.categories import is_category
from tasksorter.errors import PersistedDataCorrupt

_WHITESPACE = re.compile(r"\s+")

TASK_FIELDS = ("id", "text", "category")


def sanitize_text(raw: str) -> str:
    """Trim and collapse internal whitespace runs to single spaces."""
    return _WHITESPACE.sub(" ", raw.strip())


def append_keyword(base: str, keyword: str) -> str:
    """Append a suggested keyword to the text typed so far."""
    text = sanitize_text(base)
    return f"{text} {keyword}" if text else keyword


@dataclass
class Task:
    id: str
    text: str
    category: str

    @classmethod
    def from_dict(cls, d: Any) -> Task:
        if not isinstance(d, dict) or set(d) != set(TASK_FIELDS):
            raise PersistedDataCorrupt(f"Not a task record: {d!r}")
        if not all(isinstance(d[k], str) for k in TASK_FIELDS):
            raise PersistedDataCorrupt(f"Task fields must be strings: {d!r}")
        if not is_category(d["category"]):
            raise PersistedDataCorrupt(f"Unknown category: {d['category']!r}")
        return cls(id=d["id"], text=d["text"], category=d["category"])

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "text": self.text, "category": self.category}


# Full ordered task list, the unit of persistence.
TaskCollection = list[Task]
