"""Task persistence: a key-value blob store and the TaskStore on top of it.

The whole task list lives under one key as a JSON array of
``{"id", "text", "category"}`` records.  It is read and written as a unit.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from tasksorter.errors import PersistedDataCorrupt
from tasksorter.fileio import read_text, write_text_atomic
from tasksorter.models import Task, TaskCollection

logger = logging.getLogger(__name__)

STORAGE_KEY = "smart-task-sorter"


class BlobStore(Protocol):
    """Durable string values addressed by key."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryBlobStore:
    """In-process blob store."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class FileBlobStore:
    """One file per key inside a directory, replaced atomically on write."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return read_text(path)
        except UnicodeDecodeError as e:
            raise PersistedDataCorrupt(f"{path} is not valid UTF-8: {e}") from e

    def set(self, key: str, value: str) -> None:
        write_text_atomic(self.path_for(key), value, suffix=".json")


def parse_tasks(raw: str) -> TaskCollection:
    """Parse a serialized task list. Raises PersistedDataCorrupt on any mismatch."""
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise PersistedDataCorrupt(f"Invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise PersistedDataCorrupt(f"Expected a list of tasks, got {type(data).__name__}")
    tasks = [Task.from_dict(item) for item in data]
    if len({t.id for t in tasks}) != len(tasks):
        raise PersistedDataCorrupt("Duplicate task ids")
    return tasks


def dump_tasks(tasks: TaskCollection) -> str:
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)


class TaskStore:
    """Loads and saves the full task collection under a single key."""

    def __init__(self, blob: BlobStore, key: str = STORAGE_KEY) -> None:
        self.blob = blob
        self.key = key

    def load(self) -> TaskCollection:
        """Return the stored tasks; missing or corrupt data yields an empty list."""
        try:
            raw = self.blob.get(self.key)
            if not raw:
                return []
            return parse_tasks(raw)
        except PersistedDataCorrupt as e:
            logger.warning("Failed to parse saved tasks under %r: %s", self.key, e)
            return []

    def save(self, tasks: TaskCollection) -> None:
        """Overwrite the stored collection."""
        self.blob.set(self.key, dump_tasks(tasks))
        logger.debug("Saved %d tasks under %r", len(tasks), self.key)
