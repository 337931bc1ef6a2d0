"""Shared test fixtures for TaskSorter tests."""

from __future__ import annotations

import itertools
import json
import os
from pathlib import Path

import pytest
import yaml

from tasksorter.store import STORAGE_KEY, MemoryBlobStore, TaskStore
from tasksorter.tasks import TaskService


@pytest.fixture
def blob() -> MemoryBlobStore:
    return MemoryBlobStore()


@pytest.fixture
def store(blob: MemoryBlobStore) -> TaskStore:
    return TaskStore(blob)


@pytest.fixture
def service(store: TaskStore) -> TaskService:
    """Service with predictable ids: task-1, task-2, ..."""
    counter = itertools.count(1)
    return TaskService(store, id_factory=lambda: f"task-{next(counter)}")


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary workspace with settings and a saved task list."""
    root = tmp_path / "workspace"
    (root / "data").mkdir(parents=True)

    settings = {"storage_key": STORAGE_KEY, "log_level": "debug"}
    (root / "settings.yaml").write_text(
        yaml.dump(settings, default_flow_style=False), encoding="utf-8"
    )

    tasks = [
        {"id": "t-laundry", "text": "fold the laundry", "category": "house"},
        {"id": "t-pantry", "text": "restock the pantry", "category": "kitchen"},
    ]
    (root / "data" / f"{STORAGE_KEY}.json").write_text(
        json.dumps(tasks, indent=2), encoding="utf-8"
    )

    os.environ["TASKSORTER_ROOT"] = str(root)
    yield root
    if "TASKSORTER_ROOT" in os.environ:
        del os.environ["TASKSORTER_ROOT"]
