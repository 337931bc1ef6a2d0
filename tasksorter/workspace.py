"""Workspace root, settings, logging and path helpers for TaskSorter."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tasksorter.fileio import read_yaml
from tasksorter.store import STORAGE_KEY, FileBlobStore, TaskStore
from tasksorter.tasks import TaskService

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def workspace_root() -> Path:
    """Get the workspace root directory (contains settings.yaml and data/)."""
    return Path(
        os.environ.get("TASKSORTER_ROOT", str(Path.home() / "tasksorter"))
    ).expanduser().resolve()


# ── Path helpers ──────────────────────────────────────────────

def settings_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "settings.yaml"


def data_dir(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "data"


# ── Settings ──────────────────────────────────────────────────


@dataclass
class Settings:
    storage_key: str = STORAGE_KEY
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Settings:
        if not d or not isinstance(d, dict):
            return cls()
        return cls(
            storage_key=str(d.get("storage_key") or STORAGE_KEY),
            log_level=str(d.get("log_level") or "WARNING").upper(),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"storage_key": self.storage_key, "log_level": self.log_level}


def load_settings(root: Path | None = None) -> Settings:
    """Read settings.yaml; a missing or non-mapping file gives the defaults."""
    return Settings.from_dict(read_yaml(settings_path(root)))


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)


def open_service(root: Path | None = None) -> TaskService:
    """Build a TaskService persisting to the workspace data directory."""
    if root is None:
        root = workspace_root()
    settings = load_settings(root)
    store = TaskStore(FileBlobStore(data_dir(root)), key=settings.storage_key)
    return TaskService(store)
