"""Task add/remove/reclassify on top of the classifier and TaskStore."""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Callable

from tasksorter.categories import category_names, is_category
from tasksorter.classifier import classify
from tasksorter.errors import ValidationError
from tasksorter.models import Task, TaskCollection, sanitize_text
from tasksorter.store import TaskStore

logger = logging.getLogger(__name__)


def new_task_id() -> str:
    return str(uuid.uuid4())


class TaskService:
    """The only writer of the task collection.

    Every operation reloads the collection from the store, applies one change,
    saves the full list and returns it.  Nothing is cached between calls, and
    returned tasks are copies the caller may keep or mutate freely.
    """

    def __init__(self, store: TaskStore, id_factory: Callable[[], str] = new_task_id) -> None:
        self.store = store
        self.id_factory = id_factory

    def list_tasks(self) -> TaskCollection:
        return self.store.load()

    def add(self, raw_text: str) -> TaskCollection:
        """Sanitize, classify and append a new task.

        Raises ValidationError when nothing is left after sanitizing; the
        stored collection is not touched in that case.
        """
        text = sanitize_text(raw_text)
        if not text:
            raise ValidationError("Task text must not be empty")

        tasks = self.store.load()
        task_id = self.id_factory()
        while any(t.id == task_id for t in tasks):
            task_id = self.id_factory()
        task = Task(id=task_id, text=text, category=classify(text))
        tasks.append(task)
        self.store.save(tasks)
        logger.debug("Added task %s to %s", task.id, task.category)
        return _snapshot(tasks)

    def remove(self, task_id: str) -> TaskCollection:
        """Drop the task with *task_id*; an unknown id leaves the list as is."""
        tasks = [t for t in self.store.load() if t.id != task_id]
        self.store.save(tasks)
        logger.debug("Removed task %s", task_id)
        return _snapshot(tasks)

    def reclassify(self, task_id: str, category: str) -> TaskCollection:
        """Manually set a task's category, bypassing the classifier."""
        if not is_category(category):
            raise ValidationError(
                f"Unknown category: {category!r} (expected one of {', '.join(category_names())})"
            )
        tasks = [
            replace(t, category=category) if t.id == task_id else t
            for t in self.store.load()
        ]
        self.store.save(tasks)
        logger.debug("Reclassified task %s as %s", task_id, category)
        return _snapshot(tasks)


def _snapshot(tasks: TaskCollection) -> TaskCollection:
    return [replace(t) for t in tasks]
