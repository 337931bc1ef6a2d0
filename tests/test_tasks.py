"""Tests for tasksorter/tasks.py — add, remove, reclassify."""

import json

import pytest

from tasksorter.errors import ValidationError
from tasksorter.models import Task
from tasksorter.store import STORAGE_KEY, MemoryBlobStore, TaskStore
from tasksorter.tasks import TaskService, new_task_id


def test_add_sanitizes_and_classifies(service, store):
    tasks = service.add("  water   the  plants  ")
    assert tasks == [Task(id="task-1", text="water the plants", category="house")]
    assert store.load() == tasks


def test_add_appends_in_order(service):
    service.add("clean the bathroom")
    service.add("bake a cake for dinner")
    tasks = service.add("study for the exam")
    assert [(t.text, t.category) for t in tasks] == [
        ("clean the bathroom", "house"),
        ("bake a cake for dinner", "kitchen"),
        ("study for the exam", "study"),
    ]
    assert [t.id for t in tasks] == ["task-1", "task-2", "task-3"]


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_add_empty_raises_and_does_not_write(text, blob, store):
    service = TaskService(store)
    with pytest.raises(ValidationError):
        service.add(text)
    assert blob.get(STORAGE_KEY) is None


def test_add_empty_leaves_collection_unchanged(service, store):
    service.add("mop the hallway")
    before = store.load()
    with pytest.raises(ValidationError):
        service.add("")
    assert store.load() == before


def test_add_skips_colliding_ids(store):
    ids = iter(["dup", "dup", "fresh"])
    service = TaskService(store, id_factory=lambda: next(ids))
    service.add("first")
    tasks = service.add("second")
    assert [t.id for t in tasks] == ["dup", "fresh"]


def test_default_ids_are_unique():
    assert len({new_task_id() for _ in range(100)}) == 100


def test_remove(service):
    service.add("fold laundry")
    service.add("grocery run")
    tasks = service.remove("task-1")
    assert [t.id for t in tasks] == ["task-2"]


def test_remove_is_idempotent(service):
    service.add("fold laundry")
    service.add("grocery run")
    once = service.remove("task-1")
    twice = service.remove("task-1")
    assert once == twice


def test_remove_missing_id_is_noop(service):
    service.add("fold laundry")
    assert [t.id for t in service.remove("nope")] == ["task-1"]


def test_reclassify_overrides_category(service, store):
    service.add("clean the bathroom")
    tasks = service.reclassify("task-1", "study")
    assert tasks[0].category == "study"
    assert tasks[0].text == "clean the bathroom"
    assert store.load()[0].category == "study"


def test_reclassify_twice_is_noop(service, blob):
    service.add("clean the bathroom")
    first = service.reclassify("task-1", "kitchen")
    raw = blob.get(STORAGE_KEY)
    second = service.reclassify("task-1", "kitchen")
    assert first == second
    assert blob.get(STORAGE_KEY) == raw


def test_reclassify_missing_id_is_noop(service):
    service.add("clean the bathroom")
    tasks = service.reclassify("nope", "study")
    assert [t.category for t in tasks] == ["house"]


def test_reclassify_rejects_unknown_category(service, store):
    service.add("clean the bathroom")
    with pytest.raises(ValidationError):
        service.reclassify("task-1", "garage")
    assert store.load()[0].category == "house"


def test_reclassified_task_survives_later_adds(service):
    service.add("clean the bathroom")
    service.reclassify("task-1", "study")
    tasks = service.add("clean the kitchen")
    assert [t.category for t in tasks] == ["study", "house"]


def test_returned_snapshot_is_independent(service, store):
    tasks = service.add("clean the bathroom")
    tasks[0].category = "kitchen"
    tasks.append(Task(id="x", text="x", category="house"))
    assert store.load() == [Task(id="task-1", text="clean the bathroom", category="house")]


def test_no_cache_between_calls():
    blob = MemoryBlobStore()
    service = TaskService(TaskStore(blob), id_factory=lambda: "new")
    service.list_tasks()
    blob.set(STORAGE_KEY, json.dumps([{"id": "ext", "text": "mop", "category": "house"}]))
    tasks = service.add("quiz")
    assert [t.id for t in tasks] == ["ext", "new"]


def test_add_after_corruption_starts_fresh(store, blob, service):
    blob.set(STORAGE_KEY, "not json")
    tasks = service.add("sweep the floor")
    assert [t.text for t in tasks] == ["sweep the floor"]
