"""Tests for tasksorter/categories.py — rule lookup and grouping."""

import pytest

from tasksorter.categories import (
    CATEGORY_RULES,
    SUGGESTED_KEYWORDS,
    category_names,
    get_rule,
    group_by_category,
    is_category,
)
from tasksorter.models import Task


def test_category_names_in_priority_order():
    assert category_names() == ["house", "kitchen", "study"]


def test_is_category():
    assert is_category("kitchen") is True
    assert is_category("Kitchen") is False
    assert is_category("garage") is False
    assert is_category(None) is False


def test_get_rule():
    rule = get_rule("study")
    assert "exam" in rule.keywords
    assert rule.default_message
    with pytest.raises(KeyError):
        get_rule("garage")


def test_every_rule_has_message_and_lowercase_keywords():
    for rule in CATEGORY_RULES:
        assert rule.default_message
        assert all(k == k.lower() for k in rule.keywords)
        assert all(k == k.lower() for k in rule.fallback_words)


def test_group_by_category_keeps_every_category_and_order():
    tasks = [
        Task(id="1", text="exam", category="study"),
        Task(id="2", text="mop", category="house"),
        Task(id="3", text="quiz", category="study"),
    ]
    groups = group_by_category(tasks)
    assert list(groups) == ["house", "kitchen", "study"]
    assert groups["kitchen"] == []
    assert [t.id for t in groups["study"]] == ["1", "3"]


def test_suggestions_are_not_empty():
    assert SUGGESTED_KEYWORDS


def test_empty_state_messages():
    assert [r.default_message for r in CATEGORY_RULES] == [
        "House looks empty. Add something cozy to tackle!",
        "Kitchen is sparkling clean—no tasks here yet.",
        "Line up those ambitions—nothing scheduled yet.",
    ]
