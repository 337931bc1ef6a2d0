"""Keyword classifier: maps task text to a category."""

from __future__ import annotations

from tasksorter.categories import CATEGORY_RULES, DEFAULT_CATEGORY, CategoryRule


def classify(text: str, rules: tuple[CategoryRule, ...] = CATEGORY_RULES) -> str:
    """Return the category for *text*.

    First match in priority order wins; keyword specificity and match count
    are ignored.  When no keyword occurs anywhere in the text, the first word
    is checked against each category's fallback words, and failing that the
    default category is returned.
    """
    normalized = text.lower()

    for rule in rules:
        if any(keyword in normalized for keyword in rule.keywords):
            return rule.name

    # fallback: first word heuristics
    words = normalized.split()
    first_word = words[0] if words else ""
    for rule in rules:
        if first_word in rule.fallback_words:
            return rule.name

    return DEFAULT_CATEGORY
