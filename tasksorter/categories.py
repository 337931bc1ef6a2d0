"""Category set and keyword rules for TaskSorter.

Priority is the order of ``CATEGORY_RULES``: the classifier walks it front to
back and the first category with a matching keyword wins.  The set is static
configuration; front-ends read it for labels and empty-state messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from tasksorter.models import Task


@dataclass(frozen=True)
class CategoryRule:
    name: str
    keywords: tuple[str, ...]
    fallback_words: tuple[str, ...] = ()
    default_message: str = ""

    @property
    def label(self) -> str:
        return self.name.capitalize()


# ── Rules (priority order) ────────────────────────────────────


CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        name="house",
        keywords=(
            "clean",
            "vacuum",
            "laundry",
            "fold",
            "organize",
            "bill",
            "rent",
            "utilities",
            "trash",
            "garden",
            "repairs",
            "declutter",
            "sweep",
            "mop",
            "paint",
            "fix",
            "call landlord",
            "schedule maintenance",
            "plant",
        ),
        default_message="House looks empty. Add something cozy to tackle!",
    ),
    CategoryRule(
        name="kitchen",
        keywords=(
            "cook",
            "meal",
            "recipe",
            "bake",
            "dinner",
            "lunch",
            "breakfast",
            "grocery",
            "shop",
            "produce",
            "snack",
            "dishes",
            "dishwasher",
            "fridge",
            "pantry",
            "meal prep",
            "wash vegetables",
            "marinate",
            "preheat",
        ),
        fallback_words=("cook", "kitchen", "recipe"),
        default_message="Kitchen is sparkling clean—no tasks here yet.",
    ),
    CategoryRule(
        name="study",
        keywords=(
            "study",
            "class",
            "course",
            "assignment",
            "homework",
            "read",
            "review",
            "exam",
            "quiz",
            "resume",
            "cover letter",
            "portfolio",
            "network",
            "interview",
            "job",
            "apply",
            "application",
            "linkedin",
            "practice",
            "research",
        ),
        fallback_words=("study", "course", "job", "apply"),
        default_message="Line up those ambitions—nothing scheduled yet.",
    ),
)

DEFAULT_CATEGORY = "house"

# Quick-add helpers offered next to the task input.
SUGGESTED_KEYWORDS: tuple[str, ...] = (
    "clean",
    "laundry",
    "pay bill",
    "meal prep",
    "grocery",
    "homework",
    "resume",
    "interview",
)

_RULES_BY_NAME = {rule.name: rule for rule in CATEGORY_RULES}


def category_names() -> list[str]:
    """Category names in priority order."""
    return [rule.name for rule in CATEGORY_RULES]


def is_category(name: object) -> bool:
    return isinstance(name, str) and name in _RULES_BY_NAME


def get_rule(name: str) -> CategoryRule:
    """Look up a rule by category name. Raises KeyError for unknown names."""
    return _RULES_BY_NAME[name]


def group_by_category(tasks: Iterable[Task]) -> dict[str, list[Task]]:
    """Group tasks for display: every category present, insertion order kept."""
    groups: dict[str, list[Task]] = {name: [] for name in category_names()}
    for task in tasks:
        groups[task.category].append(task)
    return groups
