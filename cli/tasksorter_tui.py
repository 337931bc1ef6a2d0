#!/usr/bin/env python3
"""TaskSorter TUI: add, sort and tidy tasks from the terminal, powered by Textual."""

from __future__ import annotations

import sys

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import DataTable, Footer, Header, Input, Label, Static

from tasksorter import (
    CATEGORY_RULES,
    SUGGESTED_KEYWORDS,
    TaskCollection,
    TaskService,
    ValidationError,
    append_keyword,
    configure_logging,
    group_by_category,
    load_settings,
    open_service,
    workspace_root,
)


# ── Stylesheet ─────────────────────────────────────────────────

CSS = """
Screen {
    background: $surface;
}

#task-input {
    dock: top;
    margin: 1 2 0 2;
}

#suggestion-hint {
    dock: top;
    height: 1;
    color: $text-muted;
    padding: 0 3;
}

#columns {
    height: 1fr;
}

.category-column {
    width: 1fr;
    min-width: 24;
    border-right: tall $primary-background-darken-2;
    padding: 0 1;
}

.section-title {
    text-style: bold;
    color: $text;
    margin: 1 0 0 0;
    padding: 0 1;
}

.empty-state {
    color: $text-muted;
    text-style: italic;
    padding: 0 1;
}

.category-table {
    height: 1fr;
}
"""


# ── Widgets ────────────────────────────────────────────────────


class CategoryColumn(Vertical):
    """One category: title, task table and empty-state message."""

    def __init__(self, name: str, label: str, default_message: str, **kwargs) -> None:
        super().__init__(id=f"col-{name}", classes="category-column", **kwargs)
        self.category = name
        self.label_text = label
        self.default_message = default_message

    def compose(self) -> ComposeResult:
        yield Label(self.label_text, id=f"title-{self.category}", classes="section-title")
        yield Static(self.default_message, id=f"empty-{self.category}", classes="empty-state")
        yield DataTable(id=f"table-{self.category}", classes="category-table", cursor_type="row")

    def show(self, tasks: TaskCollection) -> None:
        table = self.query_one(DataTable)
        if not table.columns:
            table.add_column("Task")
        table.clear()
        for task in tasks:
            table.add_row(task.text, key=task.id)
        self.query_one(f"#title-{self.category}", Label).update(f"{self.label_text} ({len(tasks)})")
        self.query_one(f"#empty-{self.category}", Static).display = not tasks
        table.display = bool(tasks)


# ── Main app ───────────────────────────────────────────────────


class TaskSorterApp(App):
    """TaskSorter: keyword-sorted to-do lists."""

    TITLE = "TaskSorter"
    CSS = CSS

    BINDINGS = [
        Binding("ctrl+t", "suggest_keyword", "Keyword"),
        Binding("x", "remove_task", "Remove"),
        Binding("1", "reclassify('house')", "House"),
        Binding("2", "reclassify('kitchen')", "Kitchen"),
        Binding("3", "reclassify('study')", "Study"),
        Binding("escape", "focus_input", "Input"),
        Binding("q", "quit_app", "Quit"),
    ]

    def __init__(self, service: TaskService | None = None) -> None:
        super().__init__()
        self.service = service or open_service()
        self._suggestion_index = 0

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="Add a task and press Enter…", id="task-input")
        yield Static(f"Ctrl+T inserts a keyword: {', '.join(SUGGESTED_KEYWORDS)}", id="suggestion-hint")
        yield Horizontal(
            *[CategoryColumn(rule.name, rule.label, rule.default_message) for rule in CATEGORY_RULES],
            id="columns",
        )
        yield Footer()

    def on_mount(self) -> None:
        self._render(self.service.list_tasks())
        self.query_one("#task-input", Input).focus()

    def _render(self, tasks: TaskCollection) -> None:
        groups = group_by_category(tasks)
        for column in self.query(CategoryColumn):
            column.show(groups[column.category])
        self.sub_title = f"{len(tasks)} tasks"

    def _selected_task_id(self) -> str | None:
        """Row key of the highlighted task in the focused table, if any."""
        table = self.focused
        if not isinstance(table, DataTable) or table.row_count == 0:
            return None
        row_key = table.coordinate_to_cell_key(table.cursor_coordinate).row_key
        return row_key.value

    # ── Events & actions ───────────────────────────────────────

    @on(Input.Submitted, "#task-input")
    def _on_submit(self, event: Input.Submitted) -> None:
        try:
            tasks = self.service.add(event.value)
        except ValidationError as e:
            self.notify(str(e), title="Not added", severity="warning")
            return
        event.input.value = ""
        self._render(tasks)

    def action_suggest_keyword(self) -> None:
        box = self.query_one("#task-input", Input)
        keyword = SUGGESTED_KEYWORDS[self._suggestion_index % len(SUGGESTED_KEYWORDS)]
        self._suggestion_index += 1
        box.value = append_keyword(box.value, keyword)
        box.cursor_position = len(box.value)
        box.focus()

    def action_remove_task(self) -> None:
        task_id = self._selected_task_id()
        if task_id is None:
            return
        self._render(self.service.remove(task_id))

    def action_reclassify(self, category: str) -> None:
        task_id = self._selected_task_id()
        if task_id is None:
            return
        try:
            tasks = self.service.reclassify(task_id, category)
        except ValidationError as e:
            self.notify(str(e), severity="error")
            return
        self._render(tasks)
        self.query_one(f"#table-{category}", DataTable).focus()

    def action_focus_input(self) -> None:
        self.query_one("#task-input", Input).focus()

    def action_quit_app(self) -> None:
        self.exit()


# ── Entry point ────────────────────────────────────────────────


def main() -> None:
    root = workspace_root()
    if root.exists() and not root.is_dir():
        print(f"Workspace is not a directory: {root}")
        print("Set TASKSORTER_ROOT to a directory.")
        sys.exit(1)

    configure_logging(load_settings(root).log_level)
    app = TaskSorterApp(open_service(root))
    app.run()


if __name__ == "__main__":
    main()
