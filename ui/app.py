from __future__ import annotations

import os
import secrets
from typing import Any
from urllib.parse import quote, urlencode

from fastapi import Body, Depends, FastAPI, Form, HTTPException, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from tasksorter import (
    CATEGORY_RULES,
    DEFAULT_CATEGORY,
    SUGGESTED_KEYWORDS,
    Task,
    TaskCollection,
    TaskService,
    ValidationError,
    append_keyword,
    configure_logging,
    group_by_category,
    load_settings,
    open_service,
)

configure_logging(load_settings().log_level)


# ── HTML helpers ──────────────────────────────────────────────

def _escape(s: str) -> str:
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


STYLE = """
body { font-family: system-ui, sans-serif; background: #f6f4ef; color: #222; margin: 0; }
.container { max-width: 1100px; margin: 0 auto; padding: 24px; }
.grid { display: grid; grid-template-columns: repeat(3, 1fr); gap: 16px; }
.card { background: #fff; border-radius: 10px; padding: 14px 16px; box-shadow: 0 1px 3px rgba(0,0,0,.08); }
.task { display: flex; gap: 8px; align-items: center; padding: 6px 0; border-bottom: 1px solid #eee; }
.task-text { flex: 1; }
.empty-state { color: #888; font-style: italic; list-style: none; }
.muted { color: #777; }
.small { font-size: 13px; }
.error { color: #b33; }
ul { padding: 0; margin: 0; }
"""


def _task_row(task: Task) -> str:
    options = "".join(
        f'<option value="{rule.name}" {"selected" if rule.name == task.category else ""}>{rule.label}</option>'
        for rule in CATEGORY_RULES
    )
    task_id = _escape(quote(task.id, safe=""))
    return f"""
      <li class="task">
        <span class="task-text">{_escape(task.text)}</span>
        <form method="post" action="/reclassify/{task_id}">
          <select name="category">{options}</select>
          <button type="submit">Move</button>
        </form>
        <form method="post" action="/remove/{task_id}">
          <button type="submit" title="Remove">&times;</button>
        </form>
      </li>
    """


def _task_list(tasks: TaskCollection) -> list[dict[str, Any]]:
    return [t.to_dict() for t in tasks]


def _collection_payload(tasks: TaskCollection) -> dict[str, Any]:
    groups = group_by_category(tasks)
    return {
        "ok": True,
        "tasks": _task_list(tasks),
        "groups": {name: _task_list(items) for name, items in groups.items()},
    }


# ── Auth ──────────────────────────────────────────────────────

app = FastAPI(title="TaskSorter UI", version="0.1.0")

security = HTTPBasic(auto_error=False)


def get_current_user(credentials: HTTPBasicCredentials | None = Depends(security)) -> str:
    expected_username = os.environ.get("TASKSORTER_USERNAME", "")
    expected_password = os.environ.get("TASKSORTER_PASSWORD", "")

    if not expected_username or not expected_password:
        return "guest"

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Basic"},
        )

    correct_username = secrets.compare_digest(credentials.username.encode("utf-8"), expected_username.encode("utf-8"))
    correct_password = secrets.compare_digest(credentials.password.encode("utf-8"), expected_password.encode("utf-8"))

    if not (correct_username and correct_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )

    return credentials.username


def get_service() -> TaskService:
    return open_service()


# ── Page ──────────────────────────────────────────────────────

@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"ok": "true"}


@app.get("/", response_class=HTMLResponse)
def index(
    error: str = "",
    draft: str = "",
    username: str = Depends(get_current_user),
    service: TaskService = Depends(get_service),
) -> HTMLResponse:
    groups = group_by_category(service.list_tasks())

    columns = []
    for rule in CATEGORY_RULES:
        items = groups[rule.name]
        if items:
            body = "".join(_task_row(t) for t in items)
        else:
            body = f'<li class="empty-state">{_escape(rule.default_message)}</li>'
        columns.append(
            f"""
            <div class="card">
              <h2>{_escape(rule.label)} <span class="muted small">({len(items)})</span></h2>
              <ul id="{rule.name}-list">{body}</ul>
            </div>
            """
        )

    suggestions = "".join(
        f'<button type="submit" name="keyword" value="{_escape(k)}">{_escape(k)}</button> '
        for k in SUGGESTED_KEYWORDS
    )
    error_html = ""
    if error == "empty":
        error_html = '<div class="error small">Type a task before adding it.</div>'

    html = f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>TaskSorter</title>
  <style>{STYLE}</style>
</head>
<body>
  <div class="container">
    <header>
      <h1>TaskSorter</h1>
      <div class="muted small">Tasks land in a category by keyword; unmatched ones go to {DEFAULT_CATEGORY}.</div>
    </header>

    <section class="card" style="margin: 16px 0">
      <form method="post" action="/add">
        <input name="text" type="text" size="60" placeholder="e.g. vacuum the living room" value="{_escape(draft)}" autofocus />
        <button type="submit">Add</button>
      </form>
      {error_html}
      <form method="post" action="/suggest" class="small" style="margin-top:8px">
        <input type="hidden" name="text" value="{_escape(draft)}" />
        <span class="muted">Quick keywords:</span> {suggestions}
      </form>
    </section>

    <section class="grid">
      {''.join(columns)}
    </section>
  </div>
</body>
</html>"""
    return HTMLResponse(html)


@app.post("/add")
def add_form(
    text: str = Form(""),
    username: str = Depends(get_current_user),
    service: TaskService = Depends(get_service),
) -> RedirectResponse:
    try:
        service.add(text)
    except ValidationError:
        return RedirectResponse(url="/?error=empty", status_code=303)
    return RedirectResponse(url="/", status_code=303)


@app.post("/suggest")
def suggest_form(
    text: str = Form(""),
    keyword: str = Form(...),
    username: str = Depends(get_current_user),
) -> RedirectResponse:
    return RedirectResponse(url="/?" + urlencode({"draft": append_keyword(text, keyword)}), status_code=303)


@app.post("/remove/{task_id:path}")
def remove_form(
    task_id: str,
    username: str = Depends(get_current_user),
    service: TaskService = Depends(get_service),
) -> RedirectResponse:
    service.remove(task_id)
    return RedirectResponse(url="/", status_code=303)


@app.post("/reclassify/{task_id:path}")
def reclassify_form(
    task_id: str,
    category: str = Form(...),
    username: str = Depends(get_current_user),
    service: TaskService = Depends(get_service),
) -> RedirectResponse:
    try:
        service.reclassify(task_id, category)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return RedirectResponse(url="/", status_code=303)


# ══════════════════════════════════════════════════════════════
# JSON API
# ══════════════════════════════════════════════════════════════

@app.get("/api/categories")
def api_categories(username: str = Depends(get_current_user)) -> dict[str, Any]:
    """Category labels, keywords and empty-state messages in priority order."""
    return {
        "default": DEFAULT_CATEGORY,
        "categories": [
            {
                "name": rule.name,
                "label": rule.label,
                "keywords": list(rule.keywords),
                "default_message": rule.default_message,
            }
            for rule in CATEGORY_RULES
        ],
        "suggestions": list(SUGGESTED_KEYWORDS),
    }


@app.get("/api/tasks")
def api_list_tasks(
    username: str = Depends(get_current_user),
    service: TaskService = Depends(get_service),
) -> dict[str, Any]:
    """All tasks, flat and grouped by category."""
    return _collection_payload(service.list_tasks())


@app.post("/api/tasks")
def api_create_task(
    payload: dict[str, Any] = Body(...),
    username: str = Depends(get_current_user),
    service: TaskService = Depends(get_service),
) -> dict[str, Any]:
    """Add a task; its category comes from the classifier."""
    text = payload.get("text")
    if not isinstance(text, str):
        raise HTTPException(status_code=400, detail="Missing text")
    try:
        tasks = service.add(text)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _collection_payload(tasks)


@app.delete("/api/tasks/{task_id}")
def api_delete_task(
    task_id: str,
    username: str = Depends(get_current_user),
    service: TaskService = Depends(get_service),
) -> dict[str, Any]:
    return _collection_payload(service.remove(task_id))


@app.post("/api/tasks/{task_id}/reclassify")
def api_reclassify_task(
    task_id: str,
    payload: dict[str, Any] = Body(...),
    username: str = Depends(get_current_user),
    service: TaskService = Depends(get_service),
) -> dict[str, Any]:
    """Move a task to another category by hand."""
    category = payload.get("category")
    if not isinstance(category, str):
        raise HTTPException(status_code=400, detail="Missing category")
    try:
        tasks = service.reclassify(task_id, category)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _collection_payload(tasks)
