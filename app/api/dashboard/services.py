"""
Derived views over an in-memory task list: filtering, per-status counts and
the display strings shown next to them.

Filter keys and task statuses don't share spelling (``in_progress`` vs
``in-progress``, ``completed`` vs ``done``), so every key goes through
:func:`normalize_filter` before it is used for either counting or filtering.
"""
from typing import Iterable, List, Optional

from app.api.todo.task.schemas import TaskOut, TaskStatus
from . import schemas

FILTER_ALL = "all"

# Canonical menu keys, in display order
FILTER_MENU = [
    (FILTER_ALL, "All Tasks", None),
    ("todo", "To Do", TaskStatus.TODO),
    ("in_progress", "In Progress", TaskStatus.IN_PROGRESS),
    ("completed", "Completed", TaskStatus.DONE),
]

FILTER_ALIASES = {
    "in-progress": "in_progress",
    "done": "completed",
}


def canonical_filter(key: str) -> str:
    key = FILTER_ALIASES.get(key, key)
    if key not in {menu_key for menu_key, _, _ in FILTER_MENU}:
        raise ValueError(f"Unknown filter: {key!r}")
    return key


def normalize_filter(key: str) -> Optional[TaskStatus]:
    """Map a filter key to the status it selects; ``None`` selects everything."""
    key = canonical_filter(key)
    for menu_key, _, task_status in FILTER_MENU:
        if menu_key == key:
            return task_status
    return None


def filter_tasks(tasks: Iterable[TaskOut], key: str) -> List[TaskOut]:
    wanted = normalize_filter(key)
    if wanted is None:
        return list(tasks)
    return [task for task in tasks if task.status == wanted]


def count_by_status(tasks: Iterable[TaskOut]) -> dict:
    counts = {task_status: 0 for task_status in TaskStatus}
    for task in tasks:
        counts[TaskStatus(task.status)] += 1
    return counts


def build_filter_menu(tasks: List[TaskOut], active: str) -> List[schemas.FilterOption]:
    active = canonical_filter(active)
    counts = count_by_status(tasks)
    return [
        schemas.FilterOption(
            key=key,
            label=label,
            count=len(tasks) if task_status is None else counts[task_status],
            active=key == active,
        )
        for key, label, task_status in FILTER_MENU
    ]


def heading_for(key: str) -> str:
    key = canonical_filter(key)
    return next(label for menu_key, label, _ in FILTER_MENU if menu_key == key)


def task_count_text(count: int) -> str:
    return f"{count} Task{'' if count == 1 else 's'}"


def empty_message(key: str) -> str:
    key = canonical_filter(key)
    if key == FILTER_ALL:
        return "Get started by creating your first task"
    return f"No {key.replace('_', ' ')} tasks at the moment"


def build_dashboard(user, labels, tasks: List[TaskOut], key: str) -> schemas.DashboardOut:
    visible = filter_tasks(tasks, key)
    return schemas.DashboardOut(
        user=user,
        labels=labels,
        filters=build_filter_menu(tasks, key),
        active_filter=canonical_filter(key),
        heading=heading_for(key),
        task_count=task_count_text(len(visible)),
        tasks=visible,
        empty_message=None if visible else empty_message(key),
    )
