# tests/test_view_filter.py

from __future__ import annotations

import pytest

from app.api.dashboard import services as view
from app.api.todo.task.schemas import TaskOut, TaskStatus


def make_tasks(*statuses: str) -> list[TaskOut]:
    return [TaskOut(id=i, title=f"task {i}", status=s) for i, s in enumerate(statuses, start=1)]


@pytest.fixture()
def tasks() -> list[TaskOut]:
    return make_tasks("todo", "in-progress", "done", "done", "todo")


def test_all_returns_every_task(tasks):
    assert view.filter_tasks(tasks, "all") == tasks


@pytest.mark.parametrize("key", ["done", "completed"])
def test_done_returns_exactly_the_done_subset(tasks, key):
    assert [t.id for t in view.filter_tasks(tasks, key)] == [3, 4]


@pytest.mark.parametrize("key", ["in_progress", "in-progress"])
def test_in_progress_keys_match_in_progress_status(tasks, key):
    assert [t.id for t in view.filter_tasks(tasks, key)] == [2]
    assert view.normalize_filter(key) is TaskStatus.IN_PROGRESS


def test_menu_counts_agree_with_filtering(tasks):
    menu = view.build_filter_menu(tasks, "in-progress")

    assert [(o.key, o.label, o.count) for o in menu] == [
        ("all", "All Tasks", 5),
        ("todo", "To Do", 2),
        ("in_progress", "In Progress", 1),
        ("completed", "Completed", 2),
    ]
    for option in menu:
        assert option.count == len(view.filter_tasks(tasks, option.key))
    assert [o.key for o in menu if o.active] == ["in_progress"]


def test_count_by_status_covers_every_status():
    assert view.count_by_status([]) == {
        TaskStatus.TODO: 0,
        TaskStatus.IN_PROGRESS: 0,
        TaskStatus.DONE: 0,
    }


def test_unknown_filter_is_an_error(tasks):
    with pytest.raises(ValueError):
        view.filter_tasks(tasks, "archived")


@pytest.mark.parametrize(
    "key,heading,message",
    [
        ("all", "All Tasks", "Get started by creating your first task"),
        ("todo", "To Do", "No todo tasks at the moment"),
        ("in_progress", "In Progress", "No in progress tasks at the moment"),
        ("done", "Completed", "No completed tasks at the moment"),
    ],
)
def test_heading_and_empty_message(key, heading, message):
    assert view.heading_for(key) == heading
    assert view.empty_message(key) == message


@pytest.mark.parametrize("count,text", [(0, "0 Tasks"), (1, "1 Task"), (2, "2 Tasks")])
def test_task_count_text(count, text):
    assert view.task_count_text(count) == text


def test_status_labels():
    labels = [t.status_label for t in make_tasks("todo", "in-progress", "done")]

    assert labels == ["To Do", "In Progress", "Done"]
