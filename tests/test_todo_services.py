"""Service layer tests for todos."""

import pytest

from app.api.labels import services as label_services
from app.api.labels.schemas import LabelCreate
from app.api.todos import services
from app.api.todos.schemas import TodoCreate, TodoUpdate
from app.core.exceptions import NotFoundError, ValidationError


def _snapshot(todos):
    return [
        (todo.id, todo.text, todo.completed, [label.id for label in todo.labels])
        for todo in todos
    ]


def test_create_todo_defaults(db) -> None:
    todo = services.create_todo(db, TodoCreate(text="buy milk"))
    assert todo.id is not None
    assert todo.text == "buy milk"
    assert todo.completed is False
    assert todo.labels == []


@pytest.mark.parametrize("text", ["", "   "])
def test_create_todo_rejects_empty_text(db, text) -> None:
    with pytest.raises(ValidationError):
        services.create_todo(db, TodoCreate(text=text))
    assert services.list_todos(db) == []


def test_create_todo_rejects_too_long_text(db) -> None:
    with pytest.raises(ValidationError):
        services.create_todo(db, TodoCreate(text="x" * 101))


def test_create_todo_with_labels(db) -> None:
    label = label_services.create_label(db, LabelCreate(name="errand"))
    todo = services.create_todo(db, TodoCreate(text="buy milk", labels=[label.id]))
    assert [l.name for l in todo.labels] == ["errand"]


def test_create_todo_with_unknown_label_fails(db) -> None:
    with pytest.raises(ValidationError):
        services.create_todo(db, TodoCreate(text="buy milk", labels=[42]))
    assert services.list_todos(db) == []


def test_update_completed_keeps_other_fields(db) -> None:
    label = label_services.create_label(db, LabelCreate(name="home"))
    todo = services.create_todo(db, TodoCreate(text="clean", labels=[label.id]))

    services.update_todo(db, todo.id, TodoUpdate(completed=True))

    [listed] = services.list_todos(db)
    assert listed.completed is True
    assert listed.text == "clean"
    assert [l.id for l in listed.labels] == [label.id]


def test_update_text_only(db) -> None:
    todo = services.create_todo(db, TodoCreate(text="before"))
    services.update_todo(db, todo.id, TodoUpdate(completed=True))
    updated = services.update_todo(db, todo.id, TodoUpdate(text="after"))
    assert updated.text == "after"
    assert updated.completed is True


def test_update_replaces_label_set(db) -> None:
    work = label_services.create_label(db, LabelCreate(name="work"))
    home = label_services.create_label(db, LabelCreate(name="home"))
    todo = services.create_todo(db, TodoCreate(text="task", labels=[work.id]))

    updated = services.update_todo(db, todo.id, TodoUpdate(labels=[home.id, work.id, home.id]))
    assert [l.id for l in updated.labels] == [work.id, home.id]

    updated = services.update_todo(db, todo.id, TodoUpdate(labels=[]))
    assert updated.labels == []


def test_update_unknown_todo(db) -> None:
    with pytest.raises(NotFoundError):
        services.update_todo(db, 999, TodoUpdate(completed=True))


def test_update_with_unknown_label_changes_nothing(db) -> None:
    todo = services.create_todo(db, TodoCreate(text="keep me"))
    with pytest.raises(ValidationError):
        services.update_todo(db, todo.id, TodoUpdate(text="changed", labels=[7]))
    assert services.get_todo(db, todo.id).text == "keep me"


def test_update_rejects_empty_text(db) -> None:
    todo = services.create_todo(db, TodoCreate(text="keep me"))
    with pytest.raises(ValidationError):
        services.update_todo(db, todo.id, TodoUpdate(text=""))


def test_delete_todo_twice(db) -> None:
    todo = services.create_todo(db, TodoCreate(text="gone"))
    services.delete_todo(db, todo.id)
    assert services.list_todos(db) == []
    with pytest.raises(NotFoundError):
        services.delete_todo(db, todo.id)


def test_delete_todo_keeps_labels(db) -> None:
    label = label_services.create_label(db, LabelCreate(name="errand"))
    todo = services.create_todo(db, TodoCreate(text="buy milk", labels=[label.id]))
    services.delete_todo(db, todo.id)
    assert [l.name for l in label_services.list_labels(db)] == ["errand"]


def test_ids_are_not_reused(db) -> None:
    first = services.create_todo(db, TodoCreate(text="one"))
    second = services.create_todo(db, TodoCreate(text="two"))
    services.delete_todo(db, second.id)
    third = services.create_todo(db, TodoCreate(text="three"))
    assert third.id not in (first.id, second.id)


def test_list_todos_is_stable(db) -> None:
    label = label_services.create_label(db, LabelCreate(name="errand"))
    services.create_todo(db, TodoCreate(text="a"))
    services.create_todo(db, TodoCreate(text="b", labels=[label.id]))
    first = _snapshot(services.list_todos(db))
    second = _snapshot(services.list_todos(db))
    assert first == second
    assert [text for _, text, _, _ in first] == ["a", "b"]


def test_get_unknown_todo(db) -> None:
    with pytest.raises(NotFoundError):
        services.get_todo(db, 1)
