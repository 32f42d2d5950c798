import logging
from typing import Iterable

from sqlalchemy.orm import Session, selectinload

from app.core.exceptions import NotFoundError, ValidationError
from app.db.models.todo.label import Label
from app.db.models.todo.todo import Todo
from app.db.models.todo.todo_label import TodoLabel
from . import schemas

logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 100


def _clean_text(text: str) -> str:
    if not text or not text.strip():
        raise ValidationError("Todo text can not be empty")
    if len(text) > MAX_TEXT_LENGTH:
        raise ValidationError(f"Todo text is longer than {MAX_TEXT_LENGTH} characters")
    return text


def _resolve_labels(db: Session, label_ids: Iterable[int]):
    """Load the labels for ``label_ids``, failing on any id that does not exist."""
    wanted = sorted(set(label_ids))
    if not wanted:
        return []
    labels = db.query(Label).filter(Label.id.in_(wanted)).order_by(Label.id).all()
    missing = set(wanted) - {label.id for label in labels}
    if missing:
        raise ValidationError(f"Unknown label ids: {sorted(missing)}")
    return labels


def _set_labels(db_todo: Todo, labels) -> None:
    # Keep existing association rows so unchanged pairs are not deleted and re-inserted
    current = {todo_label.label_id: todo_label for todo_label in db_todo.todo_labels}
    db_todo.todo_labels = [
        current.get(label.id) or TodoLabel(label=label) for label in labels
    ]


def _todo_query(db: Session):
    return db.query(Todo).options(
        selectinload(Todo.todo_labels).selectinload(TodoLabel.label)
    )


def list_todos(db: Session):
    return _todo_query(db).order_by(Todo.id).all()

def get_todo(db: Session, todo_id: int):
    todo = _todo_query(db).filter(Todo.id == todo_id).first()
    if todo is None:
        raise NotFoundError(f"Todo {todo_id} not found")
    return todo

def create_todo(db: Session, todo: schemas.TodoCreate):
    text = _clean_text(todo.text)
    labels = _resolve_labels(db, todo.labels)

    db_todo = Todo(text=text, completed=False)
    _set_labels(db_todo, labels)
    db.add(db_todo)
    db.commit()
    db.refresh(db_todo)
    logger.info("Created todo id=%s", db_todo.id)
    return db_todo

def update_todo(db: Session, todo_id: int, todo: schemas.TodoUpdate):
    db_todo = get_todo(db, todo_id)

    # Only fields present in the request (and not null) change
    changes = todo.model_dump(exclude_unset=True, exclude_none=True, exclude={"id"})
    if "text" in changes:
        changes["text"] = _clean_text(changes["text"])
    if "labels" in changes:
        labels = _resolve_labels(db, changes.pop("labels"))
        _set_labels(db_todo, labels)

    for key, value in changes.items():
        setattr(db_todo, key, value)
    db.commit()
    db.refresh(db_todo)
    logger.info("Updated todo id=%s", todo_id)
    return db_todo

def delete_todo(db: Session, todo_id: int):
    db_todo = get_todo(db, todo_id)
    db.delete(db_todo)
    db.commit()
    logger.info("Deleted todo id=%s", todo_id)
