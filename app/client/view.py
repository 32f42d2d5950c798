from typing import List, Optional

from app.api.todos.schemas import TodoOut
from .store import TodoStore


class TodoView:
    """Text rendering of a ``TodoStore`` with an optional label filter.

    The filter only narrows what is shown from the cached snapshot; it never
    triggers a fetch.
    """

    def __init__(self, store: TodoStore):
        self.store = store
        self.filter_label_id: Optional[int] = None

    def select_label(self, label_id: Optional[int]) -> None:
        self.filter_label_id = label_id

    def visible_todos(self) -> List[TodoOut]:
        if self.filter_label_id is None:
            return list(self.store.todos)
        return [
            todo for todo in self.store.todos
            if any(label.id == self.filter_label_id for label in todo.labels)
        ]

    def render(self) -> List[str]:
        lines = []
        for todo in self.visible_todos():
            mark = "x" if todo.completed else " "
            line = f"[{mark}] {todo.id}: {todo.text}"
            if todo.labels:
                line += "  " + " ".join(f"#{label.name}" for label in todo.labels)
            lines.append(line)
        return lines

    def render_labels(self) -> List[str]:
        lines = []
        for label in self.store.labels:
            marker = "*" if label.id == self.filter_label_id else " "
            lines.append(f"{marker} {label.id}: {label.name}")
        return lines
