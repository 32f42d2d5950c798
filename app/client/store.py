"""Client-side snapshot of todos and labels.

Every action calls the API and then re-reads the full todo list (plus the
label list for label changes) before returning. Nothing is patched locally,
so the snapshot is always exactly what the server last returned. If the API
call fails the ``TodoApiError`` propagates and the snapshot stays as it was.
"""

import logging
from typing import List, Optional

from app.api.labels.schemas import LabelOut
from app.api.todos.schemas import TodoOut
from .api import TodoApiClient
from .labels import toggle_labels

logger = logging.getLogger(__name__)


class TodoStore:
    def __init__(self, api: Optional[TodoApiClient] = None):
        self.api = api or TodoApiClient()
        self.todos: List[TodoOut] = []
        self.labels: List[LabelOut] = []

    def load(self) -> None:
        self.refresh_todos()
        self.refresh_labels()

    def refresh_todos(self) -> None:
        self.todos = self.api.get_todos()

    def refresh_labels(self) -> None:
        self.labels = self.api.get_labels()

    def find_todo(self, todo_id: int) -> TodoOut:
        """Return the todo from the snapshot, asking the server if it is not cached.

        An id the server does not know raises ``TodoApiError`` (404).
        """
        for todo in self.todos:
            if todo.id == todo_id:
                return todo
        return self.api.get_todo(todo_id)

    # Todo actions

    def add_todo(self, text: str) -> None:
        if not text:
            return
        self.api.add_todo(text)
        self.refresh_todos()

    def update_todo(
        self,
        todo_id: int,
        *,
        text: Optional[str] = None,
        completed: Optional[bool] = None,
        labels: Optional[List[int]] = None,
    ) -> None:
        self.api.update_todo(todo_id, text=text, completed=completed, labels=labels)
        self.refresh_todos()

    def toggle_completed(self, todo_id: int) -> None:
        todo = self.find_todo(todo_id)
        self.update_todo(todo_id, completed=not todo.completed)

    def toggle_label(self, todo_id: int, label_id: int) -> None:
        todo = self.find_todo(todo_id)
        target = next((label for label in self.labels if label.id == label_id), None)
        if target is None:
            target = LabelOut(id=label_id, name="")
        labels = toggle_labels(todo.labels, target)
        self.update_todo(todo_id, labels=[label.id for label in labels])

    def delete_todo(self, todo_id: int) -> None:
        self.api.delete_todo(todo_id)
        self.refresh_todos()

    # Label actions

    def add_label(self, name: str) -> None:
        # Uniqueness is checked by the server, not here
        self.api.add_label(name)
        self.refresh_labels()
        self.refresh_todos()

    def delete_label(self, label_id: int) -> None:
        self.api.delete_label(label_id)
        self.refresh_labels()
        self.refresh_todos()
