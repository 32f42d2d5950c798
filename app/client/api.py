"""Thin HTTP client for the Todo API.

One method per endpoint. Responses are parsed into the same pydantic
models the server renders, and any non-2xx answer raises ``TodoApiError``.
"""

import logging
from typing import List, Optional

import httpx

from app.api.labels.schemas import LabelOut
from app.api.todos.schemas import TodoOut
from app.config import settings

logger = logging.getLogger(__name__)


class TodoApiError(Exception):
    def __init__(self, status_code: int, detail):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class TodoApiClient:
    def __init__(self, http: Optional[httpx.Client] = None):
        self.http = http or httpx.Client(base_url=settings.API_BASE_URL)

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        response = self.http.request(method, path, **kwargs)
        if response.is_error:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = response.text
            logger.warning("%s %s failed: %s %s", method, path, response.status_code, detail)
            raise TodoApiError(response.status_code, detail)
        return response

    # Todos

    def get_todos(self) -> List[TodoOut]:
        response = self._request("GET", "/todos")
        return [TodoOut.model_validate(item) for item in response.json()]

    def get_todo(self, todo_id: int) -> TodoOut:
        return TodoOut.model_validate(self._request("GET", f"/todos/{todo_id}").json())

    def add_todo(self, text: str, labels: Optional[List[int]] = None) -> TodoOut:
        payload = {"text": text, "labels": labels or []}
        return TodoOut.model_validate(self._request("POST", "/todos", json=payload).json())

    def update_todo(
        self,
        todo_id: int,
        *,
        text: Optional[str] = None,
        completed: Optional[bool] = None,
        labels: Optional[List[int]] = None,
    ) -> TodoOut:
        payload = {}
        if text is not None:
            payload["text"] = text
        if completed is not None:
            payload["completed"] = completed
        if labels is not None:
            payload["labels"] = labels
        response = self._request("PATCH", f"/todos/{todo_id}", json=payload)
        return TodoOut.model_validate(response.json())

    def delete_todo(self, todo_id: int) -> None:
        self._request("DELETE", f"/todos/{todo_id}")

    # Labels

    def get_labels(self) -> List[LabelOut]:
        response = self._request("GET", "/labels")
        return [LabelOut.model_validate(item) for item in response.json()]

    def add_label(self, name: str) -> LabelOut:
        return LabelOut.model_validate(self._request("POST", "/labels", json={"name": name}).json())

    def delete_label(self, label_id: int) -> None:
        self._request("DELETE", f"/labels/{label_id}")
