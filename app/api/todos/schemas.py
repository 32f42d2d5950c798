from pydantic import BaseModel
from typing import Optional, List

from app.api.labels.schemas import LabelOut
from app.api.schemas import RowId

class TodoCreate(BaseModel):
    text: str
    labels: List[RowId] = []

class TodoUpdate(BaseModel):
    # The web client echoes the id back in the body; the path id wins
    id: Optional[int] = None
    text: Optional[str] = None
    completed: Optional[bool] = None
    labels: Optional[List[RowId]] = None

class TodoOut(BaseModel):
    id: int
    text: str
    completed: bool
    labels: List[LabelOut] = []

    model_config = {
        "from_attributes": True
    }
