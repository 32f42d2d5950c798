from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.api.schemas import PathId
from app.db.session import get_db
from . import schemas, services

router = APIRouter()

@router.post("", response_model=schemas.TodoOut, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo: schemas.TodoCreate,
    db: Session = Depends(get_db)
):
    return services.create_todo(db, todo)

@router.get("", response_model=list[schemas.TodoOut])
def get_todos(db: Session = Depends(get_db)):
    return services.list_todos(db)

@router.get("/{todo_id}", response_model=schemas.TodoOut)
def get_todo(
    todo_id: PathId,
    db: Session = Depends(get_db)
):
    return services.get_todo(db, todo_id)

# PATCH is what the web client sends; PUT is kept for other callers
@router.api_route("/{todo_id}", methods=["PUT", "PATCH"], response_model=schemas.TodoOut)
def update_todo(
    todo_id: PathId,
    todo: schemas.TodoUpdate,
    db: Session = Depends(get_db)
):
    return services.update_todo(db, todo_id, todo)

@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_todo(
    todo_id: PathId,
    db: Session = Depends(get_db)
):
    services.delete_todo(db, todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
