from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.api.schemas import PathId
from app.db.session import get_db
from . import schemas, services

router = APIRouter()

@router.post("", response_model=schemas.LabelOut, status_code=status.HTTP_201_CREATED)
def create_label(
    label: schemas.LabelCreate,
    db: Session = Depends(get_db)
):
    return services.create_label(db, label)

@router.get("", response_model=list[schemas.LabelOut])
def get_labels(db: Session = Depends(get_db)):
    return services.list_labels(db)

@router.delete("/{label_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_label(
    label_id: PathId,
    db: Session = Depends(get_db)
):
    services.delete_label(db, label_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
