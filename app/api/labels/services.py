import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.db.models.todo.label import Label
from . import schemas

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100


def _clean_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Label name can not be empty")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"Label name is longer than {MAX_NAME_LENGTH} characters")
    return name


def find_label_by_name(db: Session, name: str):
    # Exact, case-sensitive match
    return db.query(Label).filter(Label.name == name).first()

def list_labels(db: Session):
    return db.query(Label).order_by(Label.id).all()

def get_label(db: Session, label_id: int):
    label = db.get(Label, label_id)
    if label is None:
        raise NotFoundError(f"Label {label_id} not found")
    return label

def create_label(db: Session, label: schemas.LabelCreate):
    name = _clean_name(label.name)

    existing = find_label_by_name(db, name)
    if existing:
        logger.warning("Rejected duplicate label name %r (id=%s)", name, existing.id)
        raise ConflictError(f"Label '{name}' already exists")

    db_label = Label(name=name)
    db.add(db_label)
    try:
        db.commit()
    except IntegrityError as e:
        # Another writer inserted the same name between the check and the commit
        db.rollback()
        logger.warning("Unique constraint rejected label name %r", name)
        raise ConflictError(f"Label '{name}' already exists") from e
    db.refresh(db_label)
    logger.info("Created label id=%s name=%r", db_label.id, db_label.name)
    return db_label

def delete_label(db: Session, label_id: int):
    db_label = get_label(db, label_id)
    # TodoLabel rows go with it through the relationship cascade
    db.delete(db_label)
    db.commit()
    logger.info("Deleted label id=%s", label_id)
