from sqlalchemy import Column, Integer, String, Boolean
from sqlalchemy.orm import relationship
from app.db.session import Base


class Todo(Base):
    __tablename__ = "todos"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    text = Column(String(100), nullable=False)
    completed = Column(Boolean, nullable=False, default=False)

    # Relationships
    todo_labels = relationship(
        "TodoLabel",
        back_populates="todo",
        cascade="all, delete-orphan",
        order_by="TodoLabel.label_id",
    )

    @property
    def labels(self):
        return [todo_label.label for todo_label in self.todo_labels]
