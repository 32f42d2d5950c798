from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from app.db.session import Base

class TodoLabel(Base):
    __tablename__ = "todo_labels"

    todo_id = Column(Integer, ForeignKey("todos.id", ondelete="CASCADE"), primary_key=True)
    label_id = Column(Integer, ForeignKey("labels.id", ondelete="CASCADE"), primary_key=True)

    # Relationships
    todo = relationship("Todo", back_populates="todo_labels")
    label = relationship("Label", back_populates="todos")
