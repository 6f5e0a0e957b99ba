# bookcase/sa/models/event.py
from enum import Enum
from sqlalchemy import Integer, Text, Index, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, TimestampMixin

class EventType(str, Enum):
    DELETED = "DELETED"
    INSERTED = "INSERTED"
    UPDATED = "UPDATED"

class MutatedModelEvent(Base, TimestampMixin):
    """Audit row written for every insert, update and delete. Never updated."""
    __tablename__ = 'mutated_model_events'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    model: Mapped[str] = mapped_column(Text, nullable=False)  # repr() of the mutated entity
    type: Mapped[EventType] = mapped_column(
        SAEnum(EventType, name='event_type', native_enum=False, length=16), nullable=False
    )

    __table_args__ = (
        Index('idx_mutated_model_events_updated_at', 'updated_at'),
    )
