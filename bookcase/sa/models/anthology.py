# bookcase/sa/models/anthology.py
from sqlalchemy import Integer, String, Boolean, Text, ForeignKey, Index, Enum as SAEnum
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, Location, next_version

class Anthology(Base, TimestampMixin):
    """A collection of books published together (see Story)"""
    __tablename__ = 'anthologies'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    author_id: Mapped[int] = mapped_column(ForeignKey('authors.id', ondelete='CASCADE'), nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    location: Mapped[Location | None] = mapped_column(
        SAEnum(Location, name='location', native_enum=False, length=16), nullable=True
    )
    read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships (only used to cascade deletes)
    stories = relationship('Story', cascade='all, delete-orphan', passive_deletes=True)

    __mapper_args__ = {
        'version_id_col': version,
        'version_id_generator': next_version,
    }

    __table_args__ = (
        Index('idx_anthologies_title', 'title'),
        Index('idx_anthologies_author_id', 'author_id'),
    )
