# bookcase/sa/models/story.py
from sqlalchemy import Integer, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, TimestampMixin, next_version

class Story(Base, TimestampMixin):
    """Association model for books in anthologies"""
    __tablename__ = 'stories'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    anthology_id: Mapped[int] = mapped_column(ForeignKey('anthologies.id', ondelete='CASCADE'), nullable=False)
    book_id: Mapped[int] = mapped_column(ForeignKey('books.id', ondelete='CASCADE'), nullable=False)
    ordinal: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # Position within the anthology

    __mapper_args__ = {
        'version_id_col': version,
        'version_id_generator': next_version,
    }

    __table_args__ = (
        Index('idx_stories_anthology_ordinal', 'anthology_id', 'ordinal'),
        Index('idx_stories_book_id', 'book_id'),
    )
