# bookcase/sa/models/series.py
from sqlalchemy import Integer, String, Text, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, next_version

class Member(Base, TimestampMixin):
    """Association model for books in series"""
    __tablename__ = 'members'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    series_id: Mapped[int] = mapped_column(ForeignKey('series.id', ondelete='CASCADE'), nullable=False)
    book_id: Mapped[int] = mapped_column(ForeignKey('books.id', ondelete='CASCADE'), nullable=False)
    ordinal: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # Position within the series

    __mapper_args__ = {
        'version_id_col': version,
        'version_id_generator': next_version,
    }

    __table_args__ = (
        Index('idx_members_series_ordinal', 'series_id', 'ordinal'),
        Index('idx_members_book_id', 'book_id'),
    )

class Series(Base, TimestampMixin):
    __tablename__ = 'series'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    author_id: Mapped[int] = mapped_column(ForeignKey('authors.id', ondelete='CASCADE'), nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships (only used to cascade deletes)
    members = relationship('Member', cascade='all, delete-orphan', passive_deletes=True)

    __mapper_args__ = {
        'version_id_col': version,
        'version_id_generator': next_version,
    }

    __table_args__ = (
        Index('idx_series_title', 'title'),
        Index('idx_series_author_id', 'author_id'),
    )
