# bookcase/sa/models/book.py
from sqlalchemy import Integer, String, Boolean, Text, ForeignKey, Index, Enum as SAEnum
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, Location, next_version

class Book(Base, TimestampMixin):
    __tablename__ = 'books'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    author_id: Mapped[int] = mapped_column(ForeignKey('authors.id', ondelete='CASCADE'), nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    location: Mapped[Location | None] = mapped_column(
        SAEnum(Location, name='location', native_enum=False, length=16), nullable=True
    )
    read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    google_id: Mapped[str | None] = mapped_column(String(255), nullable=True)  # Google Books volume id

    # Relationships (only used to cascade deletes)
    members = relationship('Member', cascade='all, delete-orphan', passive_deletes=True)
    stories = relationship('Story', cascade='all, delete-orphan', passive_deletes=True)

    __mapper_args__ = {
        'version_id_col': version,
        'version_id_generator': next_version,
    }

    __table_args__ = (
        Index('idx_books_title', 'title'),
        Index('idx_books_author_id', 'author_id'),
    )
