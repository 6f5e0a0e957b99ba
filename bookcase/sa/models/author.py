# bookcase/sa/models/author.py
from sqlalchemy import Integer, String, Text, Index, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, next_version

class Author(Base, TimestampMixin):
    __tablename__ = 'authors'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships (only used to cascade deletes)
    anthologies = relationship('Anthology', cascade='all, delete-orphan', passive_deletes=True)
    books = relationship('Book', cascade='all, delete-orphan', passive_deletes=True)
    series = relationship('Series', cascade='all, delete-orphan', passive_deletes=True)

    __mapper_args__ = {
        'version_id_col': version,
        'version_id_generator': next_version,
    }

    __table_args__ = (
        UniqueConstraint('first_name', 'last_name', name='uix_authors_name'),
        Index('idx_authors_name', 'last_name', 'first_name'),
    )
