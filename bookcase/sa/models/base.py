# bookcase/sa/models/base.py
from datetime import datetime, UTC
from enum import Enum
from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, mapped_column, Mapped
from sqlalchemy.types import TypeDecorator


class UTCDateTime(TypeDecorator):
    """DateTime that always comes back timezone-aware in UTC.

    SQLite drops the offset on the way in, so values are normalised to
    UTC before binding and tagged as UTC again when loaded.
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            return value.astimezone(UTC)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


def utcnow() -> datetime:
    return datetime.now(UTC)


# Range of a signed 64-bit INTEGER column
ID_MIN = -2 ** 63
ID_MAX = 2 ** 63 - 1


def storable_id(value: int) -> bool:
    """True if value fits an integer key column; larger ids never match a row"""
    return ID_MIN <= value <= ID_MAX


def next_version(version: int | None) -> int:
    """Version generator for optimistic locking: 0 on insert, then +1"""
    return 0 if version is None else version + 1


class Location(str, Enum):
    """Where a book or anthology physically (or virtually) lives"""
    ANTHOLOGY = "ANTHOLOGY"     # Part of an anthology, not a separate object
    BOX = "BOX"                 # Stored in a box; put the box id in notes
    KINDLE = "KINDLE"
    KOBO = "KOBO"
    RETURNED = "RETURNED"       # Borrowed and returned to its owner
    UNLIMITED = "UNLIMITED"     # Kindle Unlimited
    OTHER = "OTHER"


class Base(DeclarativeBase):
    """Base class for all models"""

    def __repr__(self) -> str:
        values = ", ".join(
            f"{column.key}={getattr(self, column.key)!r}"
            for column in self.__table__.columns
        )
        return f"{type(self).__name__}({values})"


class TimestampMixin:
    """Mixin to add created_at and updated_at columns"""
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
