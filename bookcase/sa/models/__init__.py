# bookcase/sa/models/__init__.py
from .base import Base, TimestampMixin, UTCDateTime, Location, storable_id, utcnow
from .author import Author
from .book import Book
from .anthology import Anthology
from .series import Series, Member
from .story import Story
from .event import EventType, MutatedModelEvent

__all__ = [
    'Base',
    'TimestampMixin',
    'UTCDateTime',
    'Location',
    'storable_id',
    'utcnow',
    'Author',
    'Book',
    'Anthology',
    'Series',
    'Member',
    'Story',
    'EventType',
    'MutatedModelEvent'
]
