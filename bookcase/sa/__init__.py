# bookcase/sa/__init__.py
from .database import Database
from .models import (
    Base, Author, Book, Anthology, Series,
    Story, Member, MutatedModelEvent, EventType, Location
)

__all__ = [
    'Database',
    'Base',
    'Author',
    'Book',
    'Anthology',
    'Series',
    'Story',
    'Member',
    'MutatedModelEvent',
    'EventType',
    'Location'
]
