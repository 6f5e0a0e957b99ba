# api/schemas/book.py
from typing import Optional, List
from bookcase.sa.models import Location
from .base import ModelBase, WriteBase

class BookCreate(WriteBase):
    author_id: Optional[int] = None
    title: Optional[str] = None
    location: Optional[Location] = None
    read: bool = False
    notes: Optional[str] = None
    google_id: Optional[str] = None

class Book(ModelBase):
    author_id: int
    title: str
    location: Optional[Location] = None
    read: bool = False
    notes: Optional[str] = None
    google_id: Optional[str] = None

class AnthologyCreate(WriteBase):
    author_id: Optional[int] = None
    title: Optional[str] = None
    location: Optional[Location] = None
    read: bool = False
    notes: Optional[str] = None

class Anthology(ModelBase):
    author_id: int
    title: str
    location: Optional[Location] = None
    read: bool = False
    notes: Optional[str] = None

class StoryCreate(WriteBase):
    anthology_id: Optional[int] = None
    book_id: Optional[int] = None
    ordinal: int = 0

class Story(ModelBase):
    anthology_id: int
    book_id: int
    ordinal: int = 0

BookList = List[Book]
AnthologyList = List[Anthology]
StoryList = List[Story]
