# api/schemas/series.py
from typing import Optional, List
from .base import ModelBase, WriteBase

class SeriesCreate(WriteBase):
    author_id: Optional[int] = None
    title: Optional[str] = None
    notes: Optional[str] = None

class Series(ModelBase):
    author_id: int
    title: str
    notes: Optional[str] = None

class MemberCreate(WriteBase):
    series_id: Optional[int] = None
    book_id: Optional[int] = None
    ordinal: int = 0

class Member(ModelBase):
    series_id: int
    book_id: int
    ordinal: int = 0

SeriesList = List[Series]
MemberList = List[Member]
