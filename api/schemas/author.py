# api/schemas/author.py
from typing import Optional, List
from .base import ModelBase, WriteBase

class AuthorCreate(WriteBase):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    notes: Optional[str] = None

class Author(ModelBase):
    first_name: str
    last_name: str
    notes: Optional[str] = None

AuthorList = List[Author]
