# api/schemas/__init__.py
from .author import Author, AuthorCreate, AuthorList
from .book import (
    Book, BookCreate, BookList,
    Anthology, AnthologyCreate, AnthologyList,
    Story, StoryCreate, StoryList
)
from .series import Series, SeriesCreate, SeriesList, Member, MemberCreate, MemberList
from .event import MutatedModelEvent, MutatedModelEventList

__all__ = [
    'Author', 'AuthorCreate', 'AuthorList',
    'Book', 'BookCreate', 'BookList',
    'Anthology', 'AnthologyCreate', 'AnthologyList',
    'Story', 'StoryCreate', 'StoryList',
    'Series', 'SeriesCreate', 'SeriesList',
    'Member', 'MemberCreate', 'MemberList',
    'MutatedModelEvent', 'MutatedModelEventList'
]
