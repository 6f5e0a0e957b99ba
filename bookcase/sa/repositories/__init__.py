# bookcase/sa/repositories/__init__.py
from .author import AuthorRepository
from .book import BookRepository
from .anthology import AnthologyRepository
from .series import SeriesRepository, MemberRepository
from .story import StoryRepository
from .event import MutatedModelEventRepository

__all__ = [
    'AuthorRepository',
    'BookRepository',
    'AnthologyRepository',
    'SeriesRepository',
    'MemberRepository',
    'StoryRepository',
    'MutatedModelEventRepository'
]
