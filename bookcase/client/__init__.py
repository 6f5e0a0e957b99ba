# bookcase/client/__init__.py
from .base import BookcaseClient, ResourceClient, error_for
from .resources import (
    AuthorClient, BookClient, AnthologyClient, SeriesClient,
    StoryClient, MemberClient, MutatedModelEventClient
)

__all__ = [
    'BookcaseClient',
    'ResourceClient',
    'error_for',
    'AuthorClient',
    'BookClient',
    'AnthologyClient',
    'SeriesClient',
    'StoryClient',
    'MemberClient',
    'MutatedModelEventClient'
]
