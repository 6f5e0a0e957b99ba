# bookcase/services/__init__.py
from .events import MutatedModelEventService
from .author import AuthorService
from .book import BookService
from .anthology import AnthologyService
from .series import SeriesService, MemberService
from .story import StoryService
from .dev_mode import DevModePopulateService, DevModeDepopulateService

__all__ = [
    'MutatedModelEventService',
    'AuthorService',
    'BookService',
    'AnthologyService',
    'SeriesService',
    'MemberService',
    'StoryService',
    'DevModePopulateService',
    'DevModeDepopulateService'
]
