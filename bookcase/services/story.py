# bookcase/services/story.py
from typing import List

from bookcase.exceptions import BadRequest
from bookcase.sa.models import Anthology, Book, Story, storable_id
from bookcase.sa.repositories import StoryRepository
from .base import BaseService, lookup, require_reference, require_storable


class StoryService(BaseService[Story]):
    """Books bundled into an anthology, with their position in it"""
    model = Story
    kind = "story"

    def __init__(self, session):
        super().__init__(session)
        self.repo = StoryRepository(session)

    def validate(self, story: Story) -> None:
        require_reference(story.anthology_id, "anthology_id", "Anthology")
        require_reference(story.book_id, "book_id", "Book")
        require_storable(story.ordinal, "ordinal")
        if lookup(self.session, Anthology, story.anthology_id) is None:
            raise BadRequest(f"anthology_id: Missing anthology {story.anthology_id}")
        if lookup(self.session, Book, story.book_id) is None:
            raise BadRequest(f"book_id: Missing book {story.book_id}")

    def copy_fields(self, source: Story, target: Story) -> None:
        target.anthology_id = source.anthology_id
        target.book_id = source.book_id
        target.ordinal = source.ordinal or 0

    def find_all(self) -> List[Story]:
        with self.reading():
            return self.repo.list_stories()

    def find_by_anthology_id(self, anthology_id: int) -> List[Story]:
        if not storable_id(anthology_id):
            return []
        with self.reading():
            return self.repo.get_stories_by_anthology(anthology_id)

    def find_by_book_id(self, book_id: int) -> List[Story]:
        if not storable_id(book_id):
            return []
        with self.reading():
            return self.repo.get_stories_by_book(book_id)
