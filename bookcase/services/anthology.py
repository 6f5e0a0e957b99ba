# bookcase/services/anthology.py
from typing import List

from bookcase.exceptions import BadRequest
from bookcase.sa.models import Anthology, Author, storable_id
from bookcase.sa.repositories import AnthologyRepository
from .base import BaseService, lookup, require_text, require_reference
from .book import check_location


class AnthologyService(BaseService[Anthology]):
    model = Anthology
    kind = "anthology"

    def __init__(self, session):
        super().__init__(session)
        self.repo = AnthologyRepository(session)

    def validate(self, anthology: Anthology) -> None:
        require_reference(anthology.author_id, "author_id", "Author")
        check_location(anthology)
        require_text(anthology.title, "title")
        if lookup(self.session, Author, anthology.author_id) is None:
            raise BadRequest(f"author_id: Missing author {anthology.author_id}")

    def copy_fields(self, source: Anthology, target: Anthology) -> None:
        target.author_id = source.author_id
        target.location = source.location
        target.notes = source.notes
        target.read = bool(source.read)
        target.title = source.title

    def find_all(self) -> List[Anthology]:
        with self.reading():
            return self.repo.list_anthologies()

    def find_by_title(self, title: str) -> List[Anthology]:
        with self.reading():
            return self.repo.search_anthologies(title)

    def find_by_author_id(self, author_id: int) -> List[Anthology]:
        if not storable_id(author_id):
            return []
        with self.reading():
            return self.repo.get_anthologies_by_author(author_id)
