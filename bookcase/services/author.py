# bookcase/services/author.py
from typing import List, Optional

from bookcase.exceptions import NotUnique
from bookcase.sa.models import Author
from bookcase.sa.repositories import AuthorRepository
from .base import BaseService, require_text

NAME_UNIQUE_MESSAGE = "first_name/last_name: Author first_name plus last_name must be unique"


class AuthorService(BaseService[Author]):
    model = Author
    kind = "author"

    def __init__(self, session):
        super().__init__(session)
        self.repo = AuthorRepository(session)

    def validate(self, author: Author) -> None:
        require_text(author.first_name, "first_name")
        require_text(author.last_name, "last_name")

    def check_unique(self, author: Author, author_id: Optional[int]) -> None:
        existing = self.repo.get_by_name(author.first_name, author.last_name)
        if existing is not None and existing.id != author_id:
            raise NotUnique(NAME_UNIQUE_MESSAGE)

    def copy_fields(self, source: Author, target: Author) -> None:
        target.first_name = source.first_name
        target.last_name = source.last_name
        target.notes = source.notes

    def find_all(self) -> List[Author]:
        with self.reading():
            return self.repo.list_authors()

    def find_by_name(self, name: str) -> List[Author]:
        with self.reading():
            return self.repo.search_authors(name)
