# bookcase/services/book.py
from typing import List

from bookcase.exceptions import BadRequest
from bookcase.sa.models import Author, Book, Location, storable_id
from bookcase.sa.repositories import BookRepository
from .base import BaseService, lookup, require_text, require_reference


def check_location(entity) -> None:
    """Coerce a location given as a string; None means unknown"""
    if entity.location is None or isinstance(entity.location, Location):
        return
    try:
        entity.location = Location(entity.location)
    except ValueError:
        raise BadRequest(f"location: Invalid location '{entity.location}'")


class BookService(BaseService[Book]):
    model = Book
    kind = "book"

    def __init__(self, session):
        super().__init__(session)
        self.repo = BookRepository(session)

    def validate(self, book: Book) -> None:
        require_reference(book.author_id, "author_id", "Author")
        check_location(book)
        require_text(book.title, "title")
        if lookup(self.session, Author, book.author_id) is None:
            raise BadRequest(f"author_id: Missing author {book.author_id}")

    def copy_fields(self, source: Book, target: Book) -> None:
        target.author_id = source.author_id
        target.google_id = source.google_id
        target.location = source.location
        target.notes = source.notes
        target.read = bool(source.read)
        target.title = source.title

    def find_all(self) -> List[Book]:
        with self.reading():
            return self.repo.list_books()

    def find_by_title(self, title: str) -> List[Book]:
        with self.reading():
            return self.repo.search_books(title)

    def find_by_author_id(self, author_id: int) -> List[Book]:
        if not storable_id(author_id):
            return []
        with self.reading():
            return self.repo.get_books_by_author(author_id)
