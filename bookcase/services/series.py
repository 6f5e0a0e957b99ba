# bookcase/services/series.py
from typing import List

from bookcase.exceptions import BadRequest
from bookcase.sa.models import Author, Book, Member, Series, storable_id
from bookcase.sa.repositories import MemberRepository, SeriesRepository
from .base import BaseService, lookup, require_text, require_reference, require_storable


class SeriesService(BaseService[Series]):
    model = Series
    kind = "series"

    def __init__(self, session):
        super().__init__(session)
        self.repo = SeriesRepository(session)

    def validate(self, series: Series) -> None:
        require_reference(series.author_id, "author_id", "Author")
        require_text(series.title, "title")
        if lookup(self.session, Author, series.author_id) is None:
            raise BadRequest(f"author_id: Missing author {series.author_id}")

    def copy_fields(self, source: Series, target: Series) -> None:
        target.author_id = source.author_id
        target.notes = source.notes
        target.title = source.title

    def find_all(self) -> List[Series]:
        with self.reading():
            return self.repo.list_series()

    def find_by_title(self, title: str) -> List[Series]:
        with self.reading():
            return self.repo.search_series(title)

    def find_by_author_id(self, author_id: int) -> List[Series]:
        if not storable_id(author_id):
            return []
        with self.reading():
            return self.repo.get_series_by_author(author_id)


class MemberService(BaseService[Member]):
    """Books in a series, with their reading order"""
    model = Member
    kind = "member"

    def __init__(self, session):
        super().__init__(session)
        self.repo = MemberRepository(session)

    def validate(self, member: Member) -> None:
        require_reference(member.book_id, "book_id", "Book")
        require_reference(member.series_id, "series_id", "Series")
        require_storable(member.ordinal, "ordinal")
        if lookup(self.session, Book, member.book_id) is None:
            raise BadRequest(f"book_id: Missing book {member.book_id}")
        if lookup(self.session, Series, member.series_id) is None:
            raise BadRequest(f"series_id: Missing series {member.series_id}")

    def copy_fields(self, source: Member, target: Member) -> None:
        target.book_id = source.book_id
        target.ordinal = source.ordinal or 0
        target.series_id = source.series_id

    def find_all(self) -> List[Member]:
        with self.reading():
            return self.repo.list_members()

    def find_by_series_id(self, series_id: int) -> List[Member]:
        if not storable_id(series_id):
            return []
        with self.reading():
            return self.repo.get_members_by_series(series_id)

    def find_by_book_id(self, book_id: int) -> List[Member]:
        if not storable_id(book_id):
            return []
        with self.reading():
            return self.repo.get_members_by_book(book_id)
