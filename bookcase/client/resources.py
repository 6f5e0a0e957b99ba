# bookcase/client/resources.py
from typing import List

from api.schemas import Anthology, Author, Book, Member, MutatedModelEvent, Series, Story
from .base import ResourceClient


class AuthorClient(ResourceClient[Author]):
    path = "authors"
    schema = Author

    def find_by_name(self, name: str) -> List[Author]:
        return self._many(self.client.request("GET", self.path, "name", name))


class BookClient(ResourceClient[Book]):
    path = "books"
    schema = Book

    def find_by_title(self, title: str) -> List[Book]:
        return self._many(self.client.request("GET", self.path, "title", title))

    def find_by_author_id(self, author_id: int) -> List[Book]:
        return self._many(self.client.request("GET", self.path, "author", author_id))


class AnthologyClient(ResourceClient[Anthology]):
    path = "anthologies"
    schema = Anthology

    def find_by_title(self, title: str) -> List[Anthology]:
        return self._many(self.client.request("GET", self.path, "title", title))

    def find_by_author_id(self, author_id: int) -> List[Anthology]:
        return self._many(self.client.request("GET", self.path, "author", author_id))


class SeriesClient(ResourceClient[Series]):
    path = "series"
    schema = Series

    def find_by_title(self, title: str) -> List[Series]:
        return self._many(self.client.request("GET", self.path, "title", title))

    def find_by_author_id(self, author_id: int) -> List[Series]:
        return self._many(self.client.request("GET", self.path, "author", author_id))


class StoryClient(ResourceClient[Story]):
    path = "stories"
    schema = Story

    def find_by_anthology_id(self, anthology_id: int) -> List[Story]:
        return self._many(self.client.request("GET", self.path, "anthology", anthology_id))

    def find_by_book_id(self, book_id: int) -> List[Story]:
        return self._many(self.client.request("GET", self.path, "book", book_id))


class MemberClient(ResourceClient[Member]):
    path = "members"
    schema = Member

    def find_by_series_id(self, series_id: int) -> List[Member]:
        return self._many(self.client.request("GET", self.path, "series", series_id))

    def find_by_book_id(self, book_id: int) -> List[Member]:
        return self._many(self.client.request("GET", self.path, "book", book_id))


class MutatedModelEventClient(ResourceClient[MutatedModelEvent]):
    """Read-only: the server has no write routes for events"""
    path = "mutatedModelEvents"
    schema = MutatedModelEvent
