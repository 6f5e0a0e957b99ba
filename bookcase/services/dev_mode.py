# bookcase/services/dev_mode.py
from typing import Dict
import logging

from sqlalchemy.orm import Session

from bookcase.sa.models import (
    Anthology, Author, Book, Location, Member, MutatedModelEvent, Series, Story
)

logger = logging.getLogger(__name__)

# (first_name, last_name)
AUTHORS = [
    ("Wilma", "Flintstone"),
    ("Fred", "Flintstone"),
    ("Barney", "Rubble"),
    ("Betty", "Rubble"),
    ("Pebbles", "Flintstone"),
    ("Bam Bam", "Rubble"),
]

# (author first_name, author last_name, location, read, title)
BOOKS = [
    ("Wilma", "Flintstone", Location.KINDLE, True, "Wilma Second Book"),
    ("Wilma", "Flintstone", Location.KINDLE, False, "Wilma First Book"),
    ("Fred", "Flintstone", Location.KOBO, True, "Fred Second Book"),
    ("Fred", "Flintstone", Location.KOBO, False, "Fred First Book"),
    ("Barney", "Rubble", Location.UNLIMITED, True, "Barney Second Book"),
    ("Barney", "Rubble", Location.UNLIMITED, False, "Barney First Book"),
]

ANTHOLOGIES = [
    ("Wilma", "Flintstone", Location.KINDLE, False, "First Anthology By Wilma"),
    ("Fred", "Flintstone", Location.KOBO, True, "First Anthology By Fred"),
    ("Barney", "Rubble", Location.UNLIMITED, False, "First Anthology By Barney"),
]

# (anthology title, book title, ordinal)
STORIES = [
    ("First Anthology By Wilma", "Fred Second Book", 1),
    ("First Anthology By Wilma", "Fred First Book", 2),
    ("First Anthology By Wilma", "Barney Second Book", 3),
    ("First Anthology By Wilma", "Barney First Book", 4),
    ("First Anthology By Fred", "Wilma Second Book", 1),
    ("First Anthology By Fred", "Wilma First Book", 2),
    ("First Anthology By Fred", "Barney Second Book", 3),
    ("First Anthology By Fred", "Barney First Book", 4),
    ("First Anthology By Barney", "Wilma Second Book", 1),
    ("First Anthology By Barney", "Wilma First Book", 2),
    ("First Anthology By Barney", "Fred Second Book", 3),
    ("First Anthology By Barney", "Fred First Book", 4),
]

# (author first_name, author last_name, title)
SERIES = [
    ("Wilma", "Flintstone", "Second Series By Wilma"),
    ("Wilma", "Flintstone", "First Series By Wilma"),
    ("Fred", "Flintstone", "Second Series By Fred"),
    ("Fred", "Flintstone", "First Series By Fred"),
    ("Barney", "Rubble", "Second Series By Barney"),
    ("Barney", "Rubble", "First Series By Barney"),
]

# (series title, book title, ordinal)
MEMBERS = [
    ("Second Series By Wilma", "Wilma First Book", 1),
    ("Second Series By Wilma", "Wilma Second Book", 2),
    ("First Series By Fred", "Fred First Book", 1),
    ("First Series By Fred", "Fred Second Book", 2),
    ("Second Series By Barney", "Barney First Book", 1),
    ("Second Series By Barney", "Barney Second Book", 2),
]


class DevModePopulateService:
    """Load a small, fixed data set for development and tests.

    Rows are added straight through the session, so no audit events are
    written for them.
    """

    def __init__(self, session: Session):
        self.session = session
        self.authors: Dict[tuple, Author] = {}
        self.books: Dict[str, Book] = {}
        self.anthologies: Dict[str, Anthology] = {}
        self.series: Dict[str, Series] = {}

    def populate(self) -> None:
        logger.info("----- Populate Development Test Data Begin -----")
        try:
            self.populate_authors()
            self.populate_books()
            self.populate_anthologies()
            self.populate_stories()
            self.populate_series()
            self.populate_members()
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        finally:
            self.authors.clear()
            self.books.clear()
            self.anthologies.clear()
            self.series.clear()
        logger.info("------ Populate Development Test Data End ------")

    def _author_id(self, first_name: str, last_name: str) -> int:
        return self.authors[(first_name, last_name)].id

    def populate_authors(self) -> None:
        for first_name, last_name in AUTHORS:
            author = Author(first_name=first_name, last_name=last_name)
            self.session.add(author)
            self.authors[(first_name, last_name)] = author
        self.session.flush()
        logger.info("Populated %d authors", len(AUTHORS))

    def populate_books(self) -> None:
        for first_name, last_name, location, read, title in BOOKS:
            book = Book(
                author_id=self._author_id(first_name, last_name),
                location=location,
                read=read,
                title=title
            )
            self.session.add(book)
            self.books[title] = book
        self.session.flush()
        logger.info("Populated %d books", len(BOOKS))

    def populate_anthologies(self) -> None:
        for first_name, last_name, location, read, title in ANTHOLOGIES:
            anthology = Anthology(
                author_id=self._author_id(first_name, last_name),
                location=location,
                read=read,
                title=title
            )
            self.session.add(anthology)
            self.anthologies[title] = anthology
        self.session.flush()
        logger.info("Populated %d anthologies", len(ANTHOLOGIES))

    def populate_stories(self) -> None:
        for anthology_title, book_title, ordinal in STORIES:
            self.session.add(Story(
                anthology_id=self.anthologies[anthology_title].id,
                book_id=self.books[book_title].id,
                ordinal=ordinal
            ))
        self.session.flush()
        logger.info("Populated %d stories", len(STORIES))

    def populate_series(self) -> None:
        for first_name, last_name, title in SERIES:
            series = Series(author_id=self._author_id(first_name, last_name), title=title)
            self.session.add(series)
            self.series[title] = series
        self.session.flush()
        logger.info("Populated %d series", len(SERIES))

    def populate_members(self) -> None:
        for series_title, book_title, ordinal in MEMBERS:
            self.session.add(Member(
                series_id=self.series[series_title].id,
                book_id=self.books[book_title].id,
                ordinal=ordinal
            ))
        self.session.flush()
        logger.info("Populated %d members", len(MEMBERS))


class DevModeDepopulateService:
    """Remove everything, dependents first."""

    def __init__(self, session: Session):
        self.session = session

    def depopulate(self) -> Dict[str, int]:
        logger.info("----- Depopulate Development Test Data Begin -----")
        counts: Dict[str, int] = {}
        try:
            for name, model in (
                ("stories", Story),
                ("anthologies", Anthology),
                ("members", Member),
                ("series", Series),
                ("books", Book),
                ("authors", Author),
                ("events", MutatedModelEvent),
            ):
                counts[name] = self.session.query(model).delete(synchronize_session=False)
                logger.info("Removed %d %s", counts[name], name)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.expire_all()
        logger.info("------ Depopulate Development Test Data End ------")
        return counts
