# tests/test_services/test_dev_mode.py
import logging
from bookcase.sa.models import Anthology, Author, Book, Member, MutatedModelEvent, Series, Story
from bookcase.services import (
    AuthorService, DevModeDepopulateService, DevModePopulateService
)

def counts(session):
    return {
        model.__tablename__: session.query(model).count()
        for model in (Author, Book, Anthology, Story, Series, Member, MutatedModelEvent)
    }

def test_populate(db_session):
    DevModePopulateService(db_session).populate()
    assert counts(db_session) == {
        'authors': 6, 'books': 6, 'anthologies': 3, 'stories': 12,
        'series': 6, 'members': 6, 'mutated_model_events': 0,
    }

def test_populated_books(populated, db_session, lookup):
    wilma_second = lookup.book(db_session, "Wilma Second Book")
    assert wilma_second.read is True
    assert wilma_second.author_id == lookup.author(db_session, "Wilma", "Flintstone").id
    assert lookup.book(db_session, "Barney First Book").read is False
    assert lookup.anthology(db_session, "First Anthology By Fred").read is True

def test_depopulate(populated, db_session, caplog):
    caplog.set_level(logging.INFO, logger="bookcase.services.dev_mode")
    AuthorService(db_session).insert(Author(first_name="Dino", last_name="Flintstone"))

    removed = DevModeDepopulateService(db_session).depopulate()

    assert removed == {
        'stories': 12, 'anthologies': 3, 'members': 6, 'series': 6,
        'books': 6, 'authors': 7, 'events': 1,
    }
    assert all(count == 0 for count in counts(db_session).values())
    assert "Removed 7 authors" in caplog.text

def test_depopulate_empty(db_session):
    removed = DevModeDepopulateService(db_session).depopulate()
    assert set(removed.values()) == {0}

def test_populate_after_depopulate(populated, db_session):
    DevModeDepopulateService(db_session).depopulate()
    DevModePopulateService(db_session).populate()
    assert counts(db_session)['stories'] == 12
