# tests/test_services/test_event_service.py
import logging
import pytest
from bookcase.exceptions import BadRequest, InternalServerError, NotFound
from bookcase.sa.models import Author, EventType
from bookcase.services import AuthorService, MutatedModelEventService

def test_every_mutation_writes_one_event(db_session):
    authors = AuthorService(db_session)
    events = MutatedModelEventService(db_session)

    author = authors.insert(Author(first_name="Fred", last_name="Flintstone"))
    authors.update(author.id, Author(first_name="Fred", last_name="Flintstone", notes="Bowler"))
    authors.delete(author.id)

    trail = events.find_all()
    assert [e.type for e in trail] == [EventType.INSERTED, EventType.UPDATED, EventType.DELETED]
    assert "version=0" in trail[0].model
    assert "version=1" in trail[1].model
    assert "notes='Bowler'" in trail[2].model

def test_failed_mutation_writes_no_event(db_session):
    with pytest.raises(BadRequest):
        AuthorService(db_session).insert(Author(first_name="", last_name="Flintstone"))
    assert MutatedModelEventService(db_session).find_all() == []

def test_find(db_session):
    AuthorService(db_session).insert(Author(first_name="Fred", last_name="Flintstone"))
    events = MutatedModelEventService(db_session)
    event = events.find_all()[0]
    assert events.find(event.id) is event

def test_find_missing(db_session):
    with pytest.raises(NotFound) as exc_info:
        MutatedModelEventService(db_session).find(31)
    assert str(exc_info.value) == "id: Missing mutated model event 31"

def test_events_are_logged(db_session, caplog):
    caplog.set_level(logging.INFO, logger="bookcase.services.events")
    AuthorService(db_session).insert(Author(first_name="Fred", last_name="Flintstone"))
    assert any(
        record.getMessage().startswith("INSERTED Author(") for record in caplog.records
    )

def test_find_id_beyond_integer_column(db_session):
    with pytest.raises(NotFound):
        MutatedModelEventService(db_session).find(2 ** 63)

def test_read_failures_are_logged(db_session, caplog, monkeypatch):
    events = MutatedModelEventService(db_session)

    def broken():
        raise RuntimeError("lost connection")

    monkeypatch.setattr(events.repo, "list_events", broken)
    with pytest.raises(InternalServerError) as exc_info:
        events.find_all()
    assert str(exc_info.value) == "lost connection"
    assert any(
        record.levelno == logging.ERROR and record.name == "bookcase.services.events"
        for record in caplog.records
    )
