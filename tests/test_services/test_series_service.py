# tests/test_services/test_series_service.py
import pytest
from bookcase.exceptions import BadRequest, NotFound
from bookcase.sa.models import Member, Series
from bookcase.services import SeriesService

@pytest.fixture
def service(populated, db_session):
    return SeriesService(db_session)

def test_insert(service, db_session, lookup):
    fred = lookup.author(db_session, "Fred", "Flintstone")
    series = service.insert(Series(author_id=fred.id, title="Third Series By Fred"))
    assert series.version == 0
    assert [s.title for s in service.find_by_author_id(fred.id)] == [
        "First Series By Fred", "Second Series By Fred", "Third Series By Fred",
    ]

def test_insert_blank_title(service, db_session, lookup):
    fred = lookup.author(db_session, "Fred", "Flintstone")
    with pytest.raises(BadRequest) as exc_info:
        service.insert(Series(author_id=fred.id, title="  "))
    assert str(exc_info.value) == "title: Required and must not be blank"

def test_find_by_title(service):
    assert [s.title for s in service.find_by_title("FIRST")] == [
        "First Series By Barney", "First Series By Fred", "First Series By Wilma",
    ]

def test_find_missing(service):
    with pytest.raises(NotFound) as exc_info:
        service.find(42)
    assert str(exc_info.value) == "id: Missing series 42"

def test_update_title(service, db_session, lookup):
    series = lookup.series(db_session, "First Series By Barney")
    updated = service.update(series.id, Series(
        author_id=series.author_id, title="Barney's Bowling Saga", notes="Bowling"
    ))
    assert updated.title == "Barney's Bowling Saga"
    assert updated.notes == "Bowling"

def test_delete_removes_members(service, db_session, lookup):
    series = lookup.series(db_session, "Second Series By Wilma")
    series_id = series.id
    service.delete(series_id)
    assert db_session.query(Member).filter_by(series_id=series_id).count() == 0
    assert db_session.query(Member).count() == 4
