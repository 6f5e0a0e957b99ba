# tests/conftest.py
import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from fastapi.testclient import TestClient

from api.app import create_app
from bookcase.client import BookcaseClient
from bookcase.sa.database import Database
from bookcase.sa.models import Anthology, Author, Book, Series
from bookcase.services import DevModePopulateService


@pytest.fixture
def database():
    """Fresh in-memory database per test"""
    db = Database("sqlite://")
    db.init_db()
    yield db
    db.drop_all()
    db.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def populated(database):
    """Database loaded with the Flintstones / Rubbles sample library"""
    session = database.get_session()
    try:
        DevModePopulateService(session).populate()
    finally:
        session.close()
    return database

@pytest.fixture
def app(database):
    return create_app(database)

@pytest.fixture
def api_client(app):
    with TestClient(app) as client:
        yield client

@pytest.fixture
def bookcase_client(api_client):
    """Client library wired to the in-process app"""
    return BookcaseClient("http://testserver", session=api_client)


# Lookups by natural key, so tests don't depend on generated ids

def author_named(session, first_name, last_name) -> Author:
    return session.query(Author).filter_by(first_name=first_name, last_name=last_name).one()

def book_titled(session, title) -> Book:
    return session.query(Book).filter_by(title=title).one()

def anthology_titled(session, title) -> Anthology:
    return session.query(Anthology).filter_by(title=title).one()

def series_titled(session, title) -> Series:
    return session.query(Series).filter_by(title=title).one()

@pytest.fixture
def lookup():
    """Natural-key finders: lookup.author(session, "Fred", "Flintstone") etc."""
    class Lookup:
        author = staticmethod(author_named)
        book = staticmethod(book_titled)
        anthology = staticmethod(anthology_titled)
        series = staticmethod(series_titled)
    return Lookup
