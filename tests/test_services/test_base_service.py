# tests/test_services/test_base_service.py
import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm.exc import StaleDataError
from bookcase.exceptions import BadRequest, InternalServerError, NotFound, NotUnique
from bookcase.sa.database import Database
from bookcase.sa.models import Author
from bookcase.services import AuthorService
from bookcase.services.base import classify

def test_classify_unique_violation():
    error = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: authors.first_name"))
    assert isinstance(classify(error), NotUnique)

def test_classify_foreign_key_violation():
    error = IntegrityError("INSERT", {}, Exception("FOREIGN KEY constraint failed"))
    classified = classify(error)
    assert isinstance(classified, BadRequest)
    assert str(classified) == "FOREIGN KEY constraint failed"

def test_classify_stale_data():
    assert isinstance(classify(StaleDataError("0 rows matched")), NotUnique)

def test_classify_other_database_errors():
    error = OperationalError("SELECT", {}, Exception("disk I/O error"))
    assert isinstance(classify(error), InternalServerError)
    assert isinstance(classify(RuntimeError("boom")), InternalServerError)

def test_classify_keeps_bookcase_errors():
    error = NotFound("id: Missing author 1")
    assert classify(error) is error

def test_unexpected_failure_becomes_internal_server_error(db_session, monkeypatch):
    service = AuthorService(db_session)

    def broken(author, author_id):
        raise RuntimeError("lost connection")

    monkeypatch.setattr(service, "check_unique", broken)
    with pytest.raises(InternalServerError) as exc_info:
        service.insert(Author(first_name="Fred", last_name="Flintstone"))
    assert str(exc_info.value) == "lost connection"
    assert db_session.query(Author).count() == 0

def test_concurrent_update_is_a_conflict(tmp_path):
    """A session holding an old copy of a row cannot overwrite a newer one"""
    database = Database(f"sqlite:///{tmp_path / 'stale.db'}")
    database.init_db()
    first = database.get_session()
    second = database.get_session()
    try:
        author = AuthorService(first).insert(Author(first_name="Fred", last_name="Flintstone"))
        author_id = author.id

        # second session loads version 0 and keeps it in its identity map
        assert AuthorService(second).find(author_id).version == 0
        second.commit()
        stale = second.get(Author, author_id)

        AuthorService(first).update(author_id, Author(first_name="Fred", last_name="Flintstone", notes="first"))

        assert stale.version == 0
        with pytest.raises(NotUnique):
            AuthorService(second).update(
                author_id, Author(first_name="Fred", last_name="Flintstone", notes="second")
            )
    finally:
        first.close()
        second.close()
        database.dispose()

def test_concurrent_delete_is_not_found(tmp_path):
    """Deleting a row another session already removed reports it missing"""
    database = Database(f"sqlite:///{tmp_path / 'gone.db'}")
    database.init_db()
    first = database.get_session()
    second = database.get_session()
    try:
        author_id = AuthorService(first).insert(Author(first_name="Fred", last_name="Flintstone")).id

        stale = second.get(Author, author_id)
        assert stale.version == 0

        AuthorService(first).delete(author_id)

        with pytest.raises(NotFound) as exc_info:
            AuthorService(second).delete(author_id)
        assert str(exc_info.value) == f"id: Missing author {author_id}"
    finally:
        first.close()
        second.close()
        database.dispose()
