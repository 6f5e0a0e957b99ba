# tests/test_cli.py
import pytest
from click.testing import CliRunner
from bookcase.sa.database import Database
from bookcase.sa.models import Author, Book
from bookcase.services import AuthorService
from cli.main import cli

@pytest.fixture
def runner():
    return CliRunner()

@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'cli.db'}"

def count(database_url, model):
    database = Database(database_url)
    with database.get_db() as session:
        return session.query(model).count()

def test_db_init(runner, database_url):
    result = runner.invoke(cli, ["--database-url", database_url, "db", "init"])
    assert result.exit_code == 0
    assert "Tables created" in result.output
    assert count(database_url, Author) == 0

def test_db_drop_requires_confirmation(runner, database_url):
    runner.invoke(cli, ["--database-url", database_url, "db", "init"])
    result = runner.invoke(cli, ["--database-url", database_url, "db", "drop"], input="n\n")
    assert result.exit_code != 0
    assert count(database_url, Author) == 0

def test_dev_populate_and_depopulate(runner, database_url):
    result = runner.invoke(cli, ["--database-url", database_url, "dev", "populate"])
    assert result.exit_code == 0
    assert "Sample data loaded" in result.output
    assert count(database_url, Author) == 6
    assert count(database_url, Book) == 6

    result = runner.invoke(cli, ["--database-url", database_url, "dev", "depopulate"])
    assert result.exit_code == 0
    assert "authors: 6" in result.output
    assert "stories: 12" in result.output
    assert count(database_url, Author) == 0

def test_dev_populate_twice_fails(runner, database_url):
    runner.invoke(cli, ["--database-url", database_url, "dev", "populate"])
    result = runner.invoke(cli, ["--database-url", database_url, "dev", "populate"])
    assert result.exit_code != 0
    assert "Error loading sample data" in result.output
    assert count(database_url, Author) == 6

def test_events_list(runner, database_url):
    result = runner.invoke(cli, ["--database-url", database_url, "db", "init"])
    result = runner.invoke(cli, ["--database-url", database_url, "events", "list"])
    assert result.exit_code == 0
    assert "No events recorded" in result.output

    database = Database(database_url)
    session = database.get_session()
    try:
        AuthorService(session).insert(Author(first_name="Fred", last_name="Flintstone"))
    finally:
        session.close()

    result = runner.invoke(cli, ["--database-url", database_url, "events", "list"])
    assert result.exit_code == 0
    assert "INSERTED" in result.output
    assert "first_name='Fred'" in result.output

def test_serve(runner, database_url, monkeypatch):
    calls = {}

    def fake_run(app, host, port):
        calls.update(app=app, host=host, port=port)

    monkeypatch.setattr("uvicorn.run", fake_run)
    result = runner.invoke(cli, ["--database-url", database_url, "serve", "--port", "9123"])

    assert result.exit_code == 0
    assert calls["port"] == 9123
    assert calls["host"] == "127.0.0.1"
    assert calls["app"].state.database.connection_string == database_url
