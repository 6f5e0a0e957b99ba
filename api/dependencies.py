# api/dependencies.py
from typing import Iterator
from fastapi import Request
from sqlalchemy.orm import Session


def get_db(request: Request) -> Iterator[Session]:
    """Get a database session.

    This is a FastAPI dependency that will be used to get a database session
    for each request, from the Database the app was created with. The
    session will be automatically closed when the request is complete.

    Yields:
        Session: A SQLAlchemy session
    """
    session = request.app.state.database.get_session()
    try:
        yield session
    finally:
        session.close()
