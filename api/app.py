# api/app.py
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from bookcase.config import settings
from bookcase.exceptions import BookcaseError, InternalServerError
from bookcase.logging_config import setup_logging
from bookcase.sa.database import Database
from api.routes import anthologies, authors, books, events, members, series, stories

logger = logging.getLogger(__name__)

# CORS configuration
origins = [
    "http://localhost:5173",        # Local Vite dev server
    "http://localhost:4173",        # Local Vite preview
    "http://127.0.0.1:5173",
    "http://localhost",
]


async def bookcase_error_handler(request: Request, exc: BookcaseError):
    """Write the error message verbatim as a plain text body"""
    if isinstance(exc, InternalServerError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
    return PlainTextResponse(str(exc), status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies and parameters as 400, not 422"""
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"][1:]) or error["loc"][0]
        messages.append(f"{field}: {error['msg']}")
    return PlainTextResponse("; ".join(messages), status_code=status.HTTP_400_BAD_REQUEST)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the API application around a Database.

    Args:
        database: Database to serve; a new one on settings.database_url if None

    Returns:
        The configured FastAPI app. Tables are created on startup.
    """
    setup_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Initialize database on startup
        app.state.database.init_db()
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.database = database or Database()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(BookcaseError, bookcase_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(authors.router)
    app.include_router(books.router)
    app.include_router(anthologies.router)
    app.include_router(series.router)
    app.include_router(stories.router)
    app.include_router(members.router)
    app.include_router(events.router)

    @app.get("/")
    async def root():
        return {"message": f"{settings.project_name} {settings.api_version}"}

    return app
