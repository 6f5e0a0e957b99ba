# bookcase/services/base.py
from contextlib import contextmanager
from typing import Generic, Iterator, List, Optional, Type, TypeVar
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from bookcase.exceptions import BookcaseError, BadRequest, NotFound, NotUnique, InternalServerError
from bookcase.sa.models import Base, EventType, storable_id, utcnow
from .events import MutatedModelEventService

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)


def lookup(session: Session, model: Type[T], entity_id: int) -> Optional[T]:
    """Primary-key lookup that treats an unstorable id as a missing row"""
    if not storable_id(entity_id):
        return None
    return session.get(model, entity_id)


def require_text(value: Optional[str], field: str) -> None:
    """Raise BadRequest unless value holds some non-whitespace text"""
    if value is None or not str(value).strip():
        raise BadRequest(f"{field}: Required and must not be blank")


def require_reference(value: Optional[int], field: str, kind: str) -> None:
    """Raise BadRequest unless a foreign key value was supplied"""
    if value is None:
        article = "an" if kind[0] in "AEIOU" else "a"
        raise BadRequest(f"{field}: Required and must be a valid reference to {article} {kind}")


def require_storable(value: Optional[int], field: str) -> None:
    """Raise BadRequest if an integer field would overflow its column"""
    if value is not None and not storable_id(value):
        raise BadRequest(f"{field}: {value} is out of range")


def classify(exc: Exception) -> BookcaseError:
    """Map a persistence-layer exception onto the bookcase error taxonomy"""
    if isinstance(exc, BookcaseError):
        return exc
    if isinstance(exc, IntegrityError):
        message = str(exc.orig)
        if "unique" in message.lower():
            return NotUnique(message)
        return BadRequest(message)
    if isinstance(exc, StaleDataError):
        return NotUnique(f"version: {exc}")
    return InternalServerError(str(exc) or type(exc).__name__)


class BaseService(Generic[T]):
    """Shared find/insert/update/delete behaviour for one entity type.

    Subclasses set ``model`` and ``kind`` (used in error messages) and
    implement ``validate`` and ``copy_fields``. Every mutation commits
    exactly once and writes exactly one audit row in the same transaction.
    """

    model: Type[T]
    kind: str

    def __init__(self, session: Session):
        self.session = session
        self.events = MutatedModelEventService(session)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Commit on success; roll back and classify on any failure"""
        try:
            yield
            self.session.commit()
        except Exception as e:
            self.session.rollback()
            error = classify(e)
            if isinstance(error, InternalServerError):
                logger.exception("Unexpected failure on %s", self.kind)
            if error is e:
                raise
            raise error from e

    @contextmanager
    def reading(self) -> Iterator[None]:
        """Classify failures of read-only queries"""
        try:
            yield
        except BookcaseError:
            raise
        except Exception as e:
            logger.exception("Query failed on %s", self.kind)
            raise InternalServerError(str(e) or type(e).__name__) from e

    # Hooks

    def validate(self, entity: T) -> None:
        """Check required fields and foreign keys; raise BadRequest"""
        raise NotImplementedError

    def check_unique(self, entity: T, entity_id: Optional[int]) -> None:
        """Raise NotUnique if entity would collide with another row"""

    def copy_fields(self, source: T, target: T) -> None:
        """Copy the client-editable fields from source onto target"""
        raise NotImplementedError

    # Operations

    def get(self, entity_id: int) -> Optional[T]:
        return lookup(self.session, self.model, entity_id)

    def find(self, entity_id: int) -> T:
        with self.reading():
            entity = self.get(entity_id)
        if entity is None:
            raise NotFound(f"id: Missing {self.kind} {entity_id}")
        return entity

    def find_all(self) -> List[T]:
        raise NotImplementedError

    def insert(self, entity: T) -> T:
        with self.transaction():
            self.validate(entity)
            self.check_unique(entity, None)
            stored = self.model()
            self.copy_fields(entity, stored)
            self.session.add(stored)
            self.session.flush()
            self.events.record(stored, EventType.INSERTED)
        logger.debug("Inserted %s %s", self.kind, stored.id)
        return stored

    def update(self, entity_id: int, entity: T) -> T:
        with self.transaction():
            self.validate(entity)
            stored = self.get(entity_id)
            if stored is None:
                raise NotFound(f"id: Missing {self.kind} {entity_id}")
            self.check_unique(entity, entity_id)
            if entity.version is not None and entity.version != stored.version:
                raise NotUnique(
                    f"version: {self.kind.capitalize()} {entity_id} is at version "
                    f"{stored.version}, not {entity.version}"
                )
            self.copy_fields(entity, stored)
            stored.updated_at = utcnow()
            self.session.flush()
            self.events.record(stored, EventType.UPDATED)
        logger.debug("Updated %s %s", self.kind, entity_id)
        return stored

    def delete(self, entity_id: int) -> T:
        with self.transaction():
            stored = self.get(entity_id)
            if stored is None:
                raise NotFound(f"id: Missing {self.kind} {entity_id}")
            deleted = self.snapshot(stored)
            self.events.record(stored, EventType.DELETED)
            self.session.delete(stored)
            try:
                self.session.flush()
            except StaleDataError as e:
                # Removed by a concurrent request
                raise NotFound(f"id: Missing {self.kind} {entity_id}") from e
        logger.debug("Deleted %s %s", self.kind, entity_id)
        return deleted

    def snapshot(self, entity: T) -> T:
        """Unattached copy of entity's column values"""
        return self.model(**{
            column.key: getattr(entity, column.key)
            for column in self.model.__table__.columns
        })
