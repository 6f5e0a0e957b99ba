# bookcase/services/events.py
from typing import List
import logging

from sqlalchemy.orm import Session

from bookcase.exceptions import NotFound, InternalServerError
from bookcase.sa.models import Base, EventType, MutatedModelEvent, storable_id
from bookcase.sa.repositories import MutatedModelEventRepository

logger = logging.getLogger(__name__)


class MutatedModelEventService:
    """Append-only audit trail of inserts, updates and deletes.

    ``record`` is called by the entity services inside their own
    transaction, so an audit row is committed if and only if the mutation
    it describes is.
    """

    def __init__(self, session: Session):
        self.session = session
        self.repo = MutatedModelEventRepository(session)

    def record(self, entity: Base, type: EventType) -> MutatedModelEvent:
        event = MutatedModelEvent(model=repr(entity), type=type)
        self.session.add(event)
        logger.info("%s %s", type.value, event.model)
        return event

    def find(self, event_id: int) -> MutatedModelEvent:
        try:
            event = self.repo.get_by_id(event_id) if storable_id(event_id) else None
        except Exception as e:
            logger.exception("Query failed on mutated model event %s", event_id)
            raise InternalServerError(str(e) or type(e).__name__) from e
        if event is None:
            raise NotFound(f"id: Missing mutated model event {event_id}")
        return event

    def find_all(self) -> List[MutatedModelEvent]:
        try:
            return self.repo.list_events()
        except Exception as e:
            logger.exception("Query failed on mutated model events")
            raise InternalServerError(str(e) or type(e).__name__) from e
