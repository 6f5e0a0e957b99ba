# bookcase/sa/repositories/event.py
from typing import Optional, List
from sqlalchemy.orm import Session
from ..models import MutatedModelEvent

class MutatedModelEventRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, event_id: int) -> Optional[MutatedModelEvent]:
        return self.session.get(MutatedModelEvent, event_id)

    def list_events(self, limit: Optional[int] = None) -> List[MutatedModelEvent]:
        """Audit trail, oldest first"""
        query = self.session.query(MutatedModelEvent).order_by(
            MutatedModelEvent.updated_at, MutatedModelEvent.id
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()
