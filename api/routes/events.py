# api/routes/events.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bookcase.services import MutatedModelEventService
from api.dependencies import get_db
from api.schemas.event import MutatedModelEvent, MutatedModelEventList

router = APIRouter(prefix="/mutatedModelEvents", tags=["events"])

@router.get("", response_model=MutatedModelEventList)
def get_events(db: Session = Depends(get_db)):
    """Audit trail of every insert, update and delete, oldest first"""
    return MutatedModelEventService(db).find_all()

@router.get("/{event_id}", response_model=MutatedModelEvent)
def get_event(event_id: int, db: Session = Depends(get_db)):
    return MutatedModelEventService(db).find(event_id)
