# api/schemas/event.py
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict
from bookcase.sa.models import EventType

class MutatedModelEvent(BaseModel):
    id: int
    model: str
    type: EventType
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

MutatedModelEventList = List[MutatedModelEvent]
