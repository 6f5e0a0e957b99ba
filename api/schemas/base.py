# api/schemas/base.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

class ModelBase(BaseModel):
    """Fields the server assigns; echoed back on update for the version check"""
    id: Optional[int] = None
    version: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class WriteBase(BaseModel):
    # Sending back the version you read turns on the stale-write check
    version: Optional[int] = None

    def to_model(self, model):
        """Build an unsaved ORM instance from this payload"""
        return model(**self.model_dump())
