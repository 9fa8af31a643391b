from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class DocumentCreate(BaseModel):
    name: Optional[str] = None
    type: Optional[str] = None  # "lease_agreement", "receipt", "other"
    building_id: Optional[str] = None
    unit_id: Optional[str] = None
    file_size: Optional[int] = None


class DocumentResponse(BaseModel):
    id: str
    uploaded_by: str
    building_id: Optional[str] = None
    unit_id: Optional[str] = None
    name: str
    type: str
    file_url: str
    file_size: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
