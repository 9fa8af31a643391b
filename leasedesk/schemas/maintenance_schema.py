from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class MaintenanceCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None  # defaults to "medium"


class MaintenanceStatusUpdate(BaseModel):
    status: Optional[str] = None


class MaintenanceResponse(BaseModel):
    id: str
    tenant_id: str
    unit_id: str
    building_id: str
    title: str
    description: str
    priority: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class MaintenanceWithDetails(MaintenanceResponse):
    tenant_name: Optional[str] = None
    unit_number: Optional[str] = None
    building_name: Optional[str] = None
