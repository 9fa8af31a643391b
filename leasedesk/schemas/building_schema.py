from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import date, datetime


class BuildingCreate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    total_units: int = 0
    photo_url: Optional[str] = None


class BuildingUpdate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    total_units: Optional[int] = None
    photo_url: Optional[str] = None


class BuildingResponse(BaseModel):
    id: str
    landlord_id: str
    name: str
    address: str
    total_units: int
    photo_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class BuildingWithStats(BuildingResponse):
    occupied_units: int = 0
    vacant_units: int = 0
    total_collected: int = 0  # kobo
    total_pending: int = 0  # kobo


class UnitCreate(BaseModel):
    building_id: Optional[str] = None
    unit_number: Optional[str] = None
    rent_amount: int = 0  # kobo
    lease_start: Optional[date] = None
    lease_end: Optional[date] = None


class UnitUpdate(BaseModel):
    unit_number: Optional[str] = None
    rent_amount: Optional[int] = None
    lease_start: Optional[date] = None
    lease_end: Optional[date] = None


class UnitResponse(BaseModel):
    id: str
    building_id: str
    tenant_id: Optional[str] = None
    unit_number: str
    rent_amount: int
    lease_start: Optional[date] = None
    lease_end: Optional[date] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UnitWithTenant(UnitResponse):
    tenant_name: Optional[str] = None
    tenant_email: Optional[str] = None
    tenant_phone: Optional[str] = None
