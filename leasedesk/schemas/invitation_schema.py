from pydantic import BaseModel, ConfigDict, EmailStr, field_validator
from typing import Optional
from datetime import datetime


class SendInviteRequest(BaseModel):
    unit_id: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None

    @field_validator("email", "phone", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class InvitationResponse(BaseModel):
    id: str
    unit_id: str
    landlord_id: str
    email: Optional[str] = None
    phone: Optional[str] = None
    token: str
    status: str
    created_at: Optional[datetime] = None
    expires_at: datetime

    model_config = ConfigDict(from_attributes=True)


class InvitationWithUnit(InvitationResponse):
    unit_number: Optional[str] = None
    building_id: Optional[str] = None


class InvitationWithDetails(InvitationResponse):
    building_name: str
    building_address: str
    building_photo: Optional[str] = None
    unit_number: str
    rent_amount: int
