from pydantic import BaseModel
from typing import List, Optional
from datetime import date

from .auth_schema import ProfileResponse
from .building_schema import BuildingResponse, BuildingWithStats, UnitResponse
from .payment_schema import PaymentResponse, PaymentWithDetails


class LandlordDashboardResponse(BaseModel):
    total_buildings: int
    total_units: int
    occupied_units: int
    total_collected: int  # kobo
    total_pending: int  # kobo
    recent_payments: List[PaymentWithDetails] = []
    active_buildings: List[BuildingWithStats] = []


class TenantDashboardResponse(BaseModel):
    profile: ProfileResponse
    unit: Optional[UnitResponse] = None
    building: Optional[BuildingResponse] = None
    total_paid: int = 0  # kobo
    last_payment: Optional[PaymentResponse] = None
    next_due_date: Optional[date] = None
    next_amount: int = 0  # kobo
