from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta
from sqlalchemy.orm import Session

from leasedesk.database.models import Payment, Profile
from leasedesk.enums.payment_status import PaymentStatus
from leasedesk.enums.unit_status import UnitStatus
from leasedesk.schemas.auth_schema import ProfileResponse
from leasedesk.schemas.building_schema import BuildingResponse, UnitResponse
from leasedesk.schemas.dashboard_schema import LandlordDashboardResponse, TenantDashboardResponse
from leasedesk.schemas.payment_schema import PaymentResponse
from leasedesk.services.building_service import BuildingService
from leasedesk.services.payment_service import PaymentService
from leasedesk.services.unit_service import UnitService


def next_due_date(
    lease_start: Optional[date], lease_end: Optional[date], today: date
) -> Optional[date]:
    """
    Next monthly anniversary of the lease start that falls on or after today.

    Day-of-month is clamped for short months (a lease starting on the 31st
    is due on Feb 28/29). Returns None without a lease start or once the
    next due date would fall after the lease end.
    """
    if lease_start is None:
        return None

    months = max((today.year - lease_start.year) * 12 + today.month - lease_start.month, 0)
    due = lease_start + relativedelta(months=months)
    if due < today:
        due = lease_start + relativedelta(months=months + 1)

    if lease_end is not None and due > lease_end:
        return None
    return due


class DashboardService:
    def __init__(self, db: Session):
        self.db = db
        self.building_service = BuildingService()
        self.payment_service = PaymentService()
        self.unit_service = UnitService()

    def get_landlord_dashboard(self, landlord_id: str) -> LandlordDashboardResponse:
        """
        Aggregate occupancy and rent collection over the landlord's buildings.

        Args:
            landlord_id: ID of the landlord profile

        Returns:
            LandlordDashboardResponse
        """
        buildings = self.building_service.get_buildings(self.db, landlord_id, limit=None)
        building_ids = [b.id for b in buildings]
        stats = self.building_service.get_stats(self.db, building_ids)

        total_units = 0
        occupied_units = 0
        total_collected = 0
        total_pending = 0
        active_buildings = []
        for building in buildings:
            building_stats = stats[building.id]
            total_units += building_stats["total_units"]
            occupied_units += building_stats["occupied_units"]
            total_collected += building_stats["total_collected"]
            total_pending += building_stats["total_pending"]
            active_buildings.append(self.building_service.with_stats(building, building_stats))

        recent_payments = [
            self.payment_service.with_details(p)
            for p in self.payment_service.get_recent_successful(self.db, building_ids)
        ]

        return LandlordDashboardResponse(
            total_buildings=len(buildings),
            total_units=total_units,
            occupied_units=occupied_units,
            total_collected=total_collected,
            total_pending=total_pending,
            recent_payments=recent_payments,
            active_buildings=active_buildings,
        )

    def get_tenant_dashboard(self, profile: Profile, today: Optional[date] = None) -> TenantDashboardResponse:
        """
        The tenant's unit, building and payment summary.

        Args:
            profile: the tenant's profile
            today: reference date for the next due date (defaults to today)

        Returns:
            TenantDashboardResponse; unit and building are None when the
            tenant has not accepted an invitation yet
        """
        response = TenantDashboardResponse(profile=ProfileResponse.model_validate(profile))

        unit = self.unit_service.get_tenant_unit(self.db, profile.id)
        if unit is None:
            return response

        payments = (
            self.db.query(Payment)
            .filter(Payment.tenant_id == profile.id, Payment.unit_id == unit.id)
            .order_by(Payment.created_at.desc())
            .all()
        )

        response.unit = UnitResponse.model_validate(unit)
        response.building = BuildingResponse.model_validate(unit.building)
        response.total_paid = sum(
            p.amount for p in payments if p.status == PaymentStatus.SUCCESSFUL.value
        )
        response.last_payment = PaymentResponse.model_validate(payments[0]) if payments else None
        response.next_amount = unit.rent_amount
        if unit.status == UnitStatus.OCCUPIED.value:
            response.next_due_date = next_due_date(
                unit.lease_start, unit.lease_end, today or date.today()
            )
        return response
