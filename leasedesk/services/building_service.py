from collections import defaultdict
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from leasedesk.database.models import Building, Payment, Unit
from leasedesk.enums.payment_status import PaymentStatus
from leasedesk.enums.unit_status import UnitStatus
from leasedesk.schemas.building_schema import BuildingCreate, BuildingWithStats
from leasedesk.services.base_service import BaseService


def empty_stats() -> dict:
    return {
        "total_units": 0,
        "occupied_units": 0,
        "vacant_units": 0,
        "total_collected": 0,
        "total_pending": 0,
    }


class BuildingService(BaseService):
    def __init__(self):
        super().__init__(Building)

    def create_building(self, db: Session, landlord_id: str, building_in: BuildingCreate) -> Building:
        return self.create(db, building_in, landlord_id=landlord_id)

    def get_buildings(
        self, db: Session, landlord_id: str, skip: int = 0, limit: int = 100
    ) -> List[Building]:
        return (
            db.query(self.model)
            .filter(self.model.landlord_id == landlord_id)
            .order_by(self.model.created_at.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_owned_building(
        self, db: Session, building_id: str, landlord_id: str
    ) -> Optional[Building]:
        return (
            db.query(self.model)
            .filter(self.model.id == building_id, self.model.landlord_id == landlord_id)
            .first()
        )

    def get_building_ids(self, db: Session, landlord_id: str) -> List[str]:
        rows = db.query(self.model.id).filter(self.model.landlord_id == landlord_id).all()
        return [row.id for row in rows]

    def get_stats(self, db: Session, building_ids: List[str]) -> Dict[str, dict]:
        """Unit occupancy and payment totals per building, summed in Python."""
        stats = defaultdict(empty_stats)
        if not building_ids:
            return stats

        units = (
            db.query(Unit.building_id, Unit.status)
            .filter(Unit.building_id.in_(building_ids))
            .all()
        )
        for unit in units:
            building_stats = stats[unit.building_id]
            building_stats["total_units"] += 1
            if unit.status == UnitStatus.OCCUPIED.value:
                building_stats["occupied_units"] += 1
            else:
                building_stats["vacant_units"] += 1

        payments = (
            db.query(Payment.building_id, Payment.amount, Payment.status)
            .filter(Payment.building_id.in_(building_ids))
            .all()
        )
        for payment in payments:
            if payment.status == PaymentStatus.SUCCESSFUL.value:
                stats[payment.building_id]["total_collected"] += payment.amount
            elif payment.status == PaymentStatus.PENDING.value:
                stats[payment.building_id]["total_pending"] += payment.amount

        return stats

    def with_stats(self, building: Building, stats: dict) -> BuildingWithStats:
        response = BuildingWithStats.model_validate(building)
        response.occupied_units = stats["occupied_units"]
        response.vacant_units = stats["vacant_units"]
        response.total_collected = stats["total_collected"]
        response.total_pending = stats["total_pending"]
        return response
