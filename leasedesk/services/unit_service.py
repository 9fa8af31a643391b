from typing import List, Optional
from sqlalchemy.orm import Session, joinedload

from leasedesk.database.models import Building, Unit
from leasedesk.enums.unit_status import UnitStatus
from leasedesk.schemas.building_schema import UnitCreate, UnitWithTenant
from leasedesk.services.base_service import BaseService


class UnitService(BaseService):
    def __init__(self):
        super().__init__(Unit)

    def create_unit(self, db: Session, unit_in: UnitCreate) -> Unit:
        return self.create(db, unit_in, status=UnitStatus.VACANT.value)

    def get_units(self, db: Session, building_id: str) -> List[Unit]:
        return (
            db.query(self.model)
            .options(joinedload(self.model.tenant))
            .filter(self.model.building_id == building_id)
            .order_by(self.model.unit_number.asc())
            .all()
        )

    def get_landlord_unit(self, db: Session, unit_id: str, landlord_id: str) -> Optional[Unit]:
        """The unit, only when its building belongs to the landlord."""
        return (
            db.query(self.model)
            .join(Building, Building.id == self.model.building_id)
            .options(joinedload(self.model.building))
            .filter(self.model.id == unit_id, Building.landlord_id == landlord_id)
            .first()
        )

    def get_tenant_unit(self, db: Session, tenant_id: str, unit_id: Optional[str] = None) -> Optional[Unit]:
        query = (
            db.query(self.model)
            .options(joinedload(self.model.building))
            .filter(self.model.tenant_id == tenant_id)
        )
        if unit_id is not None:
            query = query.filter(self.model.id == unit_id)
        return query.order_by(self.model.created_at.asc()).first()

    def assign_tenant(self, db: Session, unit: Unit, tenant_id: str) -> Unit:
        """Link a tenant to the unit. Flushes only; the caller commits."""
        unit.tenant_id = tenant_id
        unit.status = UnitStatus.OCCUPIED.value
        db.flush()
        return unit

    def with_tenant(self, unit: Unit) -> UnitWithTenant:
        response = UnitWithTenant.model_validate(unit)
        if unit.tenant:
            response.tenant_name = unit.tenant.full_name
            response.tenant_email = unit.tenant.email
            response.tenant_phone = unit.tenant.phone
        return response
