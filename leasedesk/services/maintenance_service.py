from typing import List, Optional
from sqlalchemy.orm import Session, joinedload

from leasedesk.database.models import MaintenanceRequest, Unit
from leasedesk.enums.maintenance_priority import MaintenancePriority
from leasedesk.enums.maintenance_status import MaintenanceStatus
from leasedesk.schemas.maintenance_schema import MaintenanceWithDetails
from leasedesk.services.base_service import BaseService


class MaintenanceService(BaseService):
    def __init__(self):
        super().__init__(MaintenanceRequest)

    def create_request(
        self,
        db: Session,
        tenant_id: str,
        unit: Unit,
        title: str,
        description: str,
        priority: MaintenancePriority,
    ) -> MaintenanceRequest:
        request = MaintenanceRequest(
            tenant_id=tenant_id,
            unit_id=unit.id,
            building_id=unit.building_id,
            title=title.strip(),
            description=description.strip(),
            priority=priority.value,
            status=MaintenanceStatus.OPEN.value,
        )
        return self.create(db, request)

    def get_requests(
        self,
        db: Session,
        tenant_id: Optional[str] = None,
        building_ids: Optional[List[str]] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[MaintenanceRequest]:
        query = db.query(self.model).options(
            joinedload(self.model.tenant),
            joinedload(self.model.unit),
            joinedload(self.model.building),
        )
        if tenant_id is not None:
            query = query.filter(self.model.tenant_id == tenant_id)
        if building_ids is not None:
            if not building_ids:
                return []
            query = query.filter(self.model.building_id.in_(building_ids))
        return query.order_by(self.model.created_at.desc()).offset(skip).limit(limit).all()

    def update_status(
        self, db: Session, request: MaintenanceRequest, status: MaintenanceStatus
    ) -> MaintenanceRequest:
        return self.update(db, request, {"status": status.value})

    def with_details(self, request: MaintenanceRequest) -> MaintenanceWithDetails:
        response = MaintenanceWithDetails.model_validate(request)
        response.tenant_name = request.tenant.full_name if request.tenant else None
        response.unit_number = request.unit.unit_number if request.unit else None
        response.building_name = request.building.name if request.building else None
        return response
