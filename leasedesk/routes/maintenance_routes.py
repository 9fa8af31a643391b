import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from leasedesk.database.init import get_db
from leasedesk.database.models import Profile
from leasedesk.enums.maintenance_priority import MaintenancePriority
from leasedesk.enums.maintenance_status import MaintenanceStatus
from leasedesk.enums.user_role import UserRole
from leasedesk.schemas.maintenance_schema import (
    MaintenanceCreate,
    MaintenanceResponse,
    MaintenanceStatusUpdate,
)
from leasedesk.services.building_service import BuildingService
from leasedesk.services.maintenance_service import MaintenanceService
from leasedesk.services.unit_service import UnitService
from leasedesk.utils.dependencies import get_current_user, landlord_required, tenant_required
from leasedesk.responses.success import created_response, data_response
from leasedesk.responses.error import (
    bad_request_error,
    forbidden_error,
    internal_server_error,
    not_found_error,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/maintenance", tags=["Maintenance"])

building_service = BuildingService()
maintenance_service = MaintenanceService()
unit_service = UnitService()


@router.post("")
def create_request(
    request_in: MaintenanceCreate,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(tenant_required),
):
    if not request_in.title or not request_in.title.strip() or not request_in.description or not request_in.description.strip():
        return bad_request_error("Title and description are required")

    try:
        priority = MaintenancePriority(request_in.priority or MaintenancePriority.MEDIUM.value)
    except ValueError:
        return bad_request_error(f"Invalid priority: {request_in.priority}")

    unit = unit_service.get_tenant_unit(db, current_user.id)
    if not unit:
        return not_found_error("No unit assigned to your account")

    try:
        request = maintenance_service.create_request(
            db, current_user.id, unit, request_in.title, request_in.description, priority
        )
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create maintenance request")
        return internal_server_error("Failed to create maintenance request")

    logger.info(f"Maintenance request {request.id} opened for unit {unit.id}", extra={"user_id": current_user.id})
    return created_response(MaintenanceResponse.model_validate(request), message="Maintenance request submitted")


@router.get("")
def list_requests(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    """Tenants see their own requests, landlords those for their buildings"""
    try:
        if current_user.role == UserRole.TENANT.value:
            requests = maintenance_service.get_requests(db, tenant_id=current_user.id, skip=skip, limit=limit)
        else:
            building_ids = building_service.get_building_ids(db, current_user.id)
            requests = maintenance_service.get_requests(db, building_ids=building_ids, skip=skip, limit=limit)
        return data_response([maintenance_service.with_details(r) for r in requests])
    except SQLAlchemyError:
        logger.exception("Failed to fetch maintenance requests")
        return internal_server_error("Failed to fetch maintenance requests")


@router.put("/{request_id}/status")
def update_request_status(
    request_id: str,
    status_in: MaintenanceStatusUpdate,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(landlord_required),
):
    try:
        status = MaintenanceStatus(status_in.status)
    except ValueError:
        return bad_request_error(f"Invalid status: {status_in.status}")

    try:
        request = maintenance_service.get(db, request_id)
        if not request:
            return not_found_error("Request not found")

        if not building_service.get_owned_building(db, request.building_id, current_user.id):
            return forbidden_error("Not your building")

        request = maintenance_service.update_status(db, request, status)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to update maintenance request {request_id}")
        return internal_server_error("Failed to update request")

    logger.info(f"Maintenance request {request.id} set to {status.value}", extra={"user_id": current_user.id})
    return data_response(MaintenanceResponse.model_validate(request), message="Request status updated")
