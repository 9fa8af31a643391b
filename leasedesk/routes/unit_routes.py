import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from leasedesk.database.init import get_db
from leasedesk.database.models import Profile
from leasedesk.schemas.building_schema import UnitCreate, UnitResponse, UnitUpdate
from leasedesk.services.building_service import BuildingService
from leasedesk.services.unit_service import UnitService
from leasedesk.utils.dependencies import landlord_required
from leasedesk.responses.success import created_response, data_response
from leasedesk.responses.error import (
    bad_request_error,
    conflict_error,
    forbidden_error,
    internal_server_error,
    not_found_error,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/units", tags=["Units"])

building_service = BuildingService()
unit_service = UnitService()


def _check_lease_dates(lease_start, lease_end):
    if lease_start and lease_end and lease_end < lease_start:
        return bad_request_error("Lease end must be after lease start")
    return None


@router.post("")
def create_unit(
    unit_in: UnitCreate,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(landlord_required),
):
    if not unit_in.building_id or not unit_in.unit_number:
        return bad_request_error("Building ID and unit number are required")
    if unit_in.rent_amount < 0:
        return bad_request_error("Rent amount cannot be negative")
    error = _check_lease_dates(unit_in.lease_start, unit_in.lease_end)
    if error:
        return error

    building = building_service.get_owned_building(db, unit_in.building_id, current_user.id)
    if not building:
        return forbidden_error("Building not found or not yours")

    try:
        unit = unit_service.create_unit(db, unit_in)
    except IntegrityError:
        db.rollback()
        return conflict_error(f"Unit {unit_in.unit_number} already exists in this building")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create unit")
        return internal_server_error("Failed to create unit")

    logger.info(f"Unit {unit.id} created in building {building.id}", extra={"user_id": current_user.id})
    return created_response(UnitResponse.model_validate(unit), message="Unit created successfully")


@router.put("/{unit_id}")
def update_unit(
    unit_id: str,
    unit_in: UnitUpdate,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(landlord_required),
):
    values = unit_in.model_dump(exclude_none=True)
    if not values:
        return bad_request_error("No fields to update")
    if values.get("rent_amount", 0) < 0:
        return bad_request_error("Rent amount cannot be negative")
    if "unit_number" in values and not values["unit_number"].strip():
        return bad_request_error("Unit number cannot be empty")

    unit = unit_service.get_landlord_unit(db, unit_id, current_user.id)
    if not unit:
        return not_found_error("Unit not found")

    error = _check_lease_dates(
        values.get("lease_start", unit.lease_start),
        values.get("lease_end", unit.lease_end),
    )
    if error:
        return error

    try:
        unit = unit_service.update(db, unit, values)
    except IntegrityError:
        db.rollback()
        return conflict_error(f"Unit {values['unit_number']} already exists in this building")
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to update unit {unit_id}")
        return internal_server_error("Failed to update unit")

    return data_response(UnitResponse.model_validate(unit), message="Unit updated successfully")
