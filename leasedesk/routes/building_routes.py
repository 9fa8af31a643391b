import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from leasedesk.database.init import get_db
from leasedesk.database.models import Profile
from leasedesk.schemas.building_schema import BuildingCreate, BuildingResponse, BuildingUpdate
from leasedesk.services.building_service import BuildingService
from leasedesk.services.unit_service import UnitService
from leasedesk.utils.dependencies import landlord_required
from leasedesk.responses.success import created_response, data_response
from leasedesk.responses.error import (
    bad_request_error,
    internal_server_error,
    not_found_error,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/buildings", tags=["Buildings"])

building_service = BuildingService()
unit_service = UnitService()


@router.get("")
def list_buildings(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: Profile = Depends(landlord_required),
):
    """All buildings owned by the landlord, newest first"""
    try:
        buildings = building_service.get_buildings(db, current_user.id, skip, limit)
        return data_response([BuildingResponse.model_validate(b) for b in buildings])
    except SQLAlchemyError:
        logger.exception("Failed to fetch buildings")
        return internal_server_error("Failed to fetch buildings")


@router.post("")
def create_building(
    building_in: BuildingCreate,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(landlord_required),
):
    if not building_in.name or not building_in.address:
        return bad_request_error("Name and address are required")
    if building_in.total_units < 0:
        return bad_request_error("Total units cannot be negative")

    try:
        building = building_service.create_building(db, current_user.id, building_in)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create building")
        return internal_server_error("Failed to create building")

    logger.info(f"Building {building.id} created", extra={"user_id": current_user.id})
    return created_response(BuildingResponse.model_validate(building), message="Building created successfully")


@router.get("/{building_id}")
def get_building(
    building_id: str,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(landlord_required),
):
    """A single building with occupancy and payment stats"""
    try:
        building = building_service.get_owned_building(db, building_id, current_user.id)
        if not building:
            return not_found_error("Building not found")

        stats = building_service.get_stats(db, [building.id])
        return data_response(building_service.with_stats(building, stats[building.id]))
    except SQLAlchemyError:
        logger.exception(f"Failed to fetch building {building_id}")
        return internal_server_error("Failed to fetch building")


@router.put("/{building_id}")
def update_building(
    building_id: str,
    building_in: BuildingUpdate,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(landlord_required),
):
    values = building_in.model_dump(exclude_none=True)
    if not values:
        return bad_request_error("No fields to update")
    if values.get("total_units", 0) < 0:
        return bad_request_error("Total units cannot be negative")
    for field in ("name", "address"):
        if field in values and not values[field].strip():
            return bad_request_error(f"{field.capitalize()} cannot be empty")

    try:
        building = building_service.get_owned_building(db, building_id, current_user.id)
        if not building:
            return not_found_error("Building not found")

        building = building_service.update(db, building, values)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to update building {building_id}")
        return internal_server_error("Failed to update building")

    return data_response(BuildingResponse.model_validate(building), message="Building updated successfully")


@router.get("/{building_id}/units")
def list_units(
    building_id: str,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(landlord_required),
):
    """Units of a building, with the occupying tenant's contact details"""
    try:
        building = building_service.get_owned_building(db, building_id, current_user.id)
        if not building:
            return not_found_error("Building not found")

        units = unit_service.get_units(db, building.id)
        return data_response([unit_service.with_tenant(u) for u in units])
    except SQLAlchemyError:
        logger.exception(f"Failed to fetch units for building {building_id}")
        return internal_server_error("Failed to fetch units")
