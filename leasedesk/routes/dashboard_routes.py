import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from leasedesk.database.init import get_db
from leasedesk.database.models import Profile
from leasedesk.services.dashboard_service import DashboardService
from leasedesk.utils.dependencies import landlord_required, tenant_required
from leasedesk.responses.success import data_response
from leasedesk.responses.error import internal_server_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/dashboard", tags=["Dashboard"])


@router.get("/landlord")
def get_landlord_dashboard(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(landlord_required),
):
    """Portfolio totals across all of the landlord's buildings"""
    try:
        dashboard = DashboardService(db).get_landlord_dashboard(current_user.id)
        return data_response(dashboard)
    except SQLAlchemyError:
        logger.exception("Failed to build landlord dashboard")
        return internal_server_error("Failed to load dashboard")


@router.get("/tenant")
def get_tenant_dashboard(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(tenant_required),
):
    try:
        dashboard = DashboardService(db).get_tenant_dashboard(current_user)
    except SQLAlchemyError:
        logger.exception("Failed to build tenant dashboard")
        return internal_server_error("Failed to load dashboard")

    if dashboard.unit is None:
        return data_response(dashboard, message="No unit assigned. Accept an invitation to get started.")
    return data_response(dashboard)
