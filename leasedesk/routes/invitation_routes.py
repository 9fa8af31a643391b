import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from leasedesk.database.init import get_db
from leasedesk.database.models import Profile
from leasedesk.enums.unit_status import UnitStatus
from leasedesk.schemas.invitation_schema import InvitationResponse, SendInviteRequest
from leasedesk.services.email_service import EmailService
from leasedesk.services.invitation_service import InvitationService
from leasedesk.services.unit_service import UnitService
from leasedesk.utils.dependencies import landlord_required
from leasedesk.responses.success import created_response, data_response
from leasedesk.responses.error import (
    bad_request_error,
    forbidden_error,
    internal_server_error,
    not_found_error,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/invitations", tags=["Invitations"])

invitation_service = InvitationService()
unit_service = UnitService()
email_service = EmailService()


@router.post("")
async def send_invite(
    invite_in: SendInviteRequest,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(landlord_required),
):
    """Invite a tenant to a vacant unit in one of the landlord's buildings"""
    if not invite_in.unit_id or (not invite_in.email and not invite_in.phone):
        return bad_request_error("Unit ID and at least email or phone are required")

    unit = unit_service.get_landlord_unit(db, invite_in.unit_id, current_user.id)
    if not unit:
        return forbidden_error("Unit not found or not in your building")

    if unit.status == UnitStatus.OCCUPIED.value:
        return bad_request_error("Unit is already occupied")

    try:
        invitation = invitation_service.create_invitation(
            db, unit, current_user.id, email=invite_in.email, phone=invite_in.phone
        )
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create invitation")
        return internal_server_error("Failed to create invitation")

    if invitation.email:
        try:
            await email_service.send_invitation_email(
                invitation.email,
                invitation_service.invite_link(invitation),
                unit.building.name,
                unit.unit_number,
            )
        except Exception:
            # Best-effort; the invitation token is still valid
            logger.warning(f"Failed to email invitation {invitation.id}", exc_info=True)

    logger.info(f"Invitation {invitation.id} created for unit {unit.id}", extra={"user_id": current_user.id})
    return created_response(InvitationResponse.model_validate(invitation), message="Invitation sent successfully")


@router.get("/verify")
def get_invite_by_token(token: Optional[str] = None, db: Session = Depends(get_db)):
    """Public lookup used by the invitation acceptance page"""
    if not token:
        return bad_request_error("Token is required")

    try:
        invitation = invitation_service.get_pending_by_token(db, token)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to fetch invitation")
        return internal_server_error("Failed to fetch invitation")

    if not invitation:
        return not_found_error("Invalid or expired invitation")

    return data_response(invitation_service.with_details(invitation))


@router.get("")
def list_invitations(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: Profile = Depends(landlord_required),
):
    try:
        invitations = invitation_service.get_invitations(db, current_user.id, skip, limit)
        return data_response([invitation_service.with_unit(i) for i in invitations])
    except SQLAlchemyError:
        logger.exception("Failed to fetch invitations")
        return internal_server_error("Failed to fetch invitations")
