import logging
from datetime import timedelta
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from leasedesk.config import INVITATION_TTL_DAYS, APP_URL
from leasedesk.database.models import Invitation, Unit
from leasedesk.enums.invitation_status import InvitationStatus
from leasedesk.schemas.invitation_schema import (
    InvitationResponse,
    InvitationWithDetails,
    InvitationWithUnit,
)
from leasedesk.services.base_service import BaseService
from leasedesk.utils.id_generator import generate_invite_token, utc_now, as_utc

logger = logging.getLogger(__name__)


class InvitationService(BaseService):
    def __init__(self):
        super().__init__(Invitation)

    def create_invitation(
        self,
        db: Session,
        unit: Unit,
        landlord_id: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Invitation:
        invitation = Invitation(
            unit_id=unit.id,
            landlord_id=landlord_id,
            email=email,
            phone=phone,
            token=generate_invite_token(),
            status=InvitationStatus.PENDING.value,
            expires_at=utc_now() + timedelta(days=INVITATION_TTL_DAYS),
        )
        return self.create(db, invitation)

    def get_pending_by_token(self, db: Session, token: str) -> Optional[Invitation]:
        """
        Look up a usable invitation.

        A pending invitation past its expiry is flipped to ``expired`` and
        treated as missing.
        """
        invitation = (
            db.query(self.model)
            .options(joinedload(self.model.unit).joinedload(Unit.building))
            .filter(
                self.model.token == token,
                self.model.status == InvitationStatus.PENDING.value,
            )
            .first()
        )
        if invitation is None:
            return None

        if as_utc(invitation.expires_at) <= utc_now():
            invitation.status = InvitationStatus.EXPIRED.value
            db.commit()
            logger.info(f"Invitation {invitation.id} expired")
            return None

        return invitation

    def get_invitations(
        self, db: Session, landlord_id: str, skip: int = 0, limit: int = 100
    ) -> List[Invitation]:
        return (
            db.query(self.model)
            .options(joinedload(self.model.unit))
            .filter(self.model.landlord_id == landlord_id)
            .order_by(self.model.created_at.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def mark_accepted(self, db: Session, invitation: Invitation) -> Invitation:
        """Flushes only; acceptance commits together with the new account."""
        invitation.status = InvitationStatus.ACCEPTED.value
        db.flush()
        return invitation

    def invite_link(self, invitation: Invitation) -> str:
        return f"{APP_URL.rstrip('/')}/invite?token={invitation.token}"

    def with_unit(self, invitation: Invitation) -> InvitationWithUnit:
        response = InvitationWithUnit.model_validate(invitation)
        if invitation.unit:
            response.unit_number = invitation.unit.unit_number
            response.building_id = invitation.unit.building_id
        return response

    def with_details(self, invitation: Invitation) -> InvitationWithDetails:
        unit = invitation.unit
        building = unit.building
        return InvitationWithDetails(
            **InvitationResponse.model_validate(invitation).model_dump(),
            building_name=building.name,
            building_address=building.address,
            building_photo=building.photo_url,
            unit_number=unit.unit_number,
            rent_amount=unit.rent_amount,
        )
