from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from leasedesk.database.init import Base
from leasedesk.enums.invitation_status import InvitationStatus
from leasedesk.utils.id_generator import generate_uuid, generate_invite_token, utc_now


class Invitation(Base):
    __tablename__ = "invitations"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    unit_id = Column(String(36), ForeignKey("units.id", ondelete="CASCADE"), nullable=False, index=True)
    landlord_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(30), nullable=True)
    token = Column(String(64), unique=True, index=True, nullable=False, default=generate_invite_token)
    status = Column(String(20), nullable=False, default=InvitationStatus.PENDING.value)
    created_at = Column(DateTime(timezone=True), default=utc_now)
    expires_at = Column(DateTime(timezone=True), nullable=False)

    unit = relationship("Unit")
    landlord = relationship("Profile")
