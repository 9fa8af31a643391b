from leasedesk.database.init import Base
from leasedesk.utils.id_generator import generate_uuid, utc_now

from sqlalchemy import Column, String, DateTime


class AuthUser(Base):
    """Credentials owned by the authentication provider, one per login."""

    __tablename__ = "auth_users"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now)
