from leasedesk.database.init import Base
from leasedesk.utils.id_generator import utc_now

from sqlalchemy import Column, String, DateTime, ForeignKey


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(36), ForeignKey("auth_users.id", ondelete="CASCADE"), primary_key=True)
    role = Column(String(20), nullable=False)
    full_name = Column(String(150), nullable=False)
    email = Column(String(255), index=True, nullable=False)
    phone = Column(String(30), nullable=True)
    avatar_url = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utc_now)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)
