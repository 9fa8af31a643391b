from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from leasedesk.database.init import Base
from leasedesk.enums.maintenance_priority import MaintenancePriority
from leasedesk.enums.maintenance_status import MaintenanceStatus
from leasedesk.utils.id_generator import generate_uuid, utc_now


class MaintenanceRequest(Base):
    __tablename__ = "maintenance_requests"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    tenant_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    unit_id = Column(String(36), ForeignKey("units.id"), nullable=False)
    building_id = Column(String(36), ForeignKey("buildings.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    priority = Column(String(20), nullable=False, default=MaintenancePriority.MEDIUM.value)
    status = Column(String(20), nullable=False, default=MaintenanceStatus.OPEN.value)
    created_at = Column(DateTime(timezone=True), default=utc_now)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)

    tenant = relationship("Profile")
    unit = relationship("Unit")
    building = relationship("Building")
