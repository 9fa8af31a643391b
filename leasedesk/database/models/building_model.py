from sqlalchemy import Column, String, Integer, BigInteger, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from leasedesk.database.init import Base
from leasedesk.enums.unit_status import UnitStatus
from leasedesk.utils.id_generator import generate_uuid, utc_now


class Unit(Base):
    __tablename__ = "units"
    __table_args__ = (
        UniqueConstraint("building_id", "unit_number", name="units_building_id_unit_number_key"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    building_id = Column(String(36), ForeignKey("buildings.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant_id = Column(String(36), ForeignKey("profiles.id"), nullable=True, index=True)
    unit_number = Column(String(50), nullable=False)
    rent_amount = Column(BigInteger, nullable=False, default=0)  # in kobo
    lease_start = Column(Date, nullable=True)
    lease_end = Column(Date, nullable=True)
    status = Column(String(20), nullable=False, default=UnitStatus.VACANT.value)
    created_at = Column(DateTime(timezone=True), default=utc_now)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)

    building = relationship("Building", back_populates="units")
    tenant = relationship("Profile", foreign_keys=[tenant_id])


class Building(Base):
    __tablename__ = "buildings"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    landlord_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    name = Column(String(150), nullable=False)
    address = Column(String(255), nullable=False)
    total_units = Column(Integer, nullable=False, default=0)
    photo_url = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utc_now)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)

    units = relationship("Unit", back_populates="building", cascade="all, delete-orphan")
    landlord = relationship("Profile")
