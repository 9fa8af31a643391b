from sqlalchemy import Column, String, BigInteger, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from leasedesk.config import DEFAULT_CURRENCY
from leasedesk.database.init import Base
from leasedesk.enums.payment_status import PaymentStatus
from leasedesk.utils.id_generator import generate_uuid, utc_now


class Payment(Base):
    __tablename__ = "payments"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    tenant_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    unit_id = Column(String(36), ForeignKey("units.id"), nullable=False, index=True)
    building_id = Column(String(36), ForeignKey("buildings.id"), nullable=False, index=True)
    amount = Column(BigInteger, nullable=False)  # in kobo
    currency = Column(String(3), nullable=False, default=DEFAULT_CURRENCY)
    status = Column(String(20), nullable=False, default=PaymentStatus.PENDING.value)
    payment_method = Column(String(50), nullable=True)
    paystack_reference = Column(String(100), nullable=True, unique=True)
    paystack_transaction_id = Column(String(100), nullable=True)
    period = Column(String(50), nullable=False)  # e.g. "Jan 2026"
    paid_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utc_now)

    tenant = relationship("Profile")
    unit = relationship("Unit")
    building = relationship("Building")
