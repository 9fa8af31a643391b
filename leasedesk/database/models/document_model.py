from sqlalchemy import Column, String, BigInteger, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from leasedesk.database.init import Base
from leasedesk.enums.document_type import DocumentType
from leasedesk.utils.id_generator import generate_uuid, utc_now


class Document(Base):
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    uploaded_by = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    building_id = Column(String(36), ForeignKey("buildings.id"), nullable=True, index=True)
    unit_id = Column(String(36), ForeignKey("units.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(30), nullable=False, default=DocumentType.OTHER.value)
    file_url = Column(String(1000), nullable=False)
    file_size = Column(BigInteger, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utc_now)

    uploader = relationship("Profile")
