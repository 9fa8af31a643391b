from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session

from leasedesk.database.models import Document
from leasedesk.enums.document_type import DocumentType
from leasedesk.services.base_service import BaseService


class DocumentService(BaseService):
    def __init__(self):
        super().__init__(Document)

    def create_document(
        self,
        db: Session,
        uploaded_by: str,
        name: str,
        doc_type: DocumentType,
        file_url: str,
        building_id: Optional[str] = None,
        unit_id: Optional[str] = None,
        file_size: Optional[int] = None,
    ) -> Document:
        document = Document(
            uploaded_by=uploaded_by,
            building_id=building_id,
            unit_id=unit_id,
            name=name.strip(),
            type=doc_type.value,
            file_url=file_url,
            file_size=file_size,
        )
        return self.create(db, document)

    def get_unit_documents(
        self, db: Session, unit_id: str, skip: int = 0, limit: int = 100
    ) -> List[Document]:
        return (
            db.query(self.model)
            .filter(self.model.unit_id == unit_id)
            .order_by(self.model.created_at.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_landlord_documents(
        self,
        db: Session,
        landlord_id: str,
        building_ids: List[str],
        skip: int = 0,
        limit: int = 100,
    ) -> List[Document]:
        """Documents the landlord uploaded plus any attached to their buildings."""
        condition = self.model.uploaded_by == landlord_id
        if building_ids:
            condition = or_(condition, self.model.building_id.in_(building_ids))
        return (
            db.query(self.model)
            .filter(condition)
            .order_by(self.model.created_at.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
