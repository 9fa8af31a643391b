import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from leasedesk.database.init import get_db
from leasedesk.database.models import Profile
from leasedesk.enums.document_type import DocumentType
from leasedesk.enums.user_role import UserRole
from leasedesk.schemas.document_schema import DocumentCreate, DocumentResponse
from leasedesk.services.building_service import BuildingService
from leasedesk.services.document_service import DocumentService
from leasedesk.services.unit_service import UnitService
from leasedesk.utils.dependencies import get_current_user
from leasedesk.responses.success import created_response, data_response
from leasedesk.responses.error import (
    bad_request_error,
    forbidden_error,
    internal_server_error,
    not_found_error,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/documents", tags=["Documents"])

building_service = BuildingService()
document_service = DocumentService()
unit_service = UnitService()


@router.post("")
def upload_document(
    document_in: DocumentCreate,
    file_url: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    """
    Record a document stored elsewhere (the file itself lives at file_url).

    Landlords may attach it to one of their buildings or units. A tenant's
    document always belongs to the tenant's own unit.
    """
    if not document_in.name or not document_in.name.strip() or not document_in.type:
        return bad_request_error("Name and type are required")
    if not file_url or not file_url.strip():
        return bad_request_error("file_url is required")
    try:
        doc_type = DocumentType(document_in.type)
    except ValueError:
        return bad_request_error(f"Invalid document type: {document_in.type}")

    building_id = document_in.building_id
    unit_id = document_in.unit_id

    try:
        if current_user.role == UserRole.TENANT.value:
            unit = unit_service.get_tenant_unit(db, current_user.id)
            if not unit:
                return not_found_error("No unit assigned to your account")
            if unit_id and unit_id != unit.id:
                return forbidden_error("Unit not assigned to you")
            unit_id, building_id = unit.id, unit.building_id
        elif unit_id:
            unit = unit_service.get_landlord_unit(db, unit_id, current_user.id)
            if not unit:
                return forbidden_error("Unit not found or not in your building")
            building_id = unit.building_id
        elif building_id:
            if not building_service.get_owned_building(db, building_id, current_user.id):
                return forbidden_error("Building not found or not yours")

        document = document_service.create_document(
            db,
            uploaded_by=current_user.id,
            name=document_in.name,
            doc_type=doc_type,
            file_url=file_url.strip(),
            building_id=building_id,
            unit_id=unit_id,
            file_size=document_in.file_size,
        )
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to save document")
        return internal_server_error("Failed to save document")

    logger.info(f"Document {document.id} uploaded", extra={"user_id": current_user.id})
    return created_response(DocumentResponse.model_validate(document), message="Document uploaded successfully")


@router.get("")
def list_documents(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    try:
        if current_user.role == UserRole.TENANT.value:
            unit = unit_service.get_tenant_unit(db, current_user.id)
            documents = document_service.get_unit_documents(db, unit.id, skip, limit) if unit else []
        else:
            building_ids = building_service.get_building_ids(db, current_user.id)
            documents = document_service.get_landlord_documents(db, current_user.id, building_ids, skip, limit)
        return data_response([DocumentResponse.model_validate(d) for d in documents])
    except SQLAlchemyError:
        logger.exception("Failed to fetch documents")
        return internal_server_error("Failed to fetch documents")
