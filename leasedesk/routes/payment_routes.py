import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from leasedesk.database.init import get_db
from leasedesk.database.models import Profile
from leasedesk.enums.payment_status import PaymentStatus
from leasedesk.enums.user_role import UserRole
from leasedesk.schemas.payment_schema import (
    InitializePaymentRequest,
    InitializePaymentResponse,
    PaymentResponse,
)
from leasedesk.services.building_service import BuildingService
from leasedesk.services.payment_service import PaymentService
from leasedesk.services.paystack_service import PaystackError, PaystackService
from leasedesk.services.unit_service import UnitService
from leasedesk.utils.dependencies import get_current_user, tenant_required
from leasedesk.responses.success import created_response, data_response
from leasedesk.responses.error import (
    bad_request_error,
    internal_server_error,
    not_found_error,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/payments", tags=["Payments"])

building_service = BuildingService()
payment_service = PaymentService()
paystack_service = PaystackService()
unit_service = UnitService()


@router.post("/initialize")
def initialize_payment(
    payment_in: InitializePaymentRequest,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(tenant_required),
):
    """Create a pending rent payment and start a checkout for it"""
    if not payment_in.unit_id or not payment_in.period or not payment_in.period.strip():
        return bad_request_error("Unit ID and period are required")

    unit = unit_service.get_tenant_unit(db, current_user.id, payment_in.unit_id)
    if not unit:
        return not_found_error("Unit not found or not assigned to you")

    try:
        payment = payment_service.create_pending_payment(db, current_user.id, unit, payment_in.period)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create payment record")
        return internal_server_error("Failed to create payment record")

    response = InitializePaymentResponse(
        payment=PaymentResponse.model_validate(payment),
        amount_naira=payment.amount / 100,
        reference=payment.paystack_reference,
    )
    message = "Payment initiated (Paystack integration pending)"

    if paystack_service.enabled:
        try:
            checkout = paystack_service.initialize_transaction(
                email=current_user.email,
                amount=payment.amount,
                reference=payment.paystack_reference,
                currency=payment.currency,
                metadata={"payment_id": payment.id, "unit_id": unit.id, "period": payment.period},
            )
        except PaystackError:
            logger.exception(f"Paystack initialization failed for payment {payment.id}", extra={"reference": payment.id})
            payment_service.mark_failed(db, payment)
            return internal_server_error("Failed to initialize payment with provider")

        response.authorization_url = checkout.get("authorization_url", "")
        response.access_code = checkout.get("access_code", "")
        message = "Payment initiated"

    logger.info(f"Payment {payment.id} initiated", extra={"user_id": current_user.id, "reference": payment.id})
    return created_response(response, message=message)


@router.get("")
def list_payments(
    status: Optional[str] = None,
    building_id: Optional[str] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    """Payment history: tenants see their own, landlords their buildings'"""
    if status and status not in [s.value for s in PaymentStatus]:
        return bad_request_error(f"Invalid status: {status}")

    try:
        if current_user.role == UserRole.TENANT.value:
            payments = payment_service.get_payments(
                db, tenant_id=current_user.id, status=status, building_id=building_id, skip=skip, limit=limit
            )
        else:
            building_ids = building_service.get_building_ids(db, current_user.id)
            payments = payment_service.get_payments(
                db, building_ids=building_ids, status=status, building_id=building_id, skip=skip, limit=limit
            )
        return data_response([payment_service.with_details(p) for p in payments])
    except SQLAlchemyError:
        logger.exception("Failed to fetch payments")
        return internal_server_error("Failed to fetch payments")
