import json
import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from leasedesk.database.init import get_db
from leasedesk.enums.payment_status import PaymentStatus
from leasedesk.services.email_service import EmailService
from leasedesk.services.payment_service import PaymentService
from leasedesk.routes.payment_routes import paystack_service
from leasedesk.responses.success import success_response
from leasedesk.responses.error import (
    bad_request_error,
    internal_server_error,
    unauthorized_error,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/webhooks", tags=["Webhooks"])

payment_service = PaymentService()
email_service = EmailService()

CHARGE_SUCCESS = "charge.success"
CHARGE_FAILED = "charge.failed"


def _parse_paid_at(value):
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (TypeError, ValueError):
        return None


@router.post("/paystack")
async def paystack_webhook(request: Request, db: Session = Depends(get_db)):
    """Paystack callback. Only events signed with the secret key are applied."""
    raw_body = await request.body()

    if not paystack_service.enabled:
        # Events cannot be authenticated without the secret key
        logger.warning("Rejected Paystack webhook: PAYSTACK_SECRET_KEY is not configured")
        return unauthorized_error("Invalid signature")

    if not paystack_service.verify_signature(raw_body, request.headers.get("x-paystack-signature")):
        logger.warning("Rejected Paystack webhook with invalid signature")
        return unauthorized_error("Invalid signature")

    try:
        event = json.loads(raw_body)
    except ValueError:
        return bad_request_error("Invalid request body")
    if not isinstance(event, dict):
        return bad_request_error("Invalid request body")

    event_type = event.get("event")
    data = event.get("data") or {}
    reference = data.get("reference") if isinstance(data, dict) else None

    if event_type not in (CHARGE_SUCCESS, CHARGE_FAILED) or not reference:
        logger.info(f"Ignoring Paystack event {event_type}", extra={"event": event_type})
        return success_response("Event ignored")

    try:
        payment = payment_service.get_by_reference(db, str(reference))
        if not payment:
            logger.warning(f"Paystack event for unknown reference {reference}", extra={"reference": reference})
            return success_response("Event ignored")

        if payment.status == PaymentStatus.SUCCESSFUL.value:
            return success_response("Event already processed")

        if event_type == CHARGE_SUCCESS:
            payment = payment_service.mark_successful(
                db,
                payment,
                transaction_id=str(data["id"]) if data.get("id") is not None else None,
                channel=data.get("channel"),
                paid_at=_parse_paid_at(data.get("paid_at")),
            )
        else:
            payment = payment_service.mark_failed(db, payment)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to apply Paystack event for {reference}", extra={"reference": reference})
        return internal_server_error("Failed to update payment")

    logger.info(
        f"Payment {payment.id} marked {payment.status}",
        extra={"event": event_type, "reference": reference},
    )

    if payment.status == PaymentStatus.SUCCESSFUL.value and payment.tenant:
        try:
            await email_service.send_payment_receipt_email(
                payment.tenant.email,
                payment.tenant.full_name,
                payment.amount,
                payment.currency,
                payment.period,
                payment.paystack_reference or payment.id,
            )
        except Exception:
            logger.warning(f"Failed to email receipt for payment {payment.id}", exc_info=True)

    return success_response("Event processed")
