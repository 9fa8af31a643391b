from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from leasedesk.config import DEFAULT_CURRENCY
from leasedesk.database.models import Payment, Unit
from leasedesk.enums.payment_status import PaymentStatus
from leasedesk.schemas.payment_schema import PaymentWithDetails
from leasedesk.services.base_service import BaseService
from leasedesk.utils.id_generator import utc_now


class PaymentService(BaseService):
    def __init__(self):
        super().__init__(Payment)

    def create_pending_payment(self, db: Session, tenant_id: str, unit: Unit, period: str) -> Payment:
        payment = Payment(
            tenant_id=tenant_id,
            unit_id=unit.id,
            building_id=unit.building_id,
            amount=unit.rent_amount,
            currency=DEFAULT_CURRENCY,
            status=PaymentStatus.PENDING.value,
            period=period.strip(),
        )
        db.add(payment)
        db.flush()
        # Our own id doubles as the provider reference
        payment.paystack_reference = payment.id
        db.commit()
        db.refresh(payment)
        return payment

    def _details_query(self, db: Session):
        return db.query(self.model).options(
            joinedload(self.model.tenant),
            joinedload(self.model.building),
            joinedload(self.model.unit),
        )

    def get_payments(
        self,
        db: Session,
        tenant_id: Optional[str] = None,
        building_ids: Optional[List[str]] = None,
        status: Optional[str] = None,
        building_id: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Payment]:
        query = self._details_query(db)
        if tenant_id is not None:
            query = query.filter(self.model.tenant_id == tenant_id)
        if building_ids is not None:
            if not building_ids:
                return []
            query = query.filter(self.model.building_id.in_(building_ids))
        if status:
            query = query.filter(self.model.status == status)
        if building_id:
            query = query.filter(self.model.building_id == building_id)
        return query.order_by(self.model.created_at.desc()).offset(skip).limit(limit).all()

    def get_recent_successful(self, db: Session, building_ids: List[str], limit: int = 5) -> List[Payment]:
        return self.get_payments(
            db,
            building_ids=building_ids,
            status=PaymentStatus.SUCCESSFUL.value,
            limit=limit,
        )

    def get_by_reference(self, db: Session, reference: str) -> Optional[Payment]:
        return (
            db.query(self.model)
            .options(joinedload(self.model.tenant))
            .filter((self.model.paystack_reference == reference) | (self.model.id == reference))
            .first()
        )

    def mark_successful(
        self,
        db: Session,
        payment: Payment,
        transaction_id: Optional[str] = None,
        channel: Optional[str] = None,
        paid_at: Optional[datetime] = None,
    ) -> Payment:
        return self.update(db, payment, {
            "status": PaymentStatus.SUCCESSFUL.value,
            "paystack_transaction_id": transaction_id,
            "payment_method": channel,
            "paid_at": paid_at or utc_now(),
        })

    def mark_failed(self, db: Session, payment: Payment) -> Payment:
        return self.update(db, payment, {"status": PaymentStatus.FAILED.value})

    def with_details(self, payment: Payment) -> PaymentWithDetails:
        response = PaymentWithDetails.model_validate(payment)
        response.tenant_name = payment.tenant.full_name if payment.tenant else None
        response.building_name = payment.building.name if payment.building else None
        response.unit_number = payment.unit.unit_number if payment.unit else None
        return response
