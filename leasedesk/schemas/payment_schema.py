from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class InitializePaymentRequest(BaseModel):
    unit_id: Optional[str] = None
    period: Optional[str] = None  # e.g. "Feb 2026"


class PaymentResponse(BaseModel):
    id: str
    tenant_id: str
    unit_id: str
    building_id: str
    amount: int
    currency: str
    status: str
    payment_method: Optional[str] = None
    paystack_reference: Optional[str] = None
    paystack_transaction_id: Optional[str] = None
    period: str
    paid_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PaymentWithDetails(PaymentResponse):
    tenant_name: Optional[str] = None
    building_name: Optional[str] = None
    unit_number: Optional[str] = None


class InitializePaymentResponse(BaseModel):
    payment: PaymentResponse
    amount_naira: float
    authorization_url: str = ""
    access_code: str = ""
    reference: str
