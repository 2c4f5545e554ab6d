from pydantic import BaseModel, field_validator, computed_field
from typing import Optional, List, Dict
from datetime import date, datetime
from decimal import Decimal

PAYMENT_TYPES = ["Cash", "Bank Transfer", "Cheque"]

class LedgerProduct(BaseModel):
    product_id: int
    quantity: int

class LedgerEntryCreate(BaseModel):
    client_name: str
    order_id: Optional[str] = None
    products: List[LedgerProduct] = []
    # Computed from catalog prices of `products` when omitted
    total_amount: Optional[Decimal] = None

    @field_validator('total_amount')
    @classmethod
    def validate_total_amount(cls, v):
        if v is not None and v <= 0:
            raise ValueError('total_amount must be greater than 0')
        return v

    @field_validator('client_name')
    @classmethod
    def validate_client_name(cls, v):
        if not v.strip():
            raise ValueError('client_name is required')
        return v.strip()

class LedgerPaymentCreate(BaseModel):
    payment_type: str = "Cash"
    amount: Decimal
    payment_date: Optional[date] = None
    note: Optional[str] = None

    @field_validator('payment_type')
    @classmethod
    def validate_payment_type(cls, v):
        if v not in PAYMENT_TYPES:
            raise ValueError(f"payment_type must be one of {PAYMENT_TYPES}")
        return v

    @field_validator('amount')
    @classmethod
    def validate_amount(cls, v):
        if v <= 0:
            raise ValueError('amount must be greater than 0')
        return v

class LedgerPayment(BaseModel):
    id: int
    ledger_entry_id: int
    payment_type: str
    amount: Decimal
    payment_date: date
    note: Optional[str] = None

    class Config:
        from_attributes = True

class LedgerEntry(BaseModel):
    id: int
    order_id: Optional[str] = None
    client_name: str
    total_amount: Decimal
    products: Optional[List[LedgerProduct]] = None
    created_at: Optional[datetime] = None
    payments: List[LedgerPayment] = []
    amount_paid: Decimal
    pending_amount: Decimal

    @computed_field
    def status(self) -> str:
        return "cleared" if self.pending_amount <= 0 else "pending"

    class Config:
        from_attributes = True

class LedgerSummary(BaseModel):
    total_sales: Decimal
    total_received: Decimal
    total_pending: Decimal
    received_by_type: Dict[str, Decimal]
