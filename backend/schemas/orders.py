from pydantic import BaseModel, computed_field
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from utils.gst import OrderType, GstType
from utils.formatting import amount_to_words
from schemas.order_items import OrderItem, OrderItemCreateRequest, PricedLine

class OrderBase(BaseModel):
    order_type: OrderType = OrderType.TAX_INVOICE
    client_name: str
    client_phone: str
    client_address: str
    client_state: str
    client_gst: Optional[str] = None
    state_code: Optional[str] = None
    vehicle_no: Optional[str] = None
    eway_bill: Optional[str] = None
    is_reverse_charge: bool = False
    order_date: date

class OrderCreate(OrderBase):
    items: List[OrderItemCreateRequest]

class OrderPreviewRequest(BaseModel):
    order_type: OrderType = OrderType.TAX_INVOICE
    client_state: str
    is_reverse_charge: bool = False
    items: List[OrderItemCreateRequest]

class Order(OrderBase):
    order_id: str
    gst_type: GstType
    subtotal: Decimal
    igst_rate: Decimal
    igst_amount: Decimal
    cgst_rate: Decimal
    cgst_amount: Decimal
    sgst_rate: Decimal
    sgst_amount: Decimal
    total_amount: Decimal
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    items: List[OrderItem] = []

    @computed_field
    def amount_in_words(self) -> str:
        return amount_to_words(self.total_amount)

    class Config:
        from_attributes = True

class OrderPreview(BaseModel):
    lines: List[PricedLine]
    total_boxes: int
    total_sqft: Decimal
    subtotal: Decimal
    gst_type: GstType
    igst_amount: Decimal
    cgst_amount: Decimal
    sgst_amount: Decimal
    total_amount: Decimal
    amount_in_words: str
