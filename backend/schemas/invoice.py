from pydantic import BaseModel
from typing import List, Optional
from datetime import date
from decimal import Decimal
from schemas.orders import Order

class CompanyInfo(BaseModel):
    name: str
    address: str
    gst: str
    phone: str
    email: str

class BankDetails(BaseModel):
    account_name: str
    account_number: str
    bank_name: str
    branch: str
    ifsc: str

class InvoiceLine(BaseModel):
    serial_no: int
    product_id: Optional[int] = None
    description: str
    hsn_code: Optional[str] = None
    boxes: int
    sqft_per_box: Decimal
    total_sqft: Decimal
    price_per_sqft: Decimal
    amount: Decimal

class InvoiceData(BaseModel):
    invoice_number: str
    invoice_date: date
    order: Order
    items: List[InvoiceLine]
    company_info: CompanyInfo
    bank_details: BankDetails
    total_boxes: int
    total_sqft: Decimal
    show_tax: bool
    total_display: str
    amount_in_words: str
