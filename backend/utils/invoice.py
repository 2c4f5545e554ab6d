import os
from dotenv import load_dotenv
from schemas.invoice import BankDetails, CompanyInfo, InvoiceData, InvoiceLine
from schemas.orders import Order as OrderSchema
from utils.formatting import amount_to_words, format_indian_currency
from utils.gst import OrderType

load_dotenv()

COMPANY_NAME = os.getenv("COMPANY_NAME", "Tile Tracker Co.")
COMPANY_ADDRESS = os.getenv("COMPANY_ADDRESS", "123 Ceramic Street, Tileville, Maharashtra 400001")
COMPANY_GST = os.getenv("COMPANY_GST", "27AABCT1234Z1ZA")
COMPANY_PHONE = os.getenv("COMPANY_PHONE", "022-12345678")
COMPANY_EMAIL = os.getenv("COMPANY_EMAIL", "sales@tiletracker.com")

BANK_ACCOUNT_NAME = os.getenv("BANK_ACCOUNT_NAME", COMPANY_NAME)
BANK_ACCOUNT_NUMBER = os.getenv("BANK_ACCOUNT_NUMBER", "1234567890123456")
BANK_NAME = os.getenv("BANK_NAME", "State Bank of India")
BANK_BRANCH = os.getenv("BANK_BRANCH", "Tileville")
BANK_IFSC = os.getenv("BANK_IFSC", "SBIN0001234")

def invoice_number_for(order_id: str) -> str:
    # ORD-250612103045-4F2A -> INV-250612103045-4F2A
    suffix = order_id[4:] if order_id.startswith("ORD-") else order_id
    return f"INV-{suffix}"

def build_invoice_data(order) -> InvoiceData:
    """
    Assemble everything an invoice template needs from a stored order.

    Totals come from the order row as persisted, so the printed figures match
    the audit record exactly.
    """
    lines = []
    for serial_no, item in enumerate(order.items, start=1):
        product = item.product
        lines.append(InvoiceLine(
            serial_no=serial_no,
            product_id=item.product_id,
            description=product.label if product is not None else "Tiles",
            hsn_code=product.hsn_code if product is not None else None,
            boxes=item.boxes_sold,
            sqft_per_box=item.sqft_per_box,
            total_sqft=item.total_sqft,
            price_per_sqft=item.price_per_sqft,
            amount=item.line_total,
        ))

    return InvoiceData(
        invoice_number=invoice_number_for(order.order_id),
        invoice_date=order.order_date,
        order=OrderSchema.model_validate(order),
        items=lines,
        company_info=CompanyInfo(
            name=COMPANY_NAME,
            address=COMPANY_ADDRESS,
            gst=COMPANY_GST,
            phone=COMPANY_PHONE,
            email=COMPANY_EMAIL,
        ),
        bank_details=BankDetails(
            account_name=BANK_ACCOUNT_NAME,
            account_number=BANK_ACCOUNT_NUMBER,
            bank_name=BANK_NAME,
            branch=BANK_BRANCH,
            ifsc=BANK_IFSC,
        ),
        total_boxes=sum(item.boxes_sold for item in order.items),
        total_sqft=sum((item.total_sqft for item in order.items), 0),
        # reverse-charge invoices print no tax lines
        show_tax=order.order_type == OrderType.TAX_INVOICE and not order.is_reverse_charge,
        total_display=format_indian_currency(order.total_amount),
        amount_in_words=amount_to_words(order.total_amount),
    )
