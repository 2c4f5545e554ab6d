"""
GST computation for tile sales.

Rates and the home state are fixed business constants. Amounts are kept as
exact Decimals; rounding happens only when values are persisted or displayed.
"""

from dataclasses import dataclass
from decimal import Decimal
import enum

from utils.exceptions import InvalidQuantity
from utils.units import as_decimal

HOME_STATE = "Maharashtra"

IGST_RATE = Decimal("0.18")
CGST_RATE = Decimal("0.09")
SGST_RATE = Decimal("0.09")

ZERO = Decimal(0)
HUNDRED = Decimal(100)


class OrderType(str, enum.Enum):
    QUOTATION = "quotation"
    TAX_INVOICE = "tax_invoice"


class GstType(str, enum.Enum):
    NONE = "none"
    IGST = "igst"
    CGST_SGST = "cgst_sgst"


@dataclass(frozen=True)
class TaxBreakdown:
    gst_type: GstType
    igst_amount: Decimal
    cgst_amount: Decimal
    sgst_amount: Decimal
    igst_rate: Decimal  # percent, as printed on the invoice
    cgst_rate: Decimal
    sgst_rate: Decimal
    total: Decimal

    @property
    def total_tax(self) -> Decimal:
        return self.igst_amount + self.cgst_amount + self.sgst_amount


def is_home_state(buyer_state) -> bool:
    return (buyer_state or "").strip().casefold() == HOME_STATE.casefold()


def gst_type_for(order_type, buyer_state) -> GstType:
    if OrderType(order_type) == OrderType.QUOTATION:
        return GstType.NONE
    return GstType.CGST_SGST if is_home_state(buyer_state) else GstType.IGST


def compute_tax(subtotal, order_type, buyer_state, is_reverse_charge: bool = False) -> TaxBreakdown:
    """
    Split GST for an order subtotal.

    Quotations carry no tax. Tax invoices under reverse charge carry no tax
    either: the buyer remits it, so the invoice total equals the subtotal.
    Otherwise intra-state sales pay CGST + SGST and inter-state sales pay IGST.
    """
    subtotal = as_decimal(subtotal)
    if subtotal < 0:
        raise InvalidQuantity(f"Subtotal cannot be negative, got {subtotal}.")

    gst_type = gst_type_for(order_type, buyer_state)
    igst = cgst = sgst = ZERO
    igst_rate = cgst_rate = sgst_rate = ZERO

    if gst_type == GstType.CGST_SGST and not is_reverse_charge:
        cgst = subtotal * CGST_RATE
        sgst = subtotal * SGST_RATE
        cgst_rate = CGST_RATE * HUNDRED
        sgst_rate = SGST_RATE * HUNDRED
    elif gst_type == GstType.IGST and not is_reverse_charge:
        igst = subtotal * IGST_RATE
        igst_rate = IGST_RATE * HUNDRED

    return TaxBreakdown(
        gst_type=gst_type,
        igst_amount=igst,
        cgst_amount=cgst,
        sgst_amount=sgst,
        igst_rate=igst_rate,
        cgst_rate=cgst_rate,
        sgst_rate=sgst_rate,
        total=subtotal + igst + cgst + sgst,
    )
