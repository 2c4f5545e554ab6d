from dataclasses import dataclass, replace
from decimal import Decimal
from typing import List, Sequence

from utils.exceptions import EmptyCart
from utils.formatting import amount_to_words, to_money
from utils.gst import TaxBreakdown, compute_tax
from utils.pricing import PricedLine


@dataclass(frozen=True)
class OrderTotals:
    lines: List[PricedLine]
    total_boxes: int
    total_sqft: Decimal
    subtotal: Decimal
    tax: TaxBreakdown
    amount_in_words: str

    @property
    def grand_total(self) -> Decimal:
        return self.tax.total


def aggregate_order(lines: Sequence[PricedLine], order_type, buyer_state, is_reverse_charge: bool = False) -> OrderTotals:
    """Sum priced lines into order totals and apply GST. Pure: same lines, same result."""
    if not lines:
        raise EmptyCart()

    total_boxes = sum(line.boxes for line in lines)
    total_sqft = sum((line.total_sqft for line in lines), Decimal(0))
    subtotal = sum((line.total_price for line in lines), Decimal(0))
    tax = compute_tax(subtotal, order_type, buyer_state, is_reverse_charge)

    return OrderTotals(
        lines=list(lines),
        total_boxes=total_boxes,
        total_sqft=total_sqft,
        subtotal=subtotal,
        tax=tax,
        amount_in_words=amount_to_words(tax.total),
    )


def round_to_paisa(totals: OrderTotals) -> OrderTotals:
    """
    Round subtotal and each tax component to the paisa, as they are stored on
    the order. The grand total is the sum of the rounded components, so it can
    be a paisa away from the exact total when CGST and SGST each round up.
    """
    tax = totals.tax
    subtotal = to_money(totals.subtotal)
    igst = to_money(tax.igst_amount)
    cgst = to_money(tax.cgst_amount)
    sgst = to_money(tax.sgst_amount)
    total = subtotal + igst + cgst + sgst
    return replace(
        totals,
        subtotal=subtotal,
        tax=replace(tax, igst_amount=igst, cgst_amount=cgst, sgst_amount=sgst, total=total),
        amount_in_words=amount_to_words(total),
    )
