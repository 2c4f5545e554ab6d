from decimal import Decimal
from types import SimpleNamespace

import pytest

from utils.exceptions import EmptyCart
from utils.gst import GstType, OrderType
from utils.order_totals import aggregate_order, round_to_paisa
from utils.pricing import price_line


def tile(product_id, price_per_sqft="50"):
    return SimpleNamespace(
        product_id=product_id,
        tile_width=Decimal("2"),
        tile_height=Decimal("2"),
        tiles_per_box=5,
        price_per_sqft=Decimal(price_per_sqft),
    )


def test_single_line_tax_invoice_in_home_state():
    totals = aggregate_order([price_line(tile(1), 10)], OrderType.TAX_INVOICE, "Maharashtra")

    assert totals.total_boxes == 10
    assert totals.total_sqft == Decimal("200")
    assert totals.subtotal == Decimal("10000")
    assert totals.tax.gst_type == GstType.CGST_SGST
    assert totals.grand_total == Decimal("11800")
    assert totals.amount_in_words == "Eleven Thousand Eight Hundred Rupees Only"


def test_totals_sum_every_line():
    lines = [price_line(tile(1), 10), price_line(tile(2, "25"), 4, price_per_box="300")]
    totals = aggregate_order(lines, OrderType.QUOTATION, "Gujarat")

    assert totals.total_boxes == 14
    assert totals.total_sqft == Decimal("280")
    assert totals.subtotal == Decimal("11200")
    assert totals.tax.total_tax == 0
    assert totals.grand_total == Decimal("11200")


def test_aggregate_is_repeatable():
    lines = [price_line(tile(1), 3)]
    assert aggregate_order(lines, "tax_invoice", "Kerala") == aggregate_order(lines, "tax_invoice", "Kerala")


def test_empty_cart_is_rejected():
    with pytest.raises(EmptyCart):
        aggregate_order([], OrderType.TAX_INVOICE, "Maharashtra")


def test_round_to_paisa_sums_rounded_components():
    # 10.50 subtotal: CGST and SGST are 0.945 each and both round up
    lines = [price_line(tile(1), 1, price_per_box="10.50")]
    exact = aggregate_order(lines, OrderType.TAX_INVOICE, "Maharashtra")
    rounded = round_to_paisa(exact)

    assert exact.grand_total == Decimal("12.39")
    assert rounded.tax.cgst_amount == rounded.tax.sgst_amount == Decimal("0.95")
    assert rounded.subtotal == Decimal("10.50")
    assert rounded.grand_total == Decimal("12.40")
    assert rounded.amount_in_words == "Twelve Rupees and Forty Paise Only"
    assert rounded.lines == exact.lines
