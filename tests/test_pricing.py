from decimal import Decimal
from types import SimpleNamespace

import pytest

from utils.exceptions import DivisionByZero, InvalidQuantity
from utils.pricing import (
    BoxPriced,
    CatalogPriced,
    add_to_cart,
    merge_lines,
    price_line,
    resolve_price_per_sqft,
)


def tile(product_id=1, width="2", height="2", tiles_per_box=5, price_per_sqft="50"):
    return SimpleNamespace(
        product_id=product_id,
        tile_width=Decimal(width),
        tile_height=Decimal(height),
        tiles_per_box=tiles_per_box,
        price_per_sqft=Decimal(price_per_sqft),
    )


def test_price_line_at_catalog_rate():
    line = price_line(tile(), 10)
    assert line.sqft_per_box == Decimal("20")
    assert line.total_sqft == Decimal("200")
    assert line.price_per_sqft == Decimal("50")
    assert line.total_price == Decimal("10000")


def test_price_per_box_overrides_catalog_rate():
    line = price_line(tile(), 3, price_per_box=Decimal("900"))
    assert line.price_per_sqft == Decimal("45")
    assert line.total_price == Decimal("2700")


def test_price_per_box_has_no_upper_or_lower_bound():
    assert price_line(tile(), 1, price_per_box="5000").total_price == Decimal("5000")
    assert price_line(tile(), 1, price_per_box="1").total_price == Decimal("1")


@pytest.mark.parametrize("boxes", [0, -2, 1.5])
def test_price_line_rejects_bad_quantities(boxes):
    with pytest.raises(InvalidQuantity):
        price_line(tile(), boxes)


def test_resolve_price_per_sqft():
    assert resolve_price_per_sqft(CatalogPriced(Decimal("42")), Decimal("20")) == Decimal("42")
    assert resolve_price_per_sqft(BoxPriced(Decimal("1000")), Decimal("20")) == Decimal("50")
    with pytest.raises(DivisionByZero):
        resolve_price_per_sqft(BoxPriced(Decimal("1000")), 0)


def test_merge_lines_keeps_existing_price():
    line = price_line(tile(), 2, price_per_box="800")
    merged = merge_lines(line, 3)
    assert merged.boxes == 5
    assert merged.price_per_sqft == Decimal("40")
    assert merged.total_sqft == Decimal("100")
    assert merged.total_price == Decimal("4000")


def test_add_to_cart_merges_same_product_and_leaves_input_untouched():
    first = price_line(tile(product_id=1), 2)
    other = price_line(tile(product_id=2, price_per_sqft="30"), 1)
    cart = add_to_cart([], first)
    cart = add_to_cart(cart, other)

    updated = add_to_cart(cart, price_line(tile(product_id=1), 4))

    assert [line.product_id for line in updated] == [1, 2]
    assert updated[0].boxes == 6
    assert updated[0].total_price == Decimal("6000")
    assert cart[0].boxes == 2


@pytest.mark.parametrize("price_per_box", ["0", "-100", Decimal("-0.01")])
def test_price_per_box_must_be_positive(price_per_box):
    with pytest.raises(InvalidQuantity, match="Price per box must be greater than 0"):
        price_line(tile(), 2, price_per_box=price_per_box)
