from dataclasses import dataclass, replace
from decimal import Decimal
from typing import List, Optional, Union

from utils.exceptions import DivisionByZero, InvalidQuantity
from utils.units import area_per_box, as_decimal


@dataclass(frozen=True)
class CatalogPriced:
    """Line priced at the product's catalog rate."""
    price_per_sqft: Decimal


@dataclass(frozen=True)
class BoxPriced:
    """Line priced by a manually entered price per box (any positive price: used for discounting)."""
    price_per_box: Decimal


LineInput = Union[CatalogPriced, BoxPriced]


@dataclass(frozen=True)
class PricedLine:
    product_id: Optional[int]
    boxes: int
    sqft_per_box: Decimal
    price_per_sqft: Decimal  # effective rate, whichever way the line was priced
    total_sqft: Decimal
    total_price: Decimal


def line_input_for(product, price_per_box=None) -> LineInput:
    if price_per_box is None:
        return CatalogPriced(price_per_sqft=as_decimal(product.price_per_sqft))
    price_per_box = as_decimal(price_per_box)
    if price_per_box <= 0:
        raise InvalidQuantity(f"Price per box must be greater than 0, got {price_per_box}.")
    return BoxPriced(price_per_box=price_per_box)


def resolve_price_per_sqft(line_input: LineInput, sqft_per_box) -> Decimal:
    if isinstance(line_input, CatalogPriced):
        return line_input.price_per_sqft
    sqft_per_box = as_decimal(sqft_per_box)
    if sqft_per_box == 0:
        raise DivisionByZero("Cannot derive a per-sqft price: box area is zero.")
    return line_input.price_per_box / sqft_per_box


def _check_boxes(boxes) -> int:
    if isinstance(boxes, bool) or int(boxes) != boxes or boxes <= 0:
        raise InvalidQuantity(f"Number of boxes must be a positive whole number, got {boxes}.")
    return int(boxes)


def price_line(product, boxes, price_per_box=None) -> PricedLine:
    """
    Price `boxes` boxes of `product`.

    The product only needs `product_id`, `tile_width`, `tile_height` (feet),
    `tiles_per_box` and `price_per_sqft` attributes. When `price_per_box` is
    given it overrides the catalog price and is converted to a per-sqft rate.
    """
    boxes = _check_boxes(boxes)
    sqft_per_box = area_per_box(product.tile_width, product.tile_height, product.tiles_per_box)
    price_per_sqft = resolve_price_per_sqft(line_input_for(product, price_per_box), sqft_per_box)
    total_sqft = sqft_per_box * boxes
    return PricedLine(
        product_id=product.product_id,
        boxes=boxes,
        sqft_per_box=sqft_per_box,
        price_per_sqft=price_per_sqft,
        total_sqft=total_sqft,
        total_price=total_sqft * price_per_sqft,
    )


def merge_lines(existing: PricedLine, boxes) -> PricedLine:
    """Top up an existing line: keep its effective price, add boxes, recompute totals."""
    new_boxes = existing.boxes + _check_boxes(boxes)
    total_sqft = existing.sqft_per_box * new_boxes
    return replace(
        existing,
        boxes=new_boxes,
        total_sqft=total_sqft,
        total_price=total_sqft * existing.price_per_sqft,
    )


def add_to_cart(cart: List[PricedLine], line: PricedLine) -> List[PricedLine]:
    updated = list(cart)
    for index, existing in enumerate(updated):
        if existing.product_id == line.product_id:
            updated[index] = merge_lines(existing, line.boxes)
            return updated
    updated.append(line)
    return updated
