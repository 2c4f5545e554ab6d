from pydantic import BaseModel, field_validator
from typing import Optional
from decimal import Decimal

class OrderItemCreateRequest(BaseModel):
    product_id: int
    boxes_sold: int
    # Optional manual price per box; overrides the catalog price per sqft
    price_per_box: Optional[Decimal] = None

    @field_validator('price_per_box')
    @classmethod
    def validate_price_per_box(cls, v):
        if v is not None and v <= 0:
            raise ValueError('price_per_box must be greater than 0')
        return v

class OrderItem(BaseModel):
    item_id: int
    order_id: str
    product_id: Optional[int] = None
    boxes_sold: int
    price_per_sqft: Decimal
    sqft_per_box: Decimal
    total_sqft: Decimal
    line_total: Decimal

    class Config:
        from_attributes = True

class PricedLine(BaseModel):
    product_id: Optional[int] = None
    boxes: int
    sqft_per_box: Decimal
    price_per_sqft: Decimal
    total_sqft: Decimal
    total_price: Decimal

    class Config:
        from_attributes = True
