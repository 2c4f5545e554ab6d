from pydantic import BaseModel, field_validator
from typing import Optional
from decimal import Decimal
from datetime import datetime
from utils.units import DimensionUnit

class ProductBase(BaseModel):
    brand: str
    product_name: str
    hsn_code: Optional[str] = None
    tiles_per_box: int
    price_per_sqft: Decimal

    @field_validator('price_per_sqft')
    @classmethod
    def validate_price(cls, v):
        if v <= 0:
            raise ValueError('price_per_sqft must be greater than 0')
        return v

class ProductCreate(ProductBase):
    # Dimensions as entered; converted to feet before they are stored
    tile_width_value: Decimal
    tile_width_unit: DimensionUnit = DimensionUnit.FT
    tile_height_value: Decimal
    tile_height_unit: DimensionUnit = DimensionUnit.FT
    # Opening stock, recorded in the stock audit
    boxes_on_hand: int = 0

    @field_validator('boxes_on_hand')
    @classmethod
    def validate_opening_stock(cls, v):
        if v < 0:
            raise ValueError('boxes_on_hand must be greater than or equal to 0')
        return v

class ProductUpdate(BaseModel):
    brand: Optional[str] = None
    product_name: Optional[str] = None
    hsn_code: Optional[str] = None
    tiles_per_box: Optional[int] = None
    price_per_sqft: Optional[Decimal] = None
    tile_width_value: Optional[Decimal] = None
    tile_width_unit: Optional[DimensionUnit] = None
    tile_height_value: Optional[Decimal] = None
    tile_height_unit: Optional[DimensionUnit] = None
    # boxes_on_hand is system-managed: orders and stock-in receipts change it

    @field_validator(
        'brand', 'product_name', 'tiles_per_box', 'price_per_sqft',
        'tile_width_value', 'tile_width_unit', 'tile_height_value', 'tile_height_unit'
    )
    @classmethod
    def validate_not_null(cls, v, info):
        # omit a field to leave it unchanged; only hsn_code can be cleared
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator('price_per_sqft')
    @classmethod
    def validate_price(cls, v):
        if v is not None and v <= 0:
            raise ValueError('price_per_sqft must be greater than 0')
        return v

class Product(ProductBase):
    product_id: int
    tile_width: Decimal
    tile_height: Decimal
    tile_width_value: Optional[Decimal] = None
    tile_width_unit: Optional[DimensionUnit] = None
    tile_height_value: Optional[Decimal] = None
    tile_height_unit: Optional[DimensionUnit] = None
    boxes_on_hand: int
    area_per_box: Decimal
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
