from pydantic import BaseModel, field_validator, model_validator
from typing import Optional, List
from datetime import date, datetime
from schemas.products import ProductCreate

class InventoryInProductRequest(BaseModel):
    # Either an existing product or a new product to add to the catalog
    product_id: Optional[int] = None
    new_product: Optional[ProductCreate] = None
    quantity: int

    @model_validator(mode='after')
    def check_product_reference(self):
        if (self.product_id is None) == (self.new_product is None):
            raise ValueError('Provide exactly one of product_id or new_product')
        return self

class InventoryInCreate(BaseModel):
    truck_number: str
    date: date
    products: List[InventoryInProductRequest]

    @field_validator('truck_number')
    @classmethod
    def validate_truck_number(cls, v):
        if not v.strip():
            raise ValueError('truck_number is required')
        return v.strip()

class InventoryInItem(BaseModel):
    id: int
    product_id: Optional[int] = None
    product_label: Optional[str] = None
    quantity: int

    class Config:
        from_attributes = True

class InventoryIn(BaseModel):
    id: int
    truck_number: str
    date: date
    created_at: Optional[datetime] = None
    items: List[InventoryInItem] = []

    class Config:
        from_attributes = True
