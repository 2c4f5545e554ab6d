from pydantic import BaseModel
from datetime import datetime
from typing import Optional

class StockAudit(BaseModel):
    id: int
    product_id: int
    change_type: str
    change_amount: int
    old_quantity: int
    new_quantity: int
    order_id: Optional[str] = None
    inventory_in_id: Optional[int] = None
    note: Optional[str] = None
    timestamp: datetime

    class Config:
        from_attributes = True
