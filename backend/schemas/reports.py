from pydantic import BaseModel
from typing import Optional, List
from datetime import date
from decimal import Decimal

class DashboardStats(BaseModel):
    inventory_value: Decimal
    boxes_in_stock: int
    order_count: int
    sales_revenue: Decimal

class BrandSales(BaseModel):
    brand: str
    boxes: int
    total_sqft: Decimal
    amount: Decimal

class ProductSales(BaseModel):
    product_id: Optional[int] = None
    label: str
    boxes: int
    amount: Decimal

class SalesReport(BaseModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    brand: Optional[str] = None
    order_count: int
    total_sales: Decimal
    total_tax: Decimal
    average_order_value: Decimal
    brand_sales: List[BrandSales]
    top_products: List[ProductSales]

class InventoryReportRow(BaseModel):
    product_id: int
    brand: str
    product_name: str
    boxes_on_hand: int
    area_per_box: Decimal
    total_sqft: Decimal
    stock_value: Decimal
    low_stock: bool

class InventoryReport(BaseModel):
    total_boxes: int
    total_value: Decimal
    low_stock_threshold: int
    products: List[InventoryReportRow]
