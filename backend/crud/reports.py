import os
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload, selectinload
from models.orders import Order
from models.order_items import OrderItem
from models.products import Product
from utils.formatting import to_money
from utils.gst import OrderType

LOW_STOCK_THRESHOLD = int(os.getenv("LOW_STOCK_THRESHOLD", "10"))

def get_dashboard_stats(db: Session):
    """Stock value at catalog price, boxes in stock, order count and pre-tax invoiced revenue."""
    inventory_value = Decimal(0)
    boxes_in_stock = 0
    for product in db.query(Product).all():
        inventory_value += product.boxes_on_hand * product.area_per_box * product.price_per_sqft
        boxes_in_stock += product.boxes_on_hand

    order_count = db.query(func.count(Order.order_id)).scalar() or 0
    sales_revenue = db.query(func.sum(Order.subtotal)).filter(
        Order.order_type == OrderType.TAX_INVOICE
    ).scalar() or Decimal(0)

    return {
        "inventory_value": to_money(inventory_value),
        "boxes_in_stock": boxes_in_stock,
        "order_count": order_count,
        "sales_revenue": to_money(sales_revenue),
    }

def get_sales_report(
    db: Session,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    brand: Optional[str] = None,
    top: int = 5
):
    """
    Summarise tax invoices in a date range. With a brand filter only invoices
    containing that brand count, and only that brand's lines are broken down.
    """
    query = db.query(Order).options(
        selectinload(Order.items).joinedload(OrderItem.product)
    ).filter(Order.order_type == OrderType.TAX_INVOICE)
    if start_date:
        query = query.filter(Order.order_date >= start_date)
    if end_date:
        query = query.filter(Order.order_date <= end_date)
    orders = query.order_by(Order.order_date.asc()).all()

    if brand:
        orders = [
            order for order in orders
            if any(item.product is not None and item.product.brand == brand for item in order.items)
        ]

    brand_totals = defaultdict(lambda: {"boxes": 0, "total_sqft": Decimal(0), "amount": Decimal(0)})
    product_totals = {}
    for order in orders:
        for item in order.items:
            product = item.product
            item_brand = product.brand if product is not None else "Unknown"
            if brand and item_brand != brand:
                continue
            brand_row = brand_totals[item_brand]
            brand_row["boxes"] += item.boxes_sold
            brand_row["total_sqft"] += item.total_sqft
            brand_row["amount"] += item.line_total

            product_row = product_totals.setdefault(item.product_id, {
                "product_id": item.product_id,
                "label": product.label if product is not None else "Deleted product",
                "boxes": 0,
                "amount": Decimal(0),
            })
            product_row["boxes"] += item.boxes_sold
            product_row["amount"] += item.line_total

    total_sales = sum((order.total_amount for order in orders), Decimal(0))
    total_tax = sum((order.total_amount - order.subtotal for order in orders), Decimal(0))
    average = to_money(total_sales / len(orders)) if orders else Decimal("0.00")

    brand_sales = [
        {"brand": name, "boxes": row["boxes"], "total_sqft": row["total_sqft"], "amount": row["amount"]}
        for name, row in sorted(brand_totals.items(), key=lambda pair: pair[1]["amount"], reverse=True)
    ]
    top_products = sorted(product_totals.values(), key=lambda row: row["amount"], reverse=True)[:top]

    return {
        "start_date": start_date,
        "end_date": end_date,
        "brand": brand,
        "order_count": len(orders),
        "total_sales": total_sales,
        "total_tax": total_tax,
        "average_order_value": average,
        "brand_sales": brand_sales,
        "top_products": top_products,
        "orders": orders,
    }

def get_inventory_report(db: Session, low_stock_threshold: Optional[int] = None):
    threshold = LOW_STOCK_THRESHOLD if low_stock_threshold is None else low_stock_threshold
    rows = []
    total_boxes = 0
    total_value = Decimal(0)
    for product in db.query(Product).order_by(Product.brand, Product.product_name).all():
        area = product.area_per_box
        value = to_money(product.boxes_on_hand * area * product.price_per_sqft)
        rows.append({
            "product_id": product.product_id,
            "brand": product.brand,
            "product_name": product.product_name,
            "boxes_on_hand": product.boxes_on_hand,
            "area_per_box": area,
            "total_sqft": area * product.boxes_on_hand,
            "stock_value": value,
            "low_stock": product.boxes_on_hand <= threshold,
        })
        total_boxes += product.boxes_on_hand
        total_value += value

    return {
        "total_boxes": total_boxes,
        "total_value": total_value,
        "low_stock_threshold": threshold,
        "products": rows,
    }
