import logging
import uuid
from datetime import date
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from models.orders import Order
from models.order_items import OrderItem
from models.products import Product
from models.audit_mixin import now_ist
from schemas.orders import OrderCreate
from schemas.order_items import OrderItemCreateRequest
from crud.products import adjust_stock
from utils.exceptions import EmptyCart, InsufficientStock, ProductNotFound, TileTrackerError, TransactionFailure
from utils.formatting import to_money
from utils.gst import OrderType
from utils.order_totals import OrderTotals, aggregate_order, round_to_paisa
from utils.pricing import add_to_cart, price_line

logger = logging.getLogger("orders")

def generate_order_id() -> str:
    return f"ORD-{now_ist():%y%m%d%H%M%S}-{uuid.uuid4().hex[:6].upper()}"

def _price_cart(db: Session, items: List[OrderItemCreateRequest]):
    """Price each requested line and merge repeated products into a single line."""
    if not items:
        raise EmptyCart()

    cart = []
    products = {}
    for item in items:
        product = products.get(item.product_id)
        if product is None:
            product = db.query(Product).filter(Product.product_id == item.product_id).first()
            if product is None:
                raise ProductNotFound(item.product_id)
            products[item.product_id] = product
        cart = add_to_cart(cart, price_line(product, item.boxes_sold, item.price_per_box))
    return cart, products

def _check_stock(cart, products):
    for line in cart:
        product = products[line.product_id]
        if line.boxes > product.boxes_on_hand:
            raise InsufficientStock(product.product_id, product.label, product.boxes_on_hand, line.boxes)

def preview_order(db: Session, items: List[OrderItemCreateRequest], order_type: OrderType, client_state: str, is_reverse_charge: bool = False) -> OrderTotals:
    """Price and tax a cart without touching the database, rounded exactly as create_order stores it."""
    cart, products = _price_cart(db, items)
    _check_stock(cart, products)
    return round_to_paisa(aggregate_order(cart, order_type, client_state, is_reverse_charge))

def create_order(db: Session, order: OrderCreate) -> Order:
    """
    Create an order with its items and, for tax invoices, take the boxes out of stock.

    The order row, its item rows and every stock decrement are written in one
    transaction. If any step fails the whole transaction is rolled back, so a
    half-written order never survives; store errors surface as
    TransactionFailure chained to the original exception.
    """
    cart, products = _price_cart(db, order.items)
    _check_stock(cart, products)
    totals = round_to_paisa(aggregate_order(cart, order.order_type, order.client_state, order.is_reverse_charge))
    tax = totals.tax

    order_data = order.model_dump(exclude={"items"})
    db_order = Order(
        **order_data,
        order_id=generate_order_id(),
        gst_type=tax.gst_type,
        subtotal=totals.subtotal,
        igst_rate=tax.igst_rate,
        igst_amount=tax.igst_amount,
        cgst_rate=tax.cgst_rate,
        cgst_amount=tax.cgst_amount,
        sgst_rate=tax.sgst_rate,
        sgst_amount=tax.sgst_amount,
        total_amount=totals.grand_total,
    )

    try:
        db.add(db_order)
        db.flush()

        for line in cart:
            db.add(OrderItem(
                order_id=db_order.order_id,
                product_id=line.product_id,
                boxes_sold=line.boxes,
                price_per_sqft=line.price_per_sqft,
                sqft_per_box=line.sqft_per_box,
                line_total=to_money(line.total_price),
            ))
        db.flush()

        # Quotations are estimates: only tax invoices move stock
        if order.order_type == OrderType.TAX_INVOICE:
            for line in cart:
                adjust_stock(
                    db,
                    product_id=line.product_id,
                    delta=-line.boxes,
                    change_type="sale",
                    order_id=db_order.order_id,
                    note=f"Sold via order {db_order.order_id}",
                )

        db.commit()
    except TileTrackerError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Failed to store order for client '{order.client_name}', rolled back")
        raise TransactionFailure("Order could not be saved", exc) from exc

    logger.info(
        f"Order {db_order.order_id} ({order.order_type.value}) created for '{order.client_name}': "
        f"{totals.total_boxes} boxes, total {db_order.total_amount}"
    )
    return get_order(db, db_order.order_id)

def get_order(db: Session, order_id: str) -> Optional[Order]:
    return db.query(Order).options(selectinload(Order.items)).filter(Order.order_id == order_id).first()

def get_orders(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    order_type: Optional[OrderType] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    search: Optional[str] = None
):
    query = db.query(Order)

    if order_type:
        query = query.filter(Order.order_type == order_type)
    if start_date:
        query = query.filter(Order.order_date >= start_date)
    if end_date:
        query = query.filter(Order.order_date <= end_date)
    if search:
        query = query.filter(Order.client_name.ilike(f"%{search}%"))

    return query.order_by(Order.order_date.desc(), Order.created_at.desc()).options(
        selectinload(Order.items)
    ).offset(skip).limit(limit).all()

def delete_order(db: Session, order_id: str) -> bool:
    """
    Delete an order. A tax invoice first puts every sold box back into stock;
    stock restore, item removal and order removal commit together.
    """
    db_order = get_order(db, order_id)
    if db_order is None:
        return False

    order_type = db_order.order_type
    try:
        if order_type == OrderType.TAX_INVOICE:
            for item in db_order.items:
                if item.product_id is None:
                    continue
                adjust_stock(
                    db,
                    product_id=item.product_id,
                    delta=item.boxes_sold,
                    change_type="return",
                    order_id=order_id,
                    note=f"Order {order_id} deleted",
                )
        # items cascade: the unit of work removes them before the order row
        db.delete(db_order)
        db.commit()
    except TileTrackerError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Failed to delete order {order_id}, rolled back")
        raise TransactionFailure(f"Order {order_id} could not be deleted", exc) from exc

    logger.info(f"Order {order_id} ({order_type.value}) deleted")
    return True
