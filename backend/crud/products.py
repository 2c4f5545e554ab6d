import logging
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from models.products import Product
from models.orders import Order
from models.order_items import OrderItem
from schemas.products import ProductCreate, ProductUpdate
from crud.stock_audit import add_stock_audit
from utils.exceptions import InsufficientStock, ProductInUse, ProductNotFound, TransactionFailure
from utils.gst import OrderType
from utils.units import area_per_box, to_canonical

logger = logging.getLogger("products")

def get_product(db: Session, product_id: int):
    return db.query(Product).filter(Product.product_id == product_id).first()

def get_products(db: Session, skip: int = 0, limit: int = 100, brand: Optional[str] = None):
    query = db.query(Product)
    if brand:
        query = query.filter(Product.brand == brand)
    return query.order_by(Product.brand, Product.product_name).offset(skip).limit(limit).all()

def create_product(db: Session, item: ProductCreate, commit: bool = True):
    """
    Add a product to the catalog. Dimensions are converted to feet here, so an
    invalid width/height/tiles-per-box raises InvalidDimension before anything is written.
    """
    tile_width = to_canonical(item.tile_width_value, item.tile_width_unit)
    tile_height = to_canonical(item.tile_height_value, item.tile_height_unit)
    area_per_box(tile_width, tile_height, item.tiles_per_box)

    data = item.model_dump(exclude={"boxes_on_hand"})
    db_item = Product(**data, tile_width=tile_width, tile_height=tile_height, boxes_on_hand=item.boxes_on_hand)
    db.add(db_item)
    db.flush()
    if item.boxes_on_hand:
        add_stock_audit(
            db,
            product_id=db_item.product_id,
            change_type="opening",
            change_amount=item.boxes_on_hand,
            old_quantity=0,
            new_quantity=item.boxes_on_hand,
            note="Opening stock"
        )
    if commit:
        db.commit()
        db.refresh(db_item)
    return db_item

def update_product(db: Session, product_id: int, item: ProductUpdate):
    db_item = get_product(db, product_id)
    if db_item is None:
        return None

    update_data = item.model_dump(exclude_unset=True)
    width_value = update_data.get("tile_width_value", db_item.tile_width_value)
    width_unit = update_data.get("tile_width_unit", db_item.tile_width_unit)
    height_value = update_data.get("tile_height_value", db_item.tile_height_value)
    height_unit = update_data.get("tile_height_unit", db_item.tile_height_unit)

    tile_width = db_item.tile_width
    tile_height = db_item.tile_height
    if "tile_width_value" in update_data or "tile_width_unit" in update_data:
        tile_width = to_canonical(width_value, width_unit or "ft")
    if "tile_height_value" in update_data or "tile_height_unit" in update_data:
        tile_height = to_canonical(height_value, height_unit or "ft")
    area_per_box(tile_width, tile_height, update_data.get("tiles_per_box", db_item.tiles_per_box))

    for key, value in update_data.items():
        setattr(db_item, key, value)
    db_item.tile_width = tile_width
    db_item.tile_height = tile_height
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Failed to update product {product_id}, rolled back")
        raise TransactionFailure(f"Product {product_id} could not be updated", exc) from exc
    db.refresh(db_item)
    return db_item

def delete_product(db: Session, product_id: int) -> bool:
    """
    Delete a product. Products sold on a tax invoice are kept for the invoice
    record (ProductInUse); quotation lines only lose their product link.
    """
    db_item = get_product(db, product_id)
    if db_item is None:
        return False

    invoiced = (
        db.query(OrderItem.item_id)
        .join(Order, Order.order_id == OrderItem.order_id)
        .filter(OrderItem.product_id == product_id, Order.order_type == OrderType.TAX_INVOICE)
        .first()
    )
    if invoiced:
        raise ProductInUse(product_id)

    try:
        db.query(OrderItem).filter(OrderItem.product_id == product_id).update(
            {OrderItem.product_id: None}, synchronize_session="fetch"
        )
        db.delete(db_item)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Failed to delete product {product_id}, rolled back")
        raise TransactionFailure(f"Product {product_id} could not be deleted", exc) from exc
    return True

def adjust_stock(
    db: Session,
    product_id: int,
    delta: int,
    change_type: str,
    order_id: Optional[str] = None,
    inventory_in_id: Optional[int] = None,
    note: Optional[str] = None
) -> int:
    """
    Atomically add `delta` (signed) boxes to a product's stock and audit it.

    The change is one conditional UPDATE: a decrement only matches the row if
    enough stock is left, so two concurrent sales can never both pass and
    drive the count below zero. Runs inside the caller's transaction; the
    caller commits or rolls back.

    Returns:
        The new boxes_on_hand.
    """
    query = db.query(Product).filter(Product.product_id == product_id)
    if delta < 0:
        query = query.filter(Product.boxes_on_hand >= -delta)
    updated = query.update(
        {Product.boxes_on_hand: Product.boxes_on_hand + delta},
        synchronize_session="fetch"
    )

    if updated == 0:
        row = db.query(Product.brand, Product.product_name, Product.boxes_on_hand).filter(
            Product.product_id == product_id
        ).first()
        if row is None:
            raise ProductNotFound(product_id)
        logger.warning(f"Stock change of {delta} rejected for product {product_id}: only {row.boxes_on_hand} boxes on hand")
        raise InsufficientStock(product_id, f"{row.brand} - {row.product_name}", row.boxes_on_hand, -delta)

    new_quantity = db.query(Product.boxes_on_hand).filter(Product.product_id == product_id).scalar()
    add_stock_audit(
        db,
        product_id=product_id,
        change_type=change_type,
        change_amount=delta,
        old_quantity=new_quantity - delta,
        new_quantity=new_quantity,
        order_id=order_id,
        inventory_in_id=inventory_in_id,
        note=note
    )
    return new_quantity
