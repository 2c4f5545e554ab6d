import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from models.inventory_in import InventoryIn, InventoryInItem
from models.products import Product
from schemas.inventory_in import InventoryInCreate
from crud.products import adjust_stock, create_product
from utils.exceptions import InvalidQuantity, ProductNotFound, TileTrackerError, TransactionFailure

logger = logging.getLogger("inventory_in")

def get_inventory_in_entry(db: Session, entry_id: int):
    return db.query(InventoryIn).options(selectinload(InventoryIn.items)).filter(InventoryIn.id == entry_id).first()

def get_inventory_in_entries(db: Session, skip: int = 0, limit: int = 100):
    return db.query(InventoryIn).options(selectinload(InventoryIn.items)).order_by(
        InventoryIn.date.desc(), InventoryIn.id.desc()
    ).offset(skip).limit(limit).all()

def create_inventory_in_entry(db: Session, entry: InventoryInCreate) -> InventoryIn:
    """
    Record a truck receipt and add every received quantity to stock.

    Lines may reference an existing product or describe a new one, which is
    added to the catalog with no stock before the received boxes are booked.
    Stock-in never lowers a count; the receipt and all stock changes commit together.
    """
    for line in entry.products:
        if line.quantity <= 0:
            raise InvalidQuantity(f"Received quantity must be positive, got {line.quantity}.")

    db_entry = InventoryIn(truck_number=entry.truck_number, date=entry.date)
    try:
        db.add(db_entry)
        db.flush()

        for line in entry.products:
            if line.new_product is not None:
                product = create_product(db, line.new_product.model_copy(update={"boxes_on_hand": 0}), commit=False)
            else:
                product = db.query(Product).filter(Product.product_id == line.product_id).first()
                if product is None:
                    raise ProductNotFound(line.product_id)

            db.add(InventoryInItem(
                inventory_in_id=db_entry.id,
                product_id=product.product_id,
                product_label=product.label,
                quantity=line.quantity,
            ))
            adjust_stock(
                db,
                product_id=product.product_id,
                delta=line.quantity,
                change_type="stock_in",
                inventory_in_id=db_entry.id,
                note=f"Truck {entry.truck_number}",
            )

        db.commit()
    except TileTrackerError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Failed to record stock-in for truck {entry.truck_number}, rolled back")
        raise TransactionFailure("Stock-in entry could not be saved", exc) from exc

    logger.info(f"Stock-in entry {db_entry.id} recorded for truck {entry.truck_number} with {len(entry.products)} product line(s)")
    return get_inventory_in_entry(db, db_entry.id)
